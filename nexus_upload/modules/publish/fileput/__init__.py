from .nexus_uploader import NexusClientError, NexusUploader, RepositoryClient

__all__ = ["NexusClientError", "NexusUploader", "RepositoryClient"]

from .artifact_set import ArtifactSetBuilder, PropertyEvaluator
from .orchestrator import UploadedBatch, UploadOrchestrator, UploadReport

__all__ = [
    "ArtifactSetBuilder",
    "PropertyEvaluator",
    "UploadedBatch",
    "UploadOrchestrator",
    "UploadReport",
]

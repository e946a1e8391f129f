from .pipeline_env import CommonPipelineEnvironment, ConfigurationStore

__all__ = ["CommonPipelineEnvironment", "ConfigurationStore"]

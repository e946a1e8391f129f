from .artifact import (
    ArtifactCoordinates,
    ArtifactDescription,
    ClassifierDescription,
    PublishModule,
    compose_file_path,
    join_folder,
    parse_classifiers,
)
from .errors import (
    DescriptorNotFound,
    DescriptorParseError,
    InvalidClassifier,
    MissingGroupID,
    NexusUploadError,
    PropertyEvaluationError,
    PropertyUnresolved,
    ToolExecutionFailed,
    UnsupportedProjectStructure,
)

__all__ = [
    "ArtifactCoordinates",
    "ArtifactDescription",
    "ClassifierDescription",
    "PublishModule",
    "compose_file_path",
    "join_folder",
    "parse_classifiers",
    "DescriptorNotFound",
    "DescriptorParseError",
    "InvalidClassifier",
    "MissingGroupID",
    "NexusUploadError",
    "PropertyEvaluationError",
    "PropertyUnresolved",
    "ToolExecutionFailed",
    "UnsupportedProjectStructure",
]

"""Failures raised while resolving and publishing artifacts."""

from __future__ import annotations


class NexusUploadError(Exception):
    """Base exception for the upload step."""


class UnsupportedProjectStructure(NexusUploadError):
    """Neither an MTA nor a Maven project was found."""


class MissingGroupID(NexusUploadError):
    """MTA projects need the group id from configuration."""


class DescriptorNotFound(NexusUploadError):
    """A module descriptor (pom.xml, mta.yaml) is missing or not a file."""

    def __init__(self, path: str) -> None:
        super().__init__(f"{path} not found")
        self.path = path


class DescriptorParseError(NexusUploadError):
    """The descriptor file exists but cannot be interpreted."""


class PropertyEvaluationError(NexusUploadError):
    def __init__(self, message: str, *, expression: str, pom_file: str) -> None:
        super().__init__(message)
        self.expression = expression
        self.pom_file = pom_file


class PropertyUnresolved(PropertyEvaluationError):
    """Maven ran but reported the expression as unresolvable."""


class ToolExecutionFailed(PropertyEvaluationError):
    """Maven could not be started or exited with a failure."""


class InvalidClassifier(NexusUploadError):
    """An additional classifier entry is malformed."""

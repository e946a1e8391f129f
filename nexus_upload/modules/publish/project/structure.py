"""Classify the project layout by the descriptors found at its root."""

from __future__ import annotations

from enum import Enum
from pathlib import Path
from typing import Optional, Union

from nexus_upload.modules.publish.domain.constants import MTA_DESCRIPTOR, POM_DESCRIPTOR


class ProjectLayout(str, Enum):
    MTA = "mta"
    MAVEN = "maven"


class ProjectStructureDetector:
    """MTA wins over Maven when both descriptors are present."""

    def uses_mta(self, root: Union[str, Path]) -> bool:
        return (Path(root) / MTA_DESCRIPTOR).is_file()

    def uses_maven(self, root: Union[str, Path]) -> bool:
        return (Path(root) / POM_DESCRIPTOR).is_file()

    def detect(self, root: Union[str, Path]) -> Optional[ProjectLayout]:
        if self.uses_mta(root):
            return ProjectLayout.MTA
        if self.uses_maven(root):
            return ProjectLayout.MAVEN
        return None

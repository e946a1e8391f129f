"""Domain objects describing what gets uploaded."""

from __future__ import annotations

import json
from dataclasses import dataclass
from typing import Any, List, Optional

from .errors import InvalidClassifier


@dataclass
class ArtifactCoordinates:
    """Represents a Maven/Nexus artifact coordinate."""

    groupid: str
    artifactid: str
    version: str
    extension: str = "jar"
    classifier: str = ""

    @property
    def filename(self) -> str:
        name = f"{self.artifactid}-{self.version}"
        if self.classifier:
            name += f"-{self.classifier}"
        return f"{name}.{self.extension}"

    @property
    def path_segments(self) -> List[str]:
        group_path = self.groupid.replace(".", "/")
        return [group_path, self.artifactid, self.version, self.filename]


@dataclass(frozen=True)
class ArtifactDescription:
    """One file to be registered with an upload batch."""

    file: str
    type: str
    classifier: str = ""
    artifact_id: str = ""


@dataclass
class PublishModule:
    """A unit of publication: one descriptor and its build outputs."""

    descriptor_path: str
    descriptor_type: str
    output_folder: str
    group_id: str
    artifact_id: str
    version: str
    packaging: Optional[str] = None


@dataclass(frozen=True)
class ClassifierDescription:
    classifier: str
    type: str

    @classmethod
    def from_dict(cls, payload: Any) -> "ClassifierDescription":
        if not isinstance(payload, dict):
            raise InvalidClassifier(f"invalid additional classifier description {payload!r}")
        classifier = str(payload.get("classifier") or "").strip()
        file_type = str(payload.get("type") or "").strip()
        if not classifier or not file_type:
            raise InvalidClassifier(
                f"invalid additional classifier description (classifier: '{classifier}', type: '{file_type}')"
            )
        return cls(classifier=classifier, type=file_type)


def parse_classifiers(classifiers_json: str) -> List[ClassifierDescription]:
    """Parse the JSON-encoded classifier list; an empty value means none."""
    if not classifiers_json or not classifiers_json.strip():
        return []
    try:
        payload = json.loads(classifiers_json)
    except json.JSONDecodeError as exc:
        raise InvalidClassifier(f"additional classifiers must be a JSON array: {exc}") from exc
    if not isinstance(payload, list):
        raise InvalidClassifier("additional classifiers must be a JSON array")
    return [ClassifierDescription.from_dict(entry) for entry in payload]


def compose_file_path(folder: str, name: str, extension: str) -> str:
    path = f"{name}.{extension}"
    if folder:
        path = f"{folder}/{path}"
    return path


def join_folder(*parts: str) -> str:
    """Join path fragments with '/', dropping empty and '.' fragments."""
    segments = [part.rstrip("/") or "/" for part in parts if part and part != "."]
    return "/".join(segments).replace("//", "/")

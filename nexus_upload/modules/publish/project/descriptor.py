"""Reader for the ``mta.yaml`` project descriptor."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Optional, Union

import yaml

from nexus_upload.modules.publish.domain import DescriptorNotFound, DescriptorParseError


@dataclass(frozen=True)
class MtaDescriptor:
    id: str
    version: str


def _lookup(payload: Dict[Any, Any], key: str) -> Optional[Any]:
    # mta.yaml spells it "ID"; accept any casing
    for candidate, value in payload.items():
        if str(candidate).lower() == key:
            return value
    return None


class MtaDescriptorReader:
    """Extract the identifier and version of an MTA project."""

    def __init__(self) -> None:
        self.log = logging.getLogger(self.__class__.__name__)

    def read(self, path: Union[str, Path]) -> MtaDescriptor:
        descriptor = Path(path)
        if not descriptor.is_file():
            raise DescriptorNotFound(str(path))
        try:
            # scalars stay text; "1.10" must not become the float 1.1
            payload = yaml.load(descriptor.read_text(encoding="utf-8"), Loader=yaml.BaseLoader)
        except yaml.YAMLError as exc:
            raise DescriptorParseError(f"{path} is not valid YAML: {exc}") from exc
        if not isinstance(payload, dict):
            raise DescriptorParseError(f"{path} does not contain a YAML mapping")

        version = _lookup(payload, "version")
        if version is None or str(version).strip() == "":
            raise DescriptorParseError(f"{path} does not declare a version")
        identifier = _lookup(payload, "id")
        result = MtaDescriptor(
            id="" if identifier is None else str(identifier).strip(),
            version=str(version).strip(),
        )
        self.log.info("Read %s: ID=%s version=%s", path, result.id or "-", result.version)
        return result

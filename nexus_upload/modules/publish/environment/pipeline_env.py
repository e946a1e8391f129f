"""Access to values persisted by earlier pipeline steps."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Protocol, Union


class ConfigurationStore(Protocol):
    def get_parameter(self, scope: str, key: str) -> str:  # pragma: no cover - interface
        ...


class CommonPipelineEnvironment:
    """File-backed store: each parameter is the file ``<root>/<scope>/<key>``."""

    def __init__(self, root: Union[str, Path] = ".") -> None:
        self.root = Path(root)
        self.log = logging.getLogger(self.__class__.__name__)

    def get_parameter(self, scope: str, key: str) -> str:
        path = self.root / scope / key
        if not path.is_file():
            self.log.debug("Pipeline parameter %s/%s not set", scope, key)
            return ""
        return path.read_text(encoding="utf-8").strip()

    def set_parameter(self, scope: str, key: str, value: str) -> None:
        path = self.root / scope / key
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(value, encoding="utf-8")

"""Command line entrypoint of the nexus upload step."""

from __future__ import annotations

import logging
from typing import Optional

import httpx
from pydantic import ValidationError

from .bootstrap import ServiceContainer
from .logging_config import configure_logging
from .settings import Settings, get_settings

log = logging.getLogger(__name__)


def main(settings: Optional[Settings] = None, http_client: Optional[httpx.Client] = None) -> int:
    try:
        settings = settings or get_settings()
    except ValidationError as exc:
        configure_logging()
        log.critical("step execution failed: invalid configuration: %s", exc)
        return 1
    configure_logging(settings.verbose)
    try:
        container = ServiceContainer(settings, http_client=http_client)
        report = container.orchestrator.run()
    except Exception as exc:  # noqa: BLE001
        log.critical("step execution failed: %s", exc, exc_info=settings.verbose)
        return 1
    for batch in report.batches:
        log.info(
            "Published %s:%s:%s (%d artifacts)",
            batch.group_id,
            batch.artifact_id,
            batch.version,
            len(batch.artifacts),
        )
    return 0

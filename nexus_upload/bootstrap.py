"""Wire the upload services from one Settings instance."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Optional

import httpx

from nexus_upload.modules.publish.environment import CommonPipelineEnvironment
from nexus_upload.modules.publish.fileput import NexusUploader
from nexus_upload.modules.publish.maven import PomPropertyEvaluator
from nexus_upload.modules.publish.project import MtaDescriptorReader, ProjectStructureDetector
from nexus_upload.modules.publish.service import ArtifactSetBuilder, UploadOrchestrator
from .settings import Settings

log = logging.getLogger(__name__)


@dataclass
class ServiceContainer:
    """Container that wires plain-Python services with shared settings."""

    settings: Settings
    http_client: Optional[httpx.Client] = None
    pipeline_env: CommonPipelineEnvironment = field(init=False)
    uploader: NexusUploader = field(init=False)
    evaluator: PomPropertyEvaluator = field(init=False)
    artifact_set_builder: ArtifactSetBuilder = field(init=False)
    orchestrator: UploadOrchestrator = field(init=False)

    def __post_init__(self) -> None:
        self.pipeline_env = CommonPipelineEnvironment(self.settings.pipeline_env_root)
        self.uploader = NexusUploader(self.settings, client=self.http_client)
        self.evaluator = PomPropertyEvaluator.from_settings(self.settings)
        self.artifact_set_builder = ArtifactSetBuilder(
            self.evaluator,
            final_name_policy=self.settings.final_name_policy,
        )
        self.orchestrator = UploadOrchestrator(
            self.settings,
            client=self.uploader,
            evaluator=self.evaluator,
            builder=self.artifact_set_builder,
            pipeline_env=self.pipeline_env,
            detector=ProjectStructureDetector(),
            descriptor_reader=MtaDescriptorReader(),
        )
        log.debug(
            "Services wired url=%s repository=%s nexus=%s root=%s",
            self.settings.url,
            self.settings.repository,
            self.settings.nexus_version,
            self.settings.project_root,
        )

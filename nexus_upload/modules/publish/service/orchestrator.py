"""Top-level control flow of the nexus upload step."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional

from nexus_upload.modules.publish.domain import (
    ArtifactDescription,
    DescriptorNotFound,
    MissingGroupID,
    PropertyEvaluationError,
    PublishModule,
    UnsupportedProjectStructure,
    compose_file_path,
    join_folder,
    parse_classifiers,
)
from nexus_upload.modules.publish.domain.constants import (
    APPLICATION_MODULE,
    DESCRIPTOR_TYPE_POM,
    DESCRIPTOR_TYPE_YAML,
    PACKAGING_MTAR,
    PIPELINE_ARTIFACT_ID_KEY,
    PIPELINE_ENV_CONFIG_SCOPE,
    PIPELINE_ENV_SCOPE,
    PIPELINE_MTAR_FILE_KEY,
    TARGET_FOLDER,
)
from nexus_upload.modules.publish.environment import ConfigurationStore
from nexus_upload.modules.publish.fileput import RepositoryClient
from nexus_upload.modules.publish.project import (
    MtaDescriptorReader,
    ProjectLayout,
    ProjectStructureDetector,
)
from nexus_upload.settings import Settings
from .artifact_set import ArtifactSetBuilder, PropertyEvaluator


@dataclass
class UploadedBatch:
    module_path: str
    group_id: str
    artifact_id: str
    version: str
    artifacts: List[ArtifactDescription] = field(default_factory=list)
    urls: List[str] = field(default_factory=list)


@dataclass
class UploadReport:
    layout: Optional[ProjectLayout] = None
    batches: List[UploadedBatch] = field(default_factory=list)


class UploadOrchestrator:
    """Detects the layout, resolves coordinates and uploads one batch per module."""

    def __init__(
        self,
        settings: Settings,
        *,
        client: RepositoryClient,
        evaluator: PropertyEvaluator,
        builder: ArtifactSetBuilder,
        pipeline_env: ConfigurationStore,
        detector: Optional[ProjectStructureDetector] = None,
        descriptor_reader: Optional[MtaDescriptorReader] = None,
    ) -> None:
        self.settings = settings
        self.client = client
        self.evaluator = evaluator
        self.builder = builder
        self.pipeline_env = pipeline_env
        self.detector = detector or ProjectStructureDetector()
        self.descriptor_reader = descriptor_reader or MtaDescriptorReader()
        self.root = join_folder(settings.project_root)
        self.log = logging.getLogger(self.__class__.__name__)

    def run(self) -> UploadReport:
        layout = self.detector.detect(self.settings.project_root)
        report = UploadReport(layout=layout)
        if layout is ProjectLayout.MTA:
            self.log.info("MTA project structure detected")
            report.batches.append(self._upload_mta())
        elif layout is ProjectLayout.MAVEN:
            self.log.info("Maven project structure detected")
            report.batches.extend(self._upload_maven())
        else:
            raise UnsupportedProjectStructure(
                f"unsupported project structure in '{self.settings.project_root}'"
            )
        return report

    # ------------------------------------------------------------------ MTA
    def _upload_mta(self) -> UploadedBatch:
        group_id = self.settings.group_id
        if not group_id:
            raise MissingGroupID("the 'groupID' parameter needs to be provided for MTA projects")
        descriptor_path = compose_file_path(self.root, "mta", "yaml")
        descriptor = self.descriptor_reader.read(descriptor_path)

        artifact_id = self.settings.artifact_id or self.pipeline_env.get_parameter(
            PIPELINE_ENV_CONFIG_SCOPE, PIPELINE_ARTIFACT_ID_KEY
        )
        mtar_path = self._in_project(
            self.pipeline_env.get_parameter(PIPELINE_ENV_SCOPE, PIPELINE_MTAR_FILE_KEY)
        )
        self.log.info("MTA archive %s", mtar_path or "-")

        module = PublishModule(
            descriptor_path=descriptor_path,
            descriptor_type=DESCRIPTOR_TYPE_YAML,
            output_folder=self.root,
            group_id=group_id,
            artifact_id=artifact_id,
            version=descriptor.version,
            packaging=PACKAGING_MTAR,
        )
        artifacts = self.builder.build(module, primary_output=mtar_path)
        return self._publish("", module, artifacts)

    # ------------------------------------------------------------------ Maven
    def _upload_maven(self) -> List[UploadedBatch]:
        batches = [self._upload_maven_module("", TARGET_FOLDER, "")]
        # The "application" sub-folder is a fixed archetype convention and optional.
        try:
            batches.append(
                self._upload_maven_module(
                    APPLICATION_MODULE,
                    f"{APPLICATION_MODULE}/{TARGET_FOLDER}",
                    self.settings.additional_classifiers,
                )
            )
        except DescriptorNotFound as exc:
            self.log.info("No '%s' module found (%s), skipping", APPLICATION_MODULE, exc)
        return batches

    def _upload_maven_module(
        self,
        module_path: str,
        target_folder: str,
        additional_classifiers: str,
    ) -> UploadedBatch:
        pom_file = compose_file_path(join_folder(self.root, module_path), "pom", "xml")
        if not Path(pom_file).is_file():
            raise DescriptorNotFound(pom_file)

        group_id = self._resolve_group_id(pom_file)
        artifact_id = self.evaluator.evaluate(pom_file, "project.artifactId")
        version = self.evaluator.evaluate(pom_file, "project.version")
        module = PublishModule(
            descriptor_path=pom_file,
            descriptor_type=DESCRIPTOR_TYPE_POM,
            output_folder=join_folder(self.root, target_folder),
            group_id=group_id,
            artifact_id=artifact_id,
            version=version,
        )
        classifiers = parse_classifiers(additional_classifiers)
        artifacts = self.builder.build(module, classifiers=classifiers)
        return self._publish(module_path, module, artifacts)

    def _resolve_group_id(self, pom_file: str) -> str:
        error: Optional[PropertyEvaluationError] = None
        try:
            group_id = self.evaluator.evaluate(pom_file, "project.groupId")
        except PropertyEvaluationError as exc:
            error = exc
            group_id = ""
        if not group_id:
            if error is not None:
                self.log.warning(
                    "project.groupId of %s not available, using configured group id '%s': %s",
                    pom_file,
                    self.settings.group_id,
                    error,
                )
            group_id = self.settings.group_id
        return group_id

    # ------------------------------------------------------------------ helpers
    def _publish(
        self,
        module_path: str,
        module: PublishModule,
        artifacts: List[ArtifactDescription],
    ) -> UploadedBatch:
        self.client.set_base_url(
            self.settings.url,
            self.settings.nexus_version,
            self.settings.repository,
            module.group_id,
        )
        self.client.set_artifacts_version(module.version)
        for artifact in artifacts:
            self.client.add_artifact(artifact)
        self.log.info(
            "Publishing %d artifacts of %s:%s:%s from %s",
            len(artifacts),
            module.group_id,
            module.artifact_id,
            module.version,
            module.descriptor_path,
        )
        urls = self.client.upload_artifacts()
        return UploadedBatch(
            module_path=module_path,
            group_id=module.group_id,
            artifact_id=module.artifact_id,
            version=module.version,
            artifacts=list(artifacts),
            urls=list(urls or []),
        )

    def _in_project(self, path: str) -> str:
        if not path or Path(path).is_absolute():
            return path
        return join_folder(self.root, path)

"""Assemble the ordered list of artifacts published for one module."""

from __future__ import annotations

import logging
from typing import List, Optional, Protocol, Sequence

from nexus_upload.modules.publish.domain import (
    ArtifactDescription,
    ClassifierDescription,
    InvalidClassifier,
    PropertyUnresolved,
    PublishModule,
    compose_file_path,
)
from nexus_upload.modules.publish.domain.constants import PACKAGING_DEFAULT, PACKAGING_POM
from nexus_upload.settings import FinalNamePolicy


class PropertyEvaluator(Protocol):
    def evaluate(self, pom_file: str, expression: str) -> str:  # pragma: no cover - interface
        ...


class ArtifactSetBuilder:
    """Descriptor first, then the primary build output, then classifier artifacts."""

    def __init__(
        self,
        evaluator: PropertyEvaluator,
        final_name_policy: FinalNamePolicy = FinalNamePolicy.STRICT,
    ) -> None:
        self.evaluator = evaluator
        self.final_name_policy = final_name_policy
        self.log = logging.getLogger(self.__class__.__name__)

    def build(
        self,
        module: PublishModule,
        *,
        primary_output: Optional[str] = None,
        classifiers: Sequence[ClassifierDescription] = (),
    ) -> List[ArtifactDescription]:
        artifacts = [self.descriptor_artifact(module)]
        primary = self.primary_artifact(module, primary_output)
        if primary is not None:
            artifacts.append(primary)
        artifacts.extend(self.classifier_artifacts(module, classifiers))
        return artifacts

    def descriptor_artifact(self, module: PublishModule) -> ArtifactDescription:
        return ArtifactDescription(
            file=module.descriptor_path,
            type=module.descriptor_type,
            classifier="",
            artifact_id=module.artifact_id,
        )

    def primary_artifact(
        self,
        module: PublishModule,
        primary_output: Optional[str] = None,
    ) -> Optional[ArtifactDescription]:
        """Return the main build output, or None for pom-only modules.

        ``primary_output`` is used as-is when the output path is known up
        front (MTA archives); otherwise packaging and finalName are resolved
        from the module's pom.
        """
        if primary_output is not None:
            return ArtifactDescription(
                file=primary_output,
                type=module.packaging or PACKAGING_DEFAULT,
                classifier="",
                artifact_id=module.artifact_id,
            )

        packaging = self.evaluator.evaluate(module.descriptor_path, "project.packaging")
        if packaging == PACKAGING_POM:
            self.log.info("%s has packaging 'pom', only the pom is published", module.descriptor_path)
            return None
        if not packaging:
            packaging = PACKAGING_DEFAULT

        final_name = self._resolve_final_name(module)
        if not final_name:
            self.log.warning(
                "project.build.finalName of %s is empty, skipping the build output",
                module.descriptor_path,
            )
            return None
        return ArtifactDescription(
            file=compose_file_path(module.output_folder, final_name, packaging),
            type=packaging,
            classifier="",
            artifact_id=module.artifact_id,
        )

    def classifier_artifacts(
        self,
        module: PublishModule,
        classifiers: Sequence[ClassifierDescription],
    ) -> List[ArtifactDescription]:
        for entry in classifiers:
            if not entry.classifier or not entry.type:
                raise InvalidClassifier(
                    f"invalid additional classifier description (classifier: '{entry.classifier}', type: '{entry.type}')"
                )
        return [
            ArtifactDescription(
                file=compose_file_path(
                    module.output_folder,
                    f"{module.artifact_id}-{entry.classifier}",
                    entry.type,
                ),
                type=entry.type,
                classifier=entry.classifier,
                artifact_id=module.artifact_id,
            )
            for entry in classifiers
        ]

    def _resolve_final_name(self, module: PublishModule) -> str:
        derived = f"{module.artifact_id}-{module.version}"
        try:
            final_name = self.evaluator.evaluate(module.descriptor_path, "project.build.finalName")
        except PropertyUnresolved:
            if self.final_name_policy is FinalNamePolicy.DERIVE:
                self.log.info("project.build.finalName unresolved, using %s", derived)
                return derived
            raise
        if not final_name and self.final_name_policy is FinalNamePolicy.DERIVE:
            return derived
        return final_name

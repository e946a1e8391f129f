"""HTTP client that uploads artifact batches to Nexus."""

from __future__ import annotations

import logging
import time
from pathlib import Path
from typing import List, Optional, Protocol, Tuple

import httpx

from nexus_upload.modules.publish.domain import ArtifactCoordinates, ArtifactDescription
from nexus_upload.settings import Settings

REPOSITORY_PATHS = {
    "nexus2": "content/repositories",
    "nexus3": "repository",
}


class NexusClientError(Exception):
    """The upload batch was used out of order or with incomplete data."""


class RepositoryClient(Protocol):
    """Batch protocol: set_base_url, set_artifacts_version, add_artifact..., upload_artifacts."""

    def set_base_url(self, url: str, nexus_version: str, repository: str, group_id: str) -> None:  # pragma: no cover - interface
        ...

    def set_artifacts_version(self, version: str) -> None:  # pragma: no cover - interface
        ...

    def add_artifact(self, artifact: ArtifactDescription) -> None:  # pragma: no cover - interface
        ...

    def upload_artifacts(self) -> List[str]:  # pragma: no cover - interface
        ...


def _split_scheme(url: str) -> Tuple[str, str]:
    url = url.strip()
    if "://" in url:
        scheme, rest = url.split("://", 1)
        return scheme.lower(), rest
    return "http", url


class NexusUploader:
    """Upload one batch of artifacts sharing a group id and version."""

    def __init__(self, settings: Settings, client: Optional[httpx.Client] = None) -> None:
        self.settings = settings
        self.log = logging.getLogger(self.__class__.__name__)
        auth = None
        if settings.username and settings.password:
            auth = (settings.username, settings.password)
        self._auth = auth
        self._client = client or httpx.Client(timeout=settings.http_timeout, verify=True)
        self._scheme = "http"
        self.base_path: Optional[str] = None
        self.group_id: Optional[str] = None
        self.version: Optional[str] = None
        self.artifacts: List[ArtifactDescription] = []

    def set_base_url(self, url: str, nexus_version: str, repository: str, group_id: str) -> None:
        if not url or not url.strip():
            raise NexusClientError("nexus url must not be empty")
        repo_path = REPOSITORY_PATHS.get(nexus_version)
        if repo_path is None:
            raise NexusClientError("nexusVersion must be one of 'nexus2' or 'nexus3'")
        if not repository:
            raise NexusClientError("repository must not be empty")
        if not group_id:
            raise NexusClientError("groupID must not be empty")
        scheme, host = _split_scheme(url)
        self._scheme = scheme
        self.base_path = f"{host.rstrip('/')}/{repo_path}/{repository}"
        self.group_id = group_id
        # a new base URL opens a new batch
        self.version = None
        self.artifacts = []

    def set_artifacts_version(self, version: str) -> None:
        if not version:
            raise NexusClientError("version must not be empty")
        self.version = version

    def add_artifact(self, artifact: ArtifactDescription) -> None:
        if not artifact.artifact_id:
            raise NexusClientError("artifact ID must not be empty")
        if not artifact.file:
            raise NexusClientError("artifact file must not be empty")
        if not artifact.type:
            raise NexusClientError("artifact type must not be empty")
        self.artifacts.append(artifact)

    def build_artifact_url(self, artifact: ArtifactDescription) -> str:
        coords = ArtifactCoordinates(
            groupid=self.group_id or "",
            artifactid=artifact.artifact_id,
            version=self.version or "",
            extension=artifact.type,
            classifier=artifact.classifier,
        )
        path = "/".join([self.base_path or "", *coords.path_segments])
        while "//" in path:
            path = path.replace("//", "/")
        return f"{self._scheme}://{path}"

    def upload_artifacts(self) -> List[str]:
        if not self.base_path:
            raise NexusClientError("the upload needs to be configured by calling set_base_url() first")
        if not self.version:
            raise NexusClientError("the upload needs a version, call set_artifacts_version() first")
        if not self.artifacts:
            raise NexusClientError("no artifacts to upload, call add_artifact() first")
        missing = [a.file for a in self.artifacts if not Path(a.file).is_file()]
        if missing:
            raise NexusClientError(f"artifact files not found: {', '.join(missing)}")

        uploaded: List[str] = []
        for artifact in self.artifacts:
            uploaded.append(self._upload_file(artifact))
        self.log.info(
            "Uploaded %d artifacts group=%s version=%s",
            len(uploaded),
            self.group_id,
            self.version,
        )
        self.artifacts = []
        return uploaded

    def _upload_file(self, artifact: ArtifactDescription) -> str:
        url = self.build_artifact_url(artifact)
        size = Path(artifact.file).stat().st_size
        self.log.info(
            "Uploading artifact group=%s artifact=%s version=%s classifier=%s file=%s url=%s",
            self.group_id,
            artifact.artifact_id,
            self.version,
            artifact.classifier or "-",
            artifact.file,
            url,
        )
        start_time = time.time()
        with open(artifact.file, "rb") as handle:
            response = self._client.put(
                url,
                content=handle,
                headers={"Content-Length": str(size)},
                auth=self._auth,
            )
        response.raise_for_status()
        elapsed = max(time.time() - start_time, 1e-3)
        speed_mb_s = (size / 1024 / 1024) / elapsed
        self.log.info(
            "Uploaded %s (%d bytes, %.2f MB/s, %.2fs) status=%s",
            artifact.file,
            size,
            speed_mb_s,
            elapsed,
            response.status_code,
        )
        return url

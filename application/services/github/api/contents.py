"""
GitHub repository contents operations.

Provides methods to look up, read and write single files through the
contents API.
"""

import logging
import base64
from typing import Optional
from urllib.parse import quote

from application.services.github.api.client import GitHubAPIClient
from application.services.github.models.payloads import (
    CommitterPayload,
    ContentsFileResponse,
    ContentsWriteRequest,
    ContentsWriteResponse,
)
from application.services.github.models.types import Committer, ShaLookup
from common.constants import DOWNLOAD_SUCCESS_STATUS, UPLOAD_SUCCESS_STATUSES

logger = logging.getLogger(__name__)


def contents_path(owner: str, repository: str, path: str) -> str:
    """Build the contents API path for a file in a repository."""
    return f"repos/{owner}/{repository}/contents/{quote(path.strip('/'), safe='/')}"


class FileInfo:
    """Information about a file in a repository."""

    def __init__(self, data: ContentsFileResponse):
        self.name: str = data.name
        self.path: str = data.path
        self.type: str = data.type
        self.size: int = data.size
        self.sha: str = data.sha
        self.download_url: Optional[str] = data.download_url
        self._content: Optional[str] = data.content
        self._encoding: str = data.encoding

    @property
    def is_file(self) -> bool:
        """Check if this is a file."""
        return self.type == "file"

    @property
    def has_inline_content(self) -> bool:
        """Whether the response carried the file body.

        Files over 1 MB come back with empty content and encoding "none";
        their bytes have to be fetched from ``download_url``.
        """
        if self._content is None or self._encoding != "base64":
            return False
        return bool(self._content.strip()) or self.size == 0

    def get_bytes(self) -> bytes:
        """Get decoded file content.

        The API wraps base64 content at 60 columns, so embedded newlines are
        ignored.

        Raises:
            ValueError: If the content is missing or not valid base64
        """
        if self._content is None:
            raise ValueError(f"No content returned for {self.path}")

        if self._encoding != "base64":
            return self._content.encode("utf-8")

        compact = "".join(self._content.split())
        return base64.b64decode(compact, validate=True)

    def __repr__(self) -> str:
        return f"FileInfo(name='{self.name}', type='{self.type}', path='{self.path}')"


class ContentsOperations:
    """Handles GitHub repository contents operations."""

    def __init__(self, client: GitHubAPIClient):
        """Initialize contents operations.

        Args:
            client: Open GitHub API client
        """
        self.client = client

    async def lookup_sha(
        self,
        owner: str,
        repository: str,
        path: str,
        ref: Optional[str] = None,
    ) -> ShaLookup:
        """Find the sha of an existing file.

        Never raises: any error while looking up is reported as
        ``LOOKUP_FAILED`` and callers treat it like an absent file.

        Args:
            owner: Repository owner
            repository: Repository name
            path: File path in the repository
            ref: Git reference (branch, tag, commit SHA)

        Returns:
            ShaLookup describing whether the file exists
        """
        params = {"ref": ref} if ref else None
        try:
            response = await self.client.get(contents_path(owner, repository, path), params=params)
            if response.status_code != DOWNLOAD_SUCCESS_STATUS:
                logger.info(f"No existing file at {owner}/{repository}/{path} (status {response.status_code})")
                return ShaLookup.absent()
            sha = ContentsFileResponse.model_validate(response.json()).sha
            return ShaLookup.found(sha)
        except Exception as e:
            logger.warning(f"SHA lookup for {owner}/{repository}/{path} failed, treating file as new: {e}")
            return ShaLookup.failed(str(e))

    async def put_file(
        self,
        owner: str,
        repository: str,
        path: str,
        content_b64: str,
        message: str,
        committer: Committer,
        sha: Optional[str] = None,
        branch: Optional[str] = None,
    ) -> Optional[ContentsWriteResponse]:
        """Create or update a file.

        Args:
            owner: Repository owner
            repository: Repository name
            path: File path in the repository
            content_b64: Base64 encoded file content
            message: Commit message
            committer: Commit identity
            sha: Sha of the file being replaced (required to update)
            branch: Target branch (repository default when omitted)

        Returns:
            Parsed response on 200/201, None otherwise
        """
        payload = ContentsWriteRequest(
            message=message,
            committer=CommitterPayload(name=committer.name, email=committer.email),
            content=content_b64,
            sha=sha,
            branch=branch,
        )
        response = await self.client.put(contents_path(owner, repository, path), data=payload.to_body())

        if response.status_code not in UPLOAD_SUCCESS_STATUSES:
            logger.error(
                f"Error uploading file to {owner}/{repository}/{path} "
                f"(status {response.status_code}): {response.text[:400]}"
            )
            return None

        return ContentsWriteResponse.model_validate(response.json())

    async def get_file(
        self,
        owner: str,
        repository: str,
        path: str,
        ref: Optional[str] = None,
    ) -> Optional[FileInfo]:
        """Get a single file including its encoded content.

        Args:
            owner: Repository owner
            repository: Repository name
            path: File path in the repository
            ref: Git reference (branch, tag, commit SHA)

        Returns:
            FileInfo on 200, None otherwise
        """
        params = {"ref": ref} if ref else None
        response = await self.client.get(contents_path(owner, repository, path), params=params)

        if response.status_code != DOWNLOAD_SUCCESS_STATUS:
            logger.error(
                f"Error downloading {owner}/{repository}/{path} "
                f"(status {response.status_code})"
            )
            return None

        return FileInfo(ContentsFileResponse.model_validate(response.json()))

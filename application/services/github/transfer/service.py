"""
Remote file transfer client.

Uploads a local file to a GitHub repository through the contents API and
downloads a remote file to local disk. Each call opens its own API session
and closes it before returning, so the client holds no per-call state and
concurrent calls do not interfere.
"""

import base64
import logging
from typing import Optional

from application.services.github.api.client import GitHubAPIClient
from application.services.github.api.contents import ContentsOperations
from application.services.github.models.payloads import ContentsWriteResponse
from application.services.github.models.types import (
    Committer,
    TransferRequest,
    UploadResult,
)
from application.services.github.transfer.strategies import (
    DirectUrlDownload,
    DownloadStrategy,
    RepositoryPathDownload,
)
from common.constants import DEFAULT_COMMIT_MESSAGE

logger = logging.getLogger(__name__)


class RemoteFileTransferClient:
    """Upload and download single files against the GitHub contents API."""

    def __init__(self, committer: Optional[Committer] = None):
        """Initialize the transfer client.

        Args:
            committer: Commit identity (defaults to the configured identity)
        """
        self.committer = committer or Committer.default()

    def _create_api_client(self, token: str) -> GitHubAPIClient:
        return GitHubAPIClient(token=token)

    async def upload_file(
        self,
        token: str,
        owner: str,
        repository: str,
        local_path: str,
        remote_dir: str,
        message: str = DEFAULT_COMMIT_MESSAGE,
        branch: Optional[str] = None,
    ) -> Optional[UploadResult]:
        """Upload a local file into a repository directory.

        The file keeps its base name: ``docs/report.pdf`` uploaded to
        ``archive`` lands at ``archive/report.pdf``. An existing file at that
        path is overwritten.

        Args:
            token: GitHub token with write access
            owner: Repository owner
            repository: Repository name
            local_path: File to upload
            remote_dir: Target directory in the repository ("" for the root)
            message: Commit message
            branch: Target branch (repository default when omitted)

        Returns:
            UploadResult on success, None when the API rejected the write

        Raises:
            OSError: If the local file cannot be read
            GitHubAPIError: If the write request could not be sent
        """
        request = TransferRequest(
            token=token,
            owner=owner,
            repository=repository,
            local_path=local_path,
            remote_dir=remote_dir,
            message=message,
            branch=branch,
        )

        # TODO: validate owner/repository names and remote_dir before any I/O
        with open(request.local_path, "rb") as fh:
            content_b64 = base64.b64encode(fh.read()).decode("ascii")

        remote_path = request.remote_path

        async with self._create_api_client(request.token) as client:
            contents = ContentsOperations(client)
            lookup = await contents.lookup_sha(
                request.owner, request.repository, remote_path, ref=request.branch
            )
            response = await contents.put_file(
                request.owner,
                request.repository,
                remote_path,
                content_b64=content_b64,
                message=request.message,
                committer=self.committer,
                sha=lookup.sha,
                branch=request.branch,
            )

        if response is None:
            return None

        result = self._build_upload_result(response, remote_path, request.file_name)
        logger.info(f"File was successfully uploaded to {owner}/{repository}/{result.path}")
        return result

    @staticmethod
    def _build_upload_result(
        response: ContentsWriteResponse, remote_path: str, file_name: str
    ) -> UploadResult:
        commit_sha = response.commit.sha if response.commit else None
        if response.content is None:
            return UploadResult(
                name=file_name, path=remote_path, sha=response.sha, commit_sha=commit_sha
            )

        content = response.content
        return UploadResult(
            name=content.name or file_name,
            path=content.path or remote_path,
            download_url=content.download_url,
            sha=content.sha,
            html_url=content.html_url,
            commit_sha=commit_sha,
        )

    async def download_file(
        self, strategy: DownloadStrategy, destination: Optional[str] = None
    ) -> bool:
        """Download a remote file to local disk.

        Args:
            strategy: Where and how to fetch the file
            destination: Local path (defaults to the remote file name in the
                current directory); an existing file is overwritten

        Returns:
            True if at least one byte was written
        """
        destination = destination or strategy.default_filename()
        if not destination:
            raise ValueError(f"Cannot derive a local file name from {strategy.describe()}")

        async with strategy.create_client() as client:
            written = await strategy.download(client, destination)

        if written > 0:
            logger.info(f"File downloaded successfully to {destination}")
            return True

        logger.error(f"Error downloading {strategy.describe()}")
        return False

    async def download_from_repository(
        self,
        token: str,
        owner: str,
        repository: str,
        remote_path: str,
        destination: Optional[str] = None,
        ref: Optional[str] = None,
    ) -> bool:
        """Download a file by its repository path (authenticated)."""
        strategy = RepositoryPathDownload(token, owner, repository, remote_path, ref=ref)
        return await self.download_file(strategy, destination)

    async def download_from_url(self, url: str, destination: Optional[str] = None) -> bool:
        """Download a file from a direct URL (unauthenticated)."""
        return await self.download_file(DirectUrlDownload(url), destination)

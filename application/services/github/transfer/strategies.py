"""
Download strategies.

A file can be fetched either through the contents API of a repository
(authenticated, base64 envelope) or from a direct URL such as a
``download_url`` returned by an upload (unauthenticated, raw bytes). The
caller picks one explicitly.
"""

import logging
import posixpath
from abc import ABC, abstractmethod
from typing import Optional
from urllib.parse import unquote, urlparse

from application.services.github.api.client import GitHubAPIClient, atomic_write
from application.services.github.api.contents import ContentsOperations

logger = logging.getLogger(__name__)


class DownloadStrategy(ABC):
    """How a remote file is located and fetched."""

    @abstractmethod
    def create_client(self) -> GitHubAPIClient:
        """Create the (unopened) API client used for one download."""

    @abstractmethod
    async def download(self, client: GitHubAPIClient, destination: str) -> int:
        """Fetch the file and write it to ``destination``.

        Args:
            client: Open API client from ``create_client``
            destination: Local path to write

        Returns:
            Number of bytes written; 0 when the remote returned a failure
            status or nothing to write, in which case ``destination`` is
            left untouched
        """

    @abstractmethod
    def default_filename(self) -> str:
        """Local file name used when the caller gives no destination."""

    @abstractmethod
    def describe(self) -> str:
        """Human readable source, for logging."""


class RepositoryPathDownload(DownloadStrategy):
    """Fetch a file by repository path through the contents API."""

    def __init__(
        self,
        token: str,
        owner: str,
        repository: str,
        path: str,
        ref: Optional[str] = None,
    ):
        self.token = token
        self.owner = owner
        self.repository = repository
        self.path = path.strip("/")
        self.ref = ref

    def create_client(self) -> GitHubAPIClient:
        return GitHubAPIClient(token=self.token)

    async def download(self, client: GitHubAPIClient, destination: str) -> int:
        contents = ContentsOperations(client)
        file_info = await contents.get_file(self.owner, self.repository, self.path, ref=self.ref)
        if file_info is None:
            return 0

        if not file_info.is_file:
            logger.error(f"{self.describe()} is a {file_info.type}, not a file")
            return 0

        if not file_info.has_inline_content:
            if not file_info.download_url:
                logger.error(f"No content or download URL returned for {self.describe()}")
                return 0
            # Files over 1 MB are not inlined by the contents API
            return await client.stream_to_file(
                file_info.download_url, destination, authenticated=True
            )

        data = file_info.get_bytes()
        if not data:
            return 0

        with atomic_write(destination) as fh:
            fh.write(data)
        return len(data)

    def default_filename(self) -> str:
        return self.path.split("/")[-1]

    def describe(self) -> str:
        return f"{self.owner}/{self.repository}/{self.path}"


class DirectUrlDownload(DownloadStrategy):
    """Fetch a file from a pre-resolved URL without authentication."""

    def __init__(self, url: str):
        self.url = url

    def create_client(self) -> GitHubAPIClient:
        return GitHubAPIClient()

    async def download(self, client: GitHubAPIClient, destination: str) -> int:
        return await client.stream_to_file(self.url, destination, authenticated=False)

    def default_filename(self) -> str:
        return posixpath.basename(unquote(urlparse(self.url).path))

    def describe(self) -> str:
        return self.url

"""
GitHub API client for making authenticated requests.

The client owns one ``httpx.AsyncClient`` for the lifetime of an ``async with``
block. Every public transfer operation opens its own block, so the underlying
connection is always released when the operation ends, whether it succeeded,
got a failure status or raised.
"""

import logging
import os
import stat
import tempfile
from contextlib import contextmanager
from typing import Optional, Dict, Any, Iterator, BinaryIO

import httpx

from common.config.config import (
    GITHUB_ACCEPT_HEADER,
    GITHUB_API_URL,
    GITHUB_API_VERSION,
    GITHUB_CONNECT_TIMEOUT,
    GITHUB_REQUEST_TIMEOUT,
)
from common.constants import DOWNLOAD_CHUNK_SIZE, DOWNLOAD_SUCCESS_STATUS

logger = logging.getLogger(__name__)


class GitHubAPIError(Exception):
    """Raised when a request to the GitHub API cannot be completed."""

    pass


def _file_mode(destination: str) -> int:
    """Mode for a replacement file: the existing file's, else what open() would give."""
    try:
        return stat.S_IMODE(os.stat(destination).st_mode)
    except FileNotFoundError:
        umask = os.umask(0)
        os.umask(umask)
        return 0o666 & ~umask


@contextmanager
def atomic_write(destination: str) -> Iterator[BinaryIO]:
    """Open a temporary file that replaces ``destination`` on clean exit.

    The temporary file lives next to the destination so the final
    ``os.replace`` stays on one filesystem. If the block raises or writes
    nothing, the temporary file is removed and the destination is left as it
    was. Missing parent directories are created here, after the caller has a
    successful response in hand.
    """
    parent = os.path.dirname(os.path.abspath(destination))
    os.makedirs(parent, exist_ok=True)

    fh = tempfile.NamedTemporaryFile(
        dir=parent, prefix=".download-", suffix=".part", delete=False
    )
    try:
        with fh:
            yield fh
            written = fh.tell()
        if written:
            os.chmod(fh.name, _file_mode(destination))
            os.replace(fh.name, destination)
        else:
            os.unlink(fh.name)
    except BaseException:
        if os.path.exists(fh.name):
            os.unlink(fh.name)
        raise


class GitHubAPIClient:
    """Scoped client for GitHub REST API interactions."""

    def __init__(
        self,
        token: Optional[str] = None,
        base_url: str = GITHUB_API_URL,
        api_version: str = GITHUB_API_VERSION,
        timeout: float = GITHUB_REQUEST_TIMEOUT,
        connect_timeout: float = GITHUB_CONNECT_TIMEOUT,
    ):
        """Initialize GitHub API client.

        Args:
            token: Bearer token; requests are sent unauthenticated when omitted
            base_url: API root URL
            api_version: Value of the X-GitHub-Api-Version header
            timeout: Request timeout in seconds
            connect_timeout: Connect timeout in seconds
        """
        self.token = token
        self.base_url = base_url.rstrip("/")
        self.api_version = api_version
        self.timeout = timeout
        self.connect_timeout = connect_timeout
        self._http: Optional[httpx.AsyncClient] = None

    async def __aenter__(self) -> "GitHubAPIClient":
        timeout_config = httpx.Timeout(self.timeout, connect=self.connect_timeout)
        self._http = httpx.AsyncClient(timeout=timeout_config, trust_env=False)
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        http, self._http = self._http, None
        if http is not None:
            await http.aclose()

    @property
    def is_open(self) -> bool:
        return self._http is not None

    def _require_session(self) -> httpx.AsyncClient:
        if self._http is None:
            raise RuntimeError("GitHubAPIClient must be used inside 'async with'")
        return self._http

    def _get_headers(self) -> Dict[str, str]:
        """Get headers for GitHub API requests.

        Returns:
            Headers dictionary
        """
        headers = {
            "Accept": GITHUB_ACCEPT_HEADER,
            "X-GitHub-Api-Version": self.api_version,
        }
        if self.token:
            headers["Authorization"] = f"Bearer {self.token}"
        return headers

    async def request(
        self,
        method: str,
        path: str,
        data: Optional[Dict[str, Any]] = None,
        params: Optional[Dict[str, Any]] = None,
    ) -> httpx.Response:
        """Make a GitHub API request.

        Status codes are not interpreted here; callers decide what counts as
        success.

        Args:
            method: HTTP method (GET, PUT)
            path: API path (without base URL)
            data: JSON request body
            params: Query parameters

        Returns:
            HTTP response

        Raises:
            GitHubAPIError: If the request could not be sent or no response arrived
            RuntimeError: If called outside an open session
        """
        http = self._require_session()
        url = f"{self.base_url}/{path.lstrip('/')}"

        try:
            response = await http.request(
                method.upper(), url, json=data, params=params, headers=self._get_headers()
            )
        except httpx.RequestError as e:
            error_msg = f"GitHub API request error: {e}"
            logger.error(error_msg)
            raise GitHubAPIError(error_msg) from e

        logger.debug(f"GitHub API {method.upper()} {url} -> {response.status_code}")
        return response

    async def get(self, path: str, params: Optional[Dict[str, Any]] = None) -> httpx.Response:
        """Make a GET request."""
        return await self.request("GET", path, params=params)

    async def put(self, path: str, data: Optional[Dict[str, Any]] = None) -> httpx.Response:
        """Make a PUT request."""
        return await self.request("PUT", path, data=data)

    async def stream_to_file(
        self, url: str, destination: str, authenticated: bool = False
    ) -> int:
        """Stream a file from an absolute URL to disk.

        The body goes to a temporary file that replaces the destination only
        after the last chunk arrived. A failure status, an empty body or a
        broken stream leaves the destination untouched.

        Args:
            url: File URL
            destination: Local path to write
            authenticated: Send the API headers and bearer token; plain GET otherwise

        Returns:
            Number of bytes written (0 on a non-success status or empty body)

        Raises:
            GitHubAPIError: If the request could not be sent or the stream broke
        """
        http = self._require_session()
        headers = self._get_headers() if authenticated else {}

        try:
            async with http.stream("GET", url, headers=headers) as response:
                if response.status_code != DOWNLOAD_SUCCESS_STATUS:
                    logger.error(f"File download failed (status {response.status_code}): {url}")
                    return 0

                written = 0
                with atomic_write(destination) as fh:
                    async for chunk in response.aiter_bytes(DOWNLOAD_CHUNK_SIZE):
                        fh.write(chunk)
                        written += len(chunk)
                return written
        except httpx.RequestError as e:
            error_msg = f"File download error: {e}"
            logger.error(error_msg)
            raise GitHubAPIError(error_msg) from e

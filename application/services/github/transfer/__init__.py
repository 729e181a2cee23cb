"""
File Transfer Module

Single-file upload and download against the GitHub contents API.
"""

from application.services.github.transfer.service import RemoteFileTransferClient
from application.services.github.transfer.strategies import (
    DirectUrlDownload,
    DownloadStrategy,
    RepositoryPathDownload,
)

__all__ = [
    "RemoteFileTransferClient",
    "DownloadStrategy",
    "RepositoryPathDownload",
    "DirectUrlDownload",
]

"""
GitHub Service Package

Uploads and downloads individual files through the GitHub contents API.

Main Components:
- RemoteFileTransferClient: upload_file / download_file entry points
- API Client: scoped GitHub REST API access
- Download strategies: by repository path or by direct URL
"""

from application.services.github.transfer import RemoteFileTransferClient

__all__ = ["RemoteFileTransferClient"]

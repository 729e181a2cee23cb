"""
GitHub API Module

Handles the GitHub REST API interactions needed for file transfers:
- Scoped, authenticated HTTP client
- Repository contents (sha lookup, read, write)
"""

from application.services.github.api.client import GitHubAPIClient, GitHubAPIError
from application.services.github.api.contents import ContentsOperations, FileInfo

__all__ = [
    "GitHubAPIClient",
    "GitHubAPIError",
    "ContentsOperations",
    "FileInfo",
]

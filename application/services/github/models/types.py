"""
Shared types and models for GitHub file transfers.
"""

import os
from dataclasses import dataclass, field
from enum import Enum
from typing import Optional

from common.config.config import GH_COMMITTER_EMAIL, GH_COMMITTER_NAME


class ShaLookupStatus(str, Enum):
    FOUND = "found"
    ABSENT = "absent"
    LOOKUP_FAILED = "lookup_failed"


@dataclass(frozen=True)
class Committer:
    name: str
    email: str

    @classmethod
    def default(cls) -> "Committer":
        """Identity stamped on every upload commit."""
        return cls(name=GH_COMMITTER_NAME, email=GH_COMMITTER_EMAIL)


@dataclass
class TransferRequest:
    """Everything one upload needs, built per call and then discarded."""

    token: str = field(repr=False)
    owner: str
    repository: str
    local_path: str
    remote_dir: str
    message: str
    branch: Optional[str] = None

    @property
    def file_name(self) -> str:
        return os.path.basename(self.local_path)

    @property
    def remote_path(self) -> str:
        """Remote directory joined with the local file's base name."""
        directory = self.remote_dir.strip("/")
        if not directory:
            return self.file_name
        return f"{directory}/{self.file_name}"


@dataclass
class ShaLookup:
    """Outcome of checking whether a remote file already exists.

    A failed lookup is treated the same as an absent file: the upload goes
    ahead without a sha. The distinct status keeps that policy visible.
    """

    status: ShaLookupStatus
    sha: Optional[str] = None
    error: Optional[str] = None

    @property
    def exists(self) -> bool:
        return self.status == ShaLookupStatus.FOUND

    @classmethod
    def found(cls, sha: str) -> "ShaLookup":
        return cls(status=ShaLookupStatus.FOUND, sha=sha)

    @classmethod
    def absent(cls) -> "ShaLookup":
        return cls(status=ShaLookupStatus.ABSENT)

    @classmethod
    def failed(cls, error: str) -> "ShaLookup":
        return cls(status=ShaLookupStatus.LOOKUP_FAILED, error=error)


@dataclass
class UploadResult:
    name: str
    path: str
    download_url: Optional[str] = None
    sha: Optional[str] = None
    html_url: Optional[str] = None
    commit_sha: Optional[str] = None

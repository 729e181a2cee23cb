"""
GitHub Models Module

Shared types, enums, dataclasses and wire payloads for GitHub file transfers.
"""

from application.services.github.models.payloads import (
    CommitterPayload,
    ContentsFileResponse,
    ContentsWriteRequest,
    ContentsWriteResponse,
)
from application.services.github.models.types import (
    Committer,
    ShaLookup,
    ShaLookupStatus,
    TransferRequest,
    UploadResult,
)

__all__ = [
    "Committer",
    "ShaLookup",
    "ShaLookupStatus",
    "TransferRequest",
    "UploadResult",
    "CommitterPayload",
    "ContentsFileResponse",
    "ContentsWriteRequest",
    "ContentsWriteResponse",
]

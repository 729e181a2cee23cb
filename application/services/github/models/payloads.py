"""Wire payloads for the GitHub contents API."""

from typing import Optional

from pydantic import BaseModel, ConfigDict


class CommitterPayload(BaseModel):
    """Committer block of a contents write request."""

    name: str
    email: str


class ContentsWriteRequest(BaseModel):
    """Body of ``PUT /repos/{owner}/{repo}/contents/{path}``.

    ``sha`` must be present to update an existing file and absent to create one,
    so ``None`` fields are dropped when serialising.
    """

    message: str
    committer: CommitterPayload
    content: str
    sha: Optional[str] = None
    branch: Optional[str] = None

    def to_body(self) -> dict:
        return self.model_dump(exclude_none=True)


class ContentsFileResponse(BaseModel):
    """A single file as returned by the contents API."""

    model_config = ConfigDict(extra="ignore")

    sha: str
    name: str = ""
    path: str = ""
    size: int = 0
    type: str = "file"
    content: Optional[str] = None
    encoding: str = "base64"
    download_url: Optional[str] = None
    html_url: Optional[str] = None


class CommitInfo(BaseModel):
    model_config = ConfigDict(extra="ignore")

    sha: Optional[str] = None
    message: Optional[str] = None


class ContentsWriteResponse(BaseModel):
    """Response to a successful contents write.

    Some deployments only echo back ``{sha}``; both shapes are accepted.
    """

    model_config = ConfigDict(extra="ignore")

    content: Optional[ContentsFileResponse] = None
    commit: Optional[CommitInfo] = None
    sha: Optional[str] = None

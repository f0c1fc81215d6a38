from pydantic import BaseModel, ConfigDict, Field
from typing import Literal, Optional

Language = Literal["html", "json"]

class RequestOptions(BaseModel):
    model_config = ConfigDict(frozen=True)

    emulate_browser: bool = Field(default=False, description="Send browser-like Accept/User-Agent headers")
    show_response_headers: bool = Field(default=False, description="Print response headers to stderr")
    quiet: bool = Field(default=False, description="Suppress progress and informational diagnostics")
    verbose: bool = Field(default=False, description="Print request headers and transfer notes to stderr")

class FetchedContent(BaseModel):
    model_config = ConfigDict(frozen=True)

    body: str
    declared_language: Optional[Language] = Field(None, description="Language inferred from Content-Type")

class TransferState(BaseModel):
    total_bytes: Optional[int] = Field(None, ge=0)
    downloaded_bytes: int = Field(default=0, ge=0)

    def advance(self, chunk_len: int) -> int:
        """
        Move the counter forward by one chunk.
        Never passes total_bytes; servers that send more than they declared
        are tolerated and the excess is not counted.
        """
        new = self.downloaded_bytes + chunk_len
        if self.total_bytes is not None:
            new = min(new, self.total_bytes)
        self.downloaded_bytes = new
        return new

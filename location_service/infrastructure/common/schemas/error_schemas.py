"""Error response body shared by every endpoint."""

from pydantic import BaseModel, Field


class HTTPError(BaseModel):
    """HTTP status code and a message describing the error."""

    code: int = Field(..., description="HTTP status code", examples=[400])
    message: str = Field(..., description="What went wrong", examples=["Bad Request"])

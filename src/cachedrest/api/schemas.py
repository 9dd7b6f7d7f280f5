"""Request bodies accepted by the API."""

from pydantic import BaseModel, ConfigDict


class UserCreate(BaseModel):
    """Payload for creating a user.

    Fields other than ``email`` are accepted and echoed back unchanged.
    """

    model_config = ConfigDict(extra="allow")

    email: str

from pydantic import BaseModel, ConfigDict, Field
from typing import Any, Dict, Optional


class SessionParams(BaseModel):
    model_config = ConfigDict(extra="allow", populate_by_name=True)

    archive_name: Optional[str] = Field(None, alias="archiveName", description="Spoken archive name")


class Session(BaseModel):
    model_config = ConfigDict(extra="allow")

    id: str
    params: SessionParams = Field(default_factory=SessionParams)


class Handler(BaseModel):
    model_config = ConfigDict(extra="allow")

    name: str


class ConversationRequest(BaseModel):
    """Inbound webhook call from the voice assistant platform."""

    model_config = ConfigDict(extra="allow")

    session: Session
    handler: Handler
    scene: Optional[Dict[str, Any]] = None

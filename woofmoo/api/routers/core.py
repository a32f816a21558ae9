import logging
from typing import Any, Dict

from fastapi import APIRouter, Depends, HTTPException
from fastapi.responses import HTMLResponse

from woofmoo.api.dependencies import get_app_settings, get_clock, get_directory
from woofmoo.config import Settings
from woofmoo.models.conversation import ConversationRequest
from woofmoo.services.conversation_service import (
    InvalidConversationError,
    UnknownHandlerError,
    handle_conversation,
    render_listing,
)
from woofmoo.services.directory import ArchiveDirectory

logger = logging.getLogger(__name__)

router = APIRouter(tags=["core"])


@router.get("/", response_class=HTMLResponse)
def read_directory(directory: ArchiveDirectory = Depends(get_directory)):
    return HTMLResponse(render_listing(directory.snapshot()))


@router.post("/")
def api_conversation(
    body: ConversationRequest,
    directory: ArchiveDirectory = Depends(get_directory),
    settings: Settings = Depends(get_app_settings),
    clock=Depends(get_clock),
) -> Dict[str, Any]:
    """Voice assistant webhook."""
    logger.info("Webhook call: handler=%s session=%s", body.handler.name, body.session.id)
    try:
        conv = handle_conversation(body, directory.snapshot(), settings=settings, now=clock())
    except UnknownHandlerError as exc:
        raise HTTPException(status_code=400, detail=str(exc))
    except InvalidConversationError as exc:
        raise HTTPException(status_code=400, detail=str(exc))
    logger.debug("Webhook response: %s", conv)
    return conv


@router.get("/health")
def api_health(directory: ArchiveDirectory = Depends(get_directory)) -> Dict[str, Any]:
    return {"status": "ok", "entries": len(directory)}

"""Voice assistant webhook handlers.

Three handlers are supported:
- getArchiveTitles: list every key in the directory as expected speech
- validateSlots: mark the scene's ArchiveName slot as filled
- playArchive: resolve session.params.archiveName and return a media prompt
"""

from __future__ import annotations

import html
import logging
from datetime import datetime
from typing import Any, Dict, Mapping

from woofmoo.config import Settings
from woofmoo.models.archive import ArchiveRecord
from woofmoo.models.conversation import ConversationRequest
from woofmoo.services.matcher import find_best_match

logger = logging.getLogger(__name__)


class UnknownHandlerError(ValueError):
    pass


class InvalidConversationError(ValueError):
    pass


def render_listing(table: Mapping[str, ArchiveRecord]) -> str:
    lines = []
    for key, archive in table.items():
        lines.append(
            "Name: {}, Title: {}, Date: {}, MP3 Link: {}<br/>".format(
                html.escape(key, quote=False),
                html.escape(archive.announced_title, quote=False),
                html.escape(archive.date or "", quote=False),
                html.escape(archive.media_url, quote=False),
            )
        )
    return "".join(lines)


def _media_prompt(record: ArchiveRecord, settings: Settings) -> Dict[str, Any]:
    date_announce = f" from {record.date}" if record.date else ""
    return {
        "override": False,
        "content": {
            "media": {
                "media_type": "AUDIO",
                "optional_media_controls": ["PAUSED", "STOPPED"],
                "media_objects": [
                    {
                        "name": record.announced_title,
                        "description": record.description,
                        "url": record.media_url,
                        "image": {
                            "large": {
                                "url": settings.logo_url,
                                "alt": f"{settings.station_name} station logo",
                            },
                        },
                    }
                ],
            },
        },
        "firstSimple": {
            "speech": f"OK, playing {record.announced_title}{date_announce}",
        },
    }


def _validate_slots(scene: Dict[str, Any] | None) -> Dict[str, Any]:
    if not isinstance(scene, dict):
        raise InvalidConversationError("validateSlots requires a scene")
    slots = scene.get("slots")
    if not isinstance(slots, dict) or not isinstance(slots.get("ArchiveName"), dict):
        raise InvalidConversationError("validateSlots requires scene.slots.ArchiveName")
    filled = dict(scene)
    filled["slots"] = dict(slots)
    filled["slots"]["ArchiveName"] = {**slots["ArchiveName"], "status": "FILLED"}
    filled["slotFillingStatus"] = "FINAL"
    return filled


def handle_conversation(
    request: ConversationRequest,
    table: Mapping[str, ArchiveRecord],
    *,
    settings: Settings,
    now: datetime,
) -> Dict[str, Any]:
    """Answer one webhook call against a directory snapshot."""
    name = request.handler.name
    conv: Dict[str, Any] = {"session": {"id": request.session.id, "params": {}}}

    if name == "getArchiveTitles":
        conv["expected"] = {"speech": list(table.keys())}
    elif name == "validateSlots":
        conv["scene"] = _validate_slots(request.scene)
    elif name == "playArchive":
        requested = request.session.params.archive_name
        if not requested:
            raise InvalidConversationError("playArchive requires session.params.archiveName")
        logger.info("Looking for archive with title %s", requested.lower())
        match = find_best_match(table, requested, now=now, age_limit=settings.age_limit)
        if match is not None:
            conv["prompt"] = _media_prompt(match.record, settings)
    else:
        raise UnknownHandlerError(f"Unrecognized handler: {name}")
    return conv

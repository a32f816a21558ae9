from __future__ import annotations

from fastapi import Request

from woofmoo.config import Settings
from woofmoo.services.directory import ArchiveDirectory


def get_directory(request: Request) -> ArchiveDirectory:
    return request.app.state.directory


def get_app_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_clock(request: Request):
    return request.app.state.clock

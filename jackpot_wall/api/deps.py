from fastapi import Request

from jackpot_wall.config import Settings
from jackpot_wall.services.events_store import EventStore


def get_event_store(request: Request) -> EventStore:
    return request.app.state.event_store


def get_app_settings(request: Request) -> Settings:
    return request.app.state.settings

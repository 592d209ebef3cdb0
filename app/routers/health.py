from __future__ import annotations

from fastapi import APIRouter, Depends

from app.adapters.registry import ParserRegistry
from server.config import Settings, get_settings

router = APIRouter(tags=["health"])


@router.get("/health")
async def health(settings: Settings = Depends(get_settings)) -> dict:
    """Report service version and the providers whose webhooks can be normalized."""
    return {
        "ok": True,
        "service": settings.app_name,
        "version": settings.app_version,
        "env": settings.env,
        "providers": ParserRegistry.providers(),
    }

"""All HTTP routes, mounted under `/api/v1`."""

from __future__ import annotations

from fastapi import APIRouter

from app.routers import health, messages, webhooks

api_router = APIRouter(prefix="/api/v1")

for _module in (health, webhooks, messages):
    api_router.include_router(_module.router)

__all__ = ["api_router"]

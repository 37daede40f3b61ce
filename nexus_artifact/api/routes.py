"""Service level routes."""

from __future__ import annotations

from fastapi import APIRouter, Request

router = APIRouter(tags=["health"])


@router.get("/health", summary="Health probe")
async def health(request: Request) -> dict[str, str]:
    container = getattr(request.app.state, "container", None)
    mode = getattr(getattr(container, "settings", None), "execution_mode", None)
    file_ops = getattr(container, "file_ops", None)
    return {
        "status": "ok",
        "execution_mode": getattr(mode, "value", str(mode)),
        "platform": getattr(file_ops, "name", "unknown"),
    }

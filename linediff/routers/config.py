"""Configuration API endpoints"""

from __future__ import annotations

import codecs
from typing import Any

from fastapi import APIRouter, HTTPException
from pydantic import BaseModel, Field

from linediff.services.config_manager import ConfigManager

router = APIRouter()

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class EncodingSettings(BaseModel):
    """Default text encodings per side"""

    candidate: str | None = None
    reference: str | None = None


class LimitSettings(BaseModel):
    """Input size limits; 0 disables a check"""

    maxLines: int | None = Field(default=None, ge=0)
    maxCells: int | None = Field(default=None, ge=0)  # candidate lines x reference lines


class ServerSettings(BaseModel):
    """Host/port used by `python -m linediff.main`"""

    host: str | None = None
    port: int | None = Field(default=None, ge=1, le=65535)


class ConfigUpdateRequest(BaseModel):
    """Request to update configuration"""

    encoding: EncodingSettings | None = None
    limits: LimitSettings | None = None
    server: ServerSettings | None = None
    logLevel: str | None = None


class ConfigResponse(BaseModel):
    """Configuration response"""

    encoding: dict
    limits: dict
    server: dict
    logLevel: str


@router.get("", response_model=ConfigResponse)
async def get_config() -> ConfigResponse:
    """Get current configuration"""
    config = ConfigManager.get_instance().get_config()

    return ConfigResponse(
        encoding=config.get("encoding", {}),
        limits=config.get("limits", {}),
        server=config.get("server", {}),
        logLevel=config.get("logLevel", "INFO"),
    )


@router.put("")
async def update_config(request: ConfigUpdateRequest) -> dict[str, Any]:
    """Update configuration"""
    update: dict[str, Any] = {}

    # Only provided fields are merged into their sections
    if request.encoding:
        encoding = request.encoding.model_dump(exclude_none=True)
        for side, name in encoding.items():
            try:
                codecs.lookup(name)
            except LookupError:
                raise HTTPException(status_code=400, detail=f"Unknown {side} encoding: {name}")
        update["encoding"] = encoding
    if request.limits:
        update["limits"] = request.limits.model_dump(exclude_none=True)
    if request.server:
        update["server"] = request.server.model_dump(exclude_none=True)
    if request.logLevel:
        level = request.logLevel.upper()
        if level not in LOG_LEVELS:
            raise HTTPException(status_code=400, detail=f"Unknown log level: {request.logLevel}")
        update["logLevel"] = level

    config_manager = ConfigManager.get_instance()
    config_manager.get_config()  # merge over what is on disk now
    config_manager.save_config(update)

    return {"status": "success", "message": "Configuration updated"}

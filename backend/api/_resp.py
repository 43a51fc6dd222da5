# api/_resp.py
import logging
from typing import Any

from fastapi import HTTPException
from pydantic import BaseModel

logger = logging.getLogger(__name__)


def _plain(data: Any) -> Any:
    if isinstance(data, BaseModel):
        return data.model_dump()
    if isinstance(data, list):
        return [_plain(item) for item in data]
    return data


def ok(data: Any = None, **extras):
    payload = {"status": "success"}
    if data is not None:
        payload["data"] = _plain(data)
    if extras:
        payload.update(extras)
    return payload


def fail(status: int, message: str):
    logger.info(f"request rejected ({status}): {message}")
    raise HTTPException(status, message)

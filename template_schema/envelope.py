"""Enveloppe de réponse standard {success, message, data, timestamp}."""
from datetime import datetime, timezone
from typing import Any

from pydantic import BaseModel, Field

from .violations import Failure


def _now_iso() -> str:
    # 2026-02-26T12:00:00.000Z
    return datetime.now(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


def _dump(data: Any) -> Any:
    if isinstance(data, BaseModel):
        return data.model_dump(by_alias=True)
    if isinstance(data, (list, tuple)):
        return [_dump(d) for d in data]
    return data


class ApiResponse(BaseModel):
    success: bool
    message: str
    data: Any = None
    timestamp: str = Field(default_factory=_now_iso)

    @classmethod
    def ok(cls, data: Any, message: str = "Successful") -> "ApiResponse":
        return cls(success=True, message=message, data=_dump(data))

    @classmethod
    def rejected(cls, failure: Failure, message: str = "Validation failed") -> "ApiResponse":
        """Corps 422 : les violations sont transmises telles quelles."""
        return cls(success=False, message=message, data=failure.to_payload())

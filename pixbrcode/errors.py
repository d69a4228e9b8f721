"""BR Code validation error definitions."""
from __future__ import annotations

from dataclasses import dataclass


@dataclass(slots=True)
class BRCodeError(Exception):
    code: str
    message: str
    field: str | None = None

    def __str__(self) -> str:  # noqa: D401 override
        return self.message


def err_required(field: str, label: str) -> BRCodeError:
    return BRCodeError(code="ERR_REQUIRED", message=f"{label} must be set", field=field)


def err_too_long(field: str, label: str, limit: int) -> BRCodeError:
    return BRCodeError(code="ERR_TOO_LONG", message=f"{label} must be less than {limit} characters", field=field)


def err_length(field: str, label: str, size: int) -> BRCodeError:
    return BRCodeError(code="ERR_LENGTH", message=f"{label} must be {size} characters", field=field)


def err_invalid(field: str, message: str) -> BRCodeError:
    return BRCodeError(code="ERR_INVALID", message=message, field=field)

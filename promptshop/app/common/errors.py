from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Optional


@dataclass
class ApiError(Exception):
    """Raise to return a consistent JSON error response."""

    status_code: int
    code: str
    message: str
    details: Optional[Dict[str, Any]] = None
    headers: Optional[Dict[str, str]] = None

    def to_dict(self, request_id: str | None = None) -> Dict[str, Any]:
        payload: Dict[str, Any] = {
            "error": {
                "code": self.code,
                "message": self.message,
                "details": self.details or {},
                "request_id": request_id,
            }
        }
        return payload


class GatewayError(ApiError):
    """The completion service could not be reached or refused the call."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(status_code=502, code="gateway_error", message=message, details=details)


class ModelOutputError(ApiError):
    """The model answered a mutation with something that is not a JSON document."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(status_code=502, code="invalid_model_output", message=message, details=details)


def abort_json(
    status_code: int,
    code: str,
    message: str,
    details: Optional[Dict[str, Any]] = None,
    headers: Optional[Dict[str, str]] = None,
) -> None:
    """Convenience wrapper."""
    raise ApiError(status_code=status_code, code=code, message=message, details=details, headers=headers)

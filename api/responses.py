"""
Uniform response envelope.

Every response body has the shape::

    {"success": bool, "message": str, "data": Any, "statusCode": int}

plus an ``error`` key on failure paths when there is detail to report.
``success`` / ``error`` build the envelope; ``respond_success`` /
``respond_error`` bind it to an HTTP response.
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional, Union

from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse

from config.constants import Messages

# Validation errors keyed by request part, or a short code / message.
ErrorDetail = Union[Dict[str, List[str]], str, None]


def success(
    data: Any = None,
    message: str = Messages.SUCCESS,
    status_code: int = 200,
) -> Dict[str, Any]:
    return {
        "success": True,
        "message": message,
        "data": data,
        "statusCode": status_code,
    }


def error(
    message: str = Messages.ERROR,
    status_code: int = 500,
    error_detail: ErrorDetail = None,
    data: Any = None,
) -> Dict[str, Any]:
    envelope: Dict[str, Any] = {
        "success": False,
        "message": message,
        "data": data,
        "statusCode": status_code,
    }
    if error_detail is not None:
        envelope["error"] = error_detail
    return envelope


def respond_success(
    data: Any = None,
    message: str = Messages.SUCCESS,
    status_code: int = 200,
    headers: Optional[Dict[str, str]] = None,
) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content=jsonable_encoder(success(data, message, status_code)),
        headers=headers,
    )


def respond_error(
    message: str = Messages.ERROR,
    status_code: int = 500,
    error_detail: ErrorDetail = None,
    data: Any = None,
    headers: Optional[Dict[str, str]] = None,
) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content=jsonable_encoder(error(message, status_code, error_detail, data)),
        headers=headers,
    )

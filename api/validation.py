"""
Request validation for ``body`` / ``params`` / ``query``.

Each part is checked against its own pydantic schema.  All errors of all
parts are collected before the request is rejected, unknown keys are
dropped, and schema defaults are filled in.  Parts that pass are replaced
by their coerced model instance; parts that fail keep their raw value.

Usage::

    @router.get("/all")
    async def list_things(req: ValidatedRequest = Depends(validate(query=PageQuery))):
        req.query.page
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field
from typing import Any, ClassVar, Dict, List, Mapping, Optional, Type

from fastapi import Request
from pydantic import BaseModel, ConfigDict
from pydantic import ValidationError as PydanticValidationError

from api.errors import ValidationError

logger = logging.getLogger(__name__)

PARTS = ("body", "params", "query")
INVALID_JSON_MESSAGE = "Request body must be valid JSON"


class RequestSchema(BaseModel):
    """
    Base for request schemas.

    ``messages`` maps ``"<field>.<pydantic error type>"`` to the text sent
    back to the client; unmapped errors fall back to ``"<field>: <msg>"``.
    """

    model_config = ConfigDict(extra="ignore")

    messages: ClassVar[Dict[str, str]] = {}


@dataclass
class ValidationResult:
    values: Dict[str, Any] = field(default_factory=dict)
    errors: Dict[str, List[str]] = field(default_factory=dict)

    @property
    def ok(self) -> bool:
        return not self.errors


@dataclass
class ValidatedRequest:
    body: Any = None
    params: Any = None
    query: Any = None


def format_errors(schema: Type[BaseModel], exc: PydanticValidationError) -> List[str]:
    messages: Mapping[str, str] = getattr(schema, "messages", {})
    out: List[str] = []
    for err in exc.errors():
        field_name = ".".join(str(p) for p in err["loc"])
        custom = messages.get(f"{field_name}.{err['type']}")
        if custom:
            out.append(custom)
        elif field_name:
            out.append(f"{field_name}: {err['msg']}")
        else:
            out.append(err["msg"])
    return out


def run_validation(
    schemas: Mapping[str, Optional[Type[BaseModel]]],
    raw: Mapping[str, Any],
) -> ValidationResult:
    """Validate every part that has a schema; never stops at the first failure."""
    result = ValidationResult()
    for part in PARTS:
        schema = schemas.get(part)
        value = raw.get(part)
        if schema is None:
            if part in raw:
                result.values[part] = value
            continue
        try:
            result.values[part] = schema.model_validate({} if value is None else value)
        except PydanticValidationError as exc:
            result.errors[part] = format_errors(schema, exc)
            result.values[part] = value
    return result


async def _read_json(request: Request) -> Any:
    raw = await request.body()
    if not raw.strip():
        return {}
    return json.loads(raw)


def validate(
    *,
    body: Optional[Type[BaseModel]] = None,
    params: Optional[Type[BaseModel]] = None,
    query: Optional[Type[BaseModel]] = None,
):
    """Build a dependency that validates the given request parts."""
    schemas = {"body": body, "params": params, "query": query}

    async def dependency(request: Request) -> ValidatedRequest:
        raw: Dict[str, Any] = {}
        errors: Dict[str, List[str]] = {}
        active = dict(schemas)

        if body is not None:
            try:
                raw["body"] = await _read_json(request)
            except ValueError:
                errors["body"] = [INVALID_JSON_MESSAGE]
                active["body"] = None
        if params is not None:
            raw["params"] = dict(request.path_params)
        if query is not None:
            raw["query"] = dict(request.query_params)

        result = run_validation(active, raw)
        errors.update(result.errors)
        if errors:
            ordered = {part: errors[part] for part in PARTS if part in errors}
            logger.debug("Rejected %s %s: %s", request.method, request.url.path, ordered)
            raise ValidationError(ordered)

        return ValidatedRequest(**result.values)

    return dependency

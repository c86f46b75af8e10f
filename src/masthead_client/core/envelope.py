"""
Response envelope shared by every client API endpoint.

Single entities arrive as {"value": {...}}, collections as
{"values": [...], "pagination": {"total": N, "page": P}}. Any response,
including HTTP 200 ones, may also carry "error" and "message".
"""

from __future__ import annotations

import json
from typing import Any, Dict, List, Optional, Tuple, Type, TypeVar

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from .client import MastheadAPIError, MastheadModelValidationError, MastheadParseError

T = TypeVar("T", bound=BaseModel)


class ErrorDetail(BaseModel):
    code: Optional[str] = None
    message: str = ""

    model_config = ConfigDict(extra="ignore")

    @classmethod
    def from_raw(cls, raw: Any) -> Optional["ErrorDetail"]:
        """Normalise the envelope error field; None means no error."""
        if raw is None or isinstance(raw, cls):
            return raw
        if isinstance(raw, dict):
            code = raw.get("code")
            message = raw.get("message") or raw.get("error")
            return cls(
                code=str(code) if code is not None else None,
                message=str(message) if message is not None else json.dumps(raw),
            )
        if isinstance(raw, str):
            return cls(message=raw)
        return cls(message=json.dumps(raw))

    def __str__(self) -> str:
        if self.code:
            return f"[{self.code}] {self.message}"
        return self.message


class Pagination(BaseModel):
    total: int = 0
    page: int = 0

    model_config = ConfigDict(extra="ignore")

    @field_validator("total", "page", mode="before")
    @classmethod
    def _null_is_zero(cls, raw: Any) -> Any:
        return 0 if raw is None else raw


class Envelope(BaseModel):
    error: Optional[ErrorDetail] = None
    message: Optional[str] = None
    extra: Any = None
    value: Any = None

    model_config = ConfigDict(extra="ignore")

    @field_validator("error", mode="before")
    @classmethod
    def _normalise_error(cls, raw: Any) -> Optional[ErrorDetail]:
        return ErrorDetail.from_raw(raw)

    @field_validator("message", mode="before")
    @classmethod
    def _stringify_message(cls, raw: Any) -> Optional[str]:
        if raw is None or isinstance(raw, str):
            return raw
        return json.dumps(raw)

    def raise_for_error(self) -> None:
        if self.error is not None:
            raise MastheadAPIError(self.error, self.message)


class ListEnvelope(Envelope):
    values: Optional[List[Any]] = None
    pagination: Pagination = Field(default_factory=Pagination)

    @field_validator("pagination", mode="before")
    @classmethod
    def _default_pagination(cls, raw: Any) -> Any:
        return {} if raw is None else raw


def load_json_object(raw: bytes, *, what: str = "response") -> Dict[str, Any]:
    """First gate: body must be a JSON object."""
    try:
        data = json.loads(raw)
    except ValueError as exc:
        snippet = raw[:500].decode("utf-8", errors="replace")
        raise MastheadParseError(
            f"Expected JSON {what}, got non-JSON body snippet: {snippet!r}"
        ) from exc

    if not isinstance(data, dict):
        raise MastheadParseError(
            f"Expected top-level JSON object in {what}, got {type(data).__name__}"
        )
    return data


def _envelope(model: Type[Envelope], data: Dict[str, Any]) -> Envelope:
    try:
        return model.model_validate(data)
    except ValidationError as exc:
        raise MastheadModelValidationError(
            f"Response did not match {model.__name__}: {exc}"
        ) from exc


def _as_model(model: Type[T], payload: Any) -> T:
    try:
        return model.model_validate(payload)
    except ValidationError as exc:
        raise MastheadModelValidationError(
            f"Response did not match model {model.__name__}: {exc}"
        ) from exc


def decode_value(raw: bytes, model: Type[T]) -> T:
    data = load_json_object(raw)
    envelope = _envelope(Envelope, data)
    envelope.raise_for_error()
    if envelope.value is None:
        raise MastheadModelValidationError(
            f"Response envelope has no value for model {model.__name__}"
        )
    return _as_model(model, envelope.value)


def decode_values(raw: bytes, model: Type[T]) -> Tuple[List[T], Pagination]:
    data = load_json_object(raw)
    envelope = _envelope(ListEnvelope, data)
    envelope.raise_for_error()
    items = [_as_model(model, v) for v in envelope.values or []]
    return items, envelope.pagination


def check_no_error(raw: bytes) -> None:
    """
    Inspect a body whose shape is not otherwise relied upon (e.g. delete).
    Only a JSON object carrying an error field fails; anything else passes.
    """
    if not raw or not raw.strip():
        return
    try:
        data = json.loads(raw)
    except ValueError:
        return
    if isinstance(data, dict):
        detail = ErrorDetail.from_raw(data.get("error"))
        if detail is not None:
            message = data.get("message")
            raise MastheadAPIError(
                detail, message if isinstance(message, str) else None
            )


__all__ = [
    "ErrorDetail",
    "Pagination",
    "Envelope",
    "ListEnvelope",
    "load_json_object",
    "decode_value",
    "decode_values",
    "check_no_error",
]

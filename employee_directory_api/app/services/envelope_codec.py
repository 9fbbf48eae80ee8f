"""
Decoding of upstream envelopes into typed records.

``decode_one`` and ``decode_many`` accept the parsed JSON body of an
upstream response (or ``None`` when there was no body).  A missing
envelope or a ``null`` ``data`` field is "no content": ``decode_one``
returns ``None`` and ``decode_many`` an empty list.  Anything present
must validate against the target model, otherwise ``DecodeError`` is
raised.  Both functions are pure.
"""

from typing import Any, List, Optional, Type, TypeVar

from pydantic import BaseModel, TypeAdapter, ValidationError

from ..core.errors import DecodeError
from ..schemas.envelope import Envelope

ModelT = TypeVar("ModelT", bound=BaseModel)


def _summarise(exc: ValidationError) -> str:
    parts = []
    for err in exc.errors():
        location = ".".join(str(p) for p in err.get("loc", ())) or "<root>"
        parts.append(f"{location}: {err.get('msg')}")
    return "; ".join(parts)


def parse_envelope(raw: Any) -> Optional[Envelope]:
    if raw is None:
        return None
    if isinstance(raw, Envelope):
        return raw
    if not isinstance(raw, dict):
        raise DecodeError(f"Expected an envelope object, got {type(raw).__name__}")
    try:
        return Envelope.model_validate(raw)
    except ValidationError as exc:
        raise DecodeError(f"Malformed envelope: {_summarise(exc)}") from exc


def decode_one(raw: Any, model: Type[ModelT]) -> Optional[ModelT]:
    """Decode an envelope holding a single record.

    Parameters
    ----------
    raw : Any
        Parsed JSON body, an ``Envelope`` instance or ``None``.
    model : Type[BaseModel]
        Target record type.

    Returns
    -------
    Optional[BaseModel]
        The decoded record, or ``None`` when the envelope carries no data.
    """
    envelope = parse_envelope(raw)
    if envelope is None or envelope.data is None:
        return None
    try:
        return model.model_validate(envelope.data)
    except ValidationError as exc:
        raise DecodeError(f"Cannot decode {model.__name__}: {_summarise(exc)}") from exc


def decode_many(raw: Any, model: Type[ModelT]) -> List[ModelT]:
    """Decode an envelope holding a list of records.

    Never returns ``None``; absent data yields an empty list.
    """
    envelope = parse_envelope(raw)
    if envelope is None or envelope.data is None:
        return []
    try:
        return TypeAdapter(List[model]).validate_python(envelope.data)
    except ValidationError as exc:
        raise DecodeError(f"Cannot decode list of {model.__name__}: {_summarise(exc)}") from exc

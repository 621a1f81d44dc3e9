"""
JSON codec for ``Record``.

``decode`` turns a JSON document with the keys ``fruit``, ``owner`` and
``description`` into a ``Record``; ``encode`` writes one back in the
canonical pretty-printed layout, so that re-encoding a canonical document
reproduces it byte-for-byte.

All failures raised by ``decode`` are ``DecodeError``; pydantic and json
errors never leak past this module.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

from pydantic import ValidationError

from fruitcodec.core.exceptions import DecodeError
from fruitcodec.core.logger import get_logger, push_document, reset_document
from fruitcodec.models.codec_config import EncoderConfig
from fruitcodec.models.fruit import Fruit
from fruitcodec.models.record import DOCUMENT_KEYS, WIRE_CONTEXT, Record

logger = get_logger(__name__)

PathLike = Union[str, Path]

_JSON_TYPE_NAMES = {
    dict: "object",
    list: "array",
    str: "string",
    bool: "boolean",
    int: "number",
    float: "number",
    type(None): "null",
}


def _json_type(value: Any) -> str:
    return _JSON_TYPE_NAMES.get(type(value), type(value).__name__)


def _field_rank(error: Dict[str, Any]) -> int:
    loc = error.get("loc") or ()
    if loc and loc[0] in DOCUMENT_KEYS:
        return DOCUMENT_KEYS.index(loc[0])
    return len(DOCUMENT_KEYS)


def _translate(exc: ValidationError) -> DecodeError:
    """Report the first failure in document key order as a DecodeError."""
    errors: List[Dict[str, Any]] = sorted(exc.errors(), key=_field_rank)
    error = errors[0]
    loc = error.get("loc") or ()
    field = str(loc[0]) if loc else None

    if error["type"] == "missing" and field is not None:
        return DecodeError.missing_field(field)
    if error["type"] == "unknown_variant":
        return DecodeError.unknown_variant(error["ctx"]["value"], Fruit.labels(), field=field)
    return DecodeError.invalid_type(error["msg"], field=field)


def decode(text: Union[str, bytes, bytearray]) -> Record:
    """
    Decode a JSON document into a ``Record``.

    Checks run in document key order: a missing or unknown ``fruit`` is
    reported before a missing ``owner``. An absent or ``null``
    ``description`` yields an absent note. Unknown keys are ignored.

    Raises:
        DecodeError: kind SYNTAX for malformed JSON, INVALID_TYPE for a
            non-object document or a mistyped value, MISSING_FIELD or
            UNKNOWN_VARIANT as described above.
    """
    if isinstance(text, (bytes, bytearray)):
        try:
            text = bytes(text).decode("utf-8")
        except UnicodeDecodeError as exc:
            raise DecodeError.syntax(f"invalid UTF-8 ({exc.reason})", 1, exc.start + 1) from exc

    try:
        document = json.loads(text)
    except json.JSONDecodeError as exc:
        logger.debug(f"Rejected malformed document: {exc}")
        raise DecodeError.syntax(exc.msg, exc.lineno, exc.colno) from exc

    if not isinstance(document, dict):
        raise DecodeError.invalid_type(f"expected a JSON object, found {_json_type(document)}")

    fields = {key: document[key] for key in DOCUMENT_KEYS if key in document}
    try:
        record = Record.model_validate(fields, context={WIRE_CONTEXT: True})
    except ValidationError as exc:
        error = _translate(exc)
        logger.debug(f"Decode failed ({error.kind.value}): {error}")
        raise error from exc

    logger.debug(
        f"Decoded record: fruit={record.category.label} owner={record.owner!r} "
        f"description={'present' if record.description is not None else 'absent'}"
    )
    return record


def encode(record: Record, config: Optional[EncoderConfig] = None) -> str:
    """Encode a ``Record`` as JSON; ``description`` is omitted when the note is absent."""
    config = config or EncoderConfig()
    text = json.dumps(
        record.model_dump(),
        indent=config.indent,
        ensure_ascii=config.ensure_ascii,
    )
    if config.trailing_newline:
        text += "\n"
    logger.debug(f"Encoded record: fruit={record.category.label} ({len(text)} chars)")
    return text


def decode_file(path: PathLike) -> Record:
    """Read a UTF-8 JSON document from disk and decode it."""
    document_path = Path(path)
    if not document_path.exists():
        raise FileNotFoundError(f"Document not found: {path}")

    token = push_document(str(document_path))
    try:
        return decode(document_path.read_bytes())
    finally:
        reset_document(token)


def encode_file(record: Record, path: PathLike, config: Optional[EncoderConfig] = None) -> None:
    document_path = Path(path)
    token = push_document(str(document_path))
    try:
        document_path.write_text(encode(record, config), encoding="utf-8")
        logger.debug(f"Wrote document to {document_path}")
    finally:
        reset_document(token)

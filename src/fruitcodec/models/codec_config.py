from __future__ import annotations

from pydantic import BaseModel, ConfigDict, PositiveInt


class EncoderConfig(BaseModel):
    """Formatting options for ``encode``.

    The defaults produce the canonical layout: two-space indent, ``": "``
    after keys, non-ASCII text written as-is and no trailing newline.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    indent: PositiveInt = 2
    ensure_ascii: bool = False              # Escape non-ASCII characters as \uXXXX
    trailing_newline: bool = False          # Terminate the document with "\n"

"""fruitcodec.

Typed JSON codec for fruit ownership records: an enumerated ``fruit``
label, a required ``owner`` and an optional ``description``.

Public API:
    decode / encode          - text <-> Record
    decode_file / encode_file - the same, through a file on disk
"""

from fruitcodec.codec import decode, decode_file, encode, encode_file
from fruitcodec.core.exceptions import DecodeError, DecodeErrorKind, FruitCodecException
from fruitcodec.models.codec_config import EncoderConfig
from fruitcodec.models.fruit import Fruit
from fruitcodec.models.record import Note, NoteAbsent, NotePresent, Record

__version__ = "0.1.0"

__all__ = [
    "DecodeError",
    "DecodeErrorKind",
    "EncoderConfig",
    "Fruit",
    "FruitCodecException",
    "Note",
    "NoteAbsent",
    "NotePresent",
    "Record",
    "decode",
    "decode_file",
    "encode",
    "encode_file",
]

from __future__ import annotations

from typing import Annotated, Any, Dict, Literal, Optional, Union

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    StrictStr,
    ValidationInfo,
    field_validator,
    model_serializer,
)
from pydantic_core import PydanticCustomError

from fruitcodec.models.fruit import Fruit

# Document keys, in the order they are written.
FRUIT_KEY = "fruit"
OWNER_KEY = "owner"
DESCRIPTION_KEY = "description"
DOCUMENT_KEYS = (FRUIT_KEY, OWNER_KEY, DESCRIPTION_KEY)

# Validation context flag set by the codec when the input comes from a document.
WIRE_CONTEXT = "wire"


# -----------------
# Note: present / absent
# -----------------


class NotePresent(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: Literal["present"] = "present"
    text: StrictStr


class NoteAbsent(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: Literal["absent"] = "absent"


Note = Annotated[
    Union[NotePresent, NoteAbsent],
    Field(discriminator="kind"),
]


# -----------------
# Record
# -----------------


class Record(BaseModel):
    """A categorized, owned item with an optional note.

    Field names are the Python-side names; aliases are the document keys.
    ``note`` accepts a plain ``str`` (present) or ``None`` (absent) and
    normalizes it into the ``Note`` sum type.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    category: Fruit = Field(alias=FRUIT_KEY)
    owner: StrictStr
    note: Note = Field(default_factory=NoteAbsent, alias=DESCRIPTION_KEY)

    @field_validator("category", mode="before")
    @classmethod
    def _parse_label(cls, value: Any) -> Any:
        if isinstance(value, Fruit):
            return value
        if not isinstance(value, str):
            raise PydanticCustomError(
                "invalid_type",
                "expected a fruit label string, found {found}",
                {"found": type(value).__name__},
            )
        fruit = Fruit.lookup(value)
        if fruit is None:
            raise PydanticCustomError(
                "unknown_variant",
                "unknown variant `{value}`",
                {"value": value},
            )
        return fruit

    @field_validator("note", mode="before")
    @classmethod
    def _normalize_note(cls, value: Any, info: ValidationInfo) -> Any:
        if value is None:
            return NoteAbsent()
        if isinstance(value, str):
            return NotePresent(text=value)
        if info.context and info.context.get(WIRE_CONTEXT):
            # Documents carry the note as bare text; the tagged form is Python-side only.
            raise PydanticCustomError(
                "invalid_type",
                "expected a string or null, found {found}",
                {"found": type(value).__name__},
            )
        return value

    @property
    def description(self) -> Optional[str]:
        if isinstance(self.note, NotePresent):
            return self.note.text
        return None

    @model_serializer
    def _to_document(self) -> Dict[str, Any]:
        document: Dict[str, Any] = {
            FRUIT_KEY: self.category.label,
            OWNER_KEY: self.owner,
        }
        if isinstance(self.note, NotePresent):
            document[DESCRIPTION_KEY] = self.note.text
        return document

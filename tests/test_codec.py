import logging

import pytest

from fruitcodec.codec import decode, decode_file, encode, encode_file
from fruitcodec.core.exceptions import DecodeError, DecodeErrorKind
from fruitcodec.models.codec_config import EncoderConfig
from fruitcodec.models.fruit import Fruit
from fruitcodec.models.record import NoteAbsent, NotePresent, Record


WITH_DESCRIPTION = """{
  "fruit": "apple",
  "owner": "John",
  "description": "a sweet one"
}"""

WITHOUT_DESCRIPTION = """{
  "fruit": "apple",
  "owner": "John"
}"""


def test_decode_then_encode_reproduces_document_with_description():
    record = decode(WITH_DESCRIPTION)

    assert record == Record(
        category=Fruit.APPLE,
        owner="John",
        note=NotePresent(text="a sweet one"),
    )
    assert encode(record) == WITH_DESCRIPTION


def test_decode_then_encode_omits_absent_description():
    record = decode(WITHOUT_DESCRIPTION)

    assert record.category is Fruit.APPLE
    assert record.owner == "John"
    assert isinstance(record.note, NoteAbsent)
    assert record.description is None

    encoded = encode(record)
    assert encoded == WITHOUT_DESCRIPTION
    assert "description" not in encoded


def test_decode_reports_missing_fruit():
    with pytest.raises(DecodeError) as exc:
        decode('{\n  "owner": "John"\n}')

    assert exc.value.kind is DecodeErrorKind.MISSING_FIELD
    assert exc.value.field == "fruit"
    assert "missing field `fruit`" in str(exc.value)


def test_decode_reports_missing_owner():
    with pytest.raises(DecodeError) as exc:
        decode('{\n  "fruit": "apple"\n}')

    assert exc.value.kind is DecodeErrorKind.MISSING_FIELD
    assert exc.value.field == "owner"
    assert "missing field `owner`" in str(exc.value)


def test_decode_reports_unknown_variant():
    with pytest.raises(DecodeError) as exc:
        decode('{\n  "fruit": "appleWithTypo",\n  "owner": "John"\n}')

    assert exc.value.kind is DecodeErrorKind.UNKNOWN_VARIANT
    assert exc.value.value == "appleWithTypo"
    assert exc.value.field == "fruit"
    assert "unknown variant `appleWithTypo`" in str(exc.value)
    assert "expected one of `apple`, `orange`, `banana`" in str(exc.value)


@pytest.mark.parametrize("label", ["apple", "orange", "banana"])
def test_every_label_survives_decode_and_encode(label):
    text = f'{{\n  "fruit": "{label}",\n  "owner": "John"\n}}'

    record = decode(text)

    assert record.category.label == label
    assert encode(record) == text


def test_labels_are_case_sensitive():
    with pytest.raises(DecodeError) as exc:
        decode('{"fruit": "Apple", "owner": "John"}')

    assert exc.value.kind is DecodeErrorKind.UNKNOWN_VARIANT
    assert exc.value.value == "Apple"


def test_missing_fruit_is_reported_before_missing_owner():
    with pytest.raises(DecodeError) as exc:
        decode("{}")

    assert exc.value.kind is DecodeErrorKind.MISSING_FIELD
    assert exc.value.field == "fruit"


def test_unknown_fruit_is_reported_before_missing_owner():
    with pytest.raises(DecodeError) as exc:
        decode('{"fruit": "kiwi"}')

    assert exc.value.kind is DecodeErrorKind.UNKNOWN_VARIANT
    assert exc.value.value == "kiwi"


def test_field_checks_ignore_key_order():
    with pytest.raises(DecodeError) as exc:
        decode('{"description": "x", "owner": "John"}')
    assert exc.value.field == "fruit"

    record = decode('{"owner": "John", "description": "x", "fruit": "banana"}')
    assert record.category is Fruit.BANANA
    assert encode(record) == '{\n  "fruit": "banana",\n  "owner": "John",\n  "description": "x"\n}'


def test_null_description_is_absent():
    record = decode('{"fruit": "orange", "owner": "Ann", "description": null}')

    assert isinstance(record.note, NoteAbsent)
    assert encode(record) == '{\n  "fruit": "orange",\n  "owner": "Ann"\n}'


def test_empty_description_is_present():
    text = '{\n  "fruit": "orange",\n  "owner": "Ann",\n  "description": ""\n}'

    record = decode(text)

    assert record.note == NotePresent(text="")
    assert record.description == ""
    assert encode(record) == text


def test_empty_owner_is_copied_verbatim():
    record = decode('{"fruit": "apple", "owner": ""}')

    assert record.owner == ""


def test_unknown_keys_are_ignored():
    record = decode('{"fruit": "apple", "owner": "John", "color": "red"}')

    assert encode(record) == WITHOUT_DESCRIPTION


def test_decode_accepts_bytes():
    record = decode(WITH_DESCRIPTION.encode("utf-8"))

    assert record.description == "a sweet one"


def test_invalid_utf8_bytes_are_a_syntax_error():
    with pytest.raises(DecodeError) as exc:
        decode(b'{"fruit": "apple", "owner": "\xff"}')

    assert exc.value.kind is DecodeErrorKind.SYNTAX


def test_malformed_json_is_a_syntax_error():
    with pytest.raises(DecodeError) as exc:
        decode('{\n  "fruit": "apple",\n')

    assert exc.value.kind is DecodeErrorKind.SYNTAX
    assert "invalid JSON" in str(exc.value)
    assert "line" in str(exc.value)


def test_non_object_document_is_invalid_type():
    with pytest.raises(DecodeError) as exc:
        decode('["apple", "John"]')

    assert exc.value.kind is DecodeErrorKind.INVALID_TYPE
    assert exc.value.field is None
    assert "found array" in str(exc.value)


@pytest.mark.parametrize(
    "text, field",
    [
        ('{"fruit": 3, "owner": "John"}', "fruit"),
        ('{"fruit": null, "owner": "John"}', "fruit"),
        ('{"fruit": "apple", "owner": ["John"]}', "owner"),
        ('{"fruit": "apple", "owner": 42}', "owner"),
        ('{"fruit": "apple", "owner": "John", "description": 7}', "description"),
        ('{"fruit": "apple", "owner": "John", "description": {"kind": "present", "text": "x"}}', "description"),
    ],
)
def test_mistyped_values_are_invalid_type(text, field):
    with pytest.raises(DecodeError) as exc:
        decode(text)

    assert exc.value.kind is DecodeErrorKind.INVALID_TYPE
    assert exc.value.field == field
    assert f"invalid type for field `{field}`" in str(exc.value)


def test_non_ascii_text_is_written_as_is():
    text = '{\n  "fruit": "banana",\n  "owner": "Zoë",\n  "description": "très mûre"\n}'

    assert encode(decode(text)) == text


def test_encoder_config_options_apply():
    record = Record(category=Fruit.BANANA, owner="Zoë")

    encoded = encode(record, EncoderConfig(indent=4, ensure_ascii=True, trailing_newline=True))

    assert encoded == '{\n    "fruit": "banana",\n    "owner": "Zo\\u00eb"\n}\n'


def test_decode_file_and_encode_file(tmp_path):
    source = tmp_path / "john.json"
    source.write_text(WITH_DESCRIPTION, encoding="utf-8")

    record = decode_file(source)
    assert record.description == "a sweet one"

    target = tmp_path / "copy.json"
    encode_file(record, target)
    assert target.read_text(encoding="utf-8") == WITH_DESCRIPTION


def test_decode_file_missing_path_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        decode_file(tmp_path / "nope.json")


def test_decode_failure_is_logged_at_debug(caplog):
    caplog.set_level(logging.DEBUG, logger="fruitcodec")

    with pytest.raises(DecodeError):
        decode('{"owner": "John"}')

    assert any("Decode failed (missing_field)" in r.getMessage() for r in caplog.records)

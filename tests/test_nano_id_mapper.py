import json

import pytest
from structlog.testing import capture_logs

from application.mappers.nano_id_mapper import (
    NanoIDJSONEncoder,
    decode_nano_id,
    dumps,
    encode_nano_id,
    loads,
)
from core_domain.exceptions import DataCorruptedError, NanoIDDecodeError, TypeMismatchError
from core_domain.value_objects.nano_id import NanoID


def test_encode_is_bare_string(abc_id):
    assert encode_nano_id(abc_id) == "abc"


def test_decode_valid_string():
    assert decode_nano_id("abc") == NanoID("abc")


def test_decode_invalid_string_raises_data_corrupted():
    with pytest.raises(DataCorruptedError) as exc_info:
        decode_nano_id("!!!")

    err = exc_info.value
    assert "Failed to convert" in str(err)
    assert '"!!!"' in str(err)
    assert "NanoID" in str(err)
    assert err.value == "!!!"
    assert err.type_name == "NanoID"


@pytest.mark.parametrize("raw", [42, None, {"value": "abc"}, ["abc"]])
def test_decode_non_string_raises_type_mismatch(raw):
    with pytest.raises(TypeMismatchError) as exc_info:
        decode_nano_id(raw)
    assert exc_info.value.type_name == "NanoID"


def test_decode_errors_are_value_errors():
    assert issubclass(DataCorruptedError, NanoIDDecodeError)
    assert issubclass(TypeMismatchError, NanoIDDecodeError)
    assert issubclass(NanoIDDecodeError, ValueError)


def test_decode_failure_is_logged():
    with capture_logs() as cap_logs:
        with pytest.raises(DataCorruptedError):
            decode_nano_id("a b")

    assert len(cap_logs) == 1
    entry = cap_logs[0]
    assert entry["log_level"] == "warning"
    assert entry["candidate"] == "a b"
    assert entry["type_name"] == "NanoID"


def test_decode_success_is_not_logged():
    with capture_logs() as cap_logs:
        decode_nano_id("abc")
    assert cap_logs == []


def test_dumps_wrapper(abc_id):
    assert dumps({"id": abc_id}) == '{"id":"abc"}'


def test_json_encoder_with_stdlib_dumps(abc_id):
    assert json.dumps({"ids": [abc_id]}, cls=NanoIDJSONEncoder) == '{"ids": ["abc"]}'


def test_json_encoder_rejects_unknown_types():
    with pytest.raises(TypeError):
        dumps({"x": object()})


def test_loads_decodes_named_fields():
    data = loads('{"id":"abc","name":"abc","child":{"id":"xyz"}}', nano_id_fields=["id"])
    assert data["id"] == NanoID("abc")
    assert data["name"] == "abc"
    assert data["child"]["id"] == NanoID("xyz")


def test_loads_without_fields_is_plain_json():
    assert loads('{"id":"abc"}') == {"id": "abc"}


def test_loads_invalid_field_fails():
    with pytest.raises(DataCorruptedError, match="Failed to convert"):
        loads('{"id":"!!!"}', nano_id_fields={"id"})


def test_round_trip():
    original = NanoID.generate()
    assert loads(dumps({"id": original}), nano_id_fields={"id"})["id"] == original

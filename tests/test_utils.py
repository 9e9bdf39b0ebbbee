import datetime
import uuid

import pytest

from dto_validator import PayloadDecodeError
from dto_validator.validator import decode_payload, dump_instance, format_json_data

from tests.schemas import Address, Customer, Newsletter, Signup


def test_decode_json_and_yaml():
    assert decode_payload('{"a": [1, 2]}') == {"a": [1, 2]}
    assert decode_payload(b"a:\n  - 1\n  - 2\n") == {"a": [1, 2]}
    assert decode_payload("") == {}


def test_decode_keeps_dates_as_strings():
    assert decode_payload("day: 2024-01-15\nat: 2024-01-15 10:00:00") == {
        "day": "2024-01-15",
        "at": "2024-01-15 10:00:00",
    }


def test_decode_errors():
    with pytest.raises(PayloadDecodeError, match="UTF-8"):
        decode_payload(b"\xff")
    with pytest.raises(PayloadDecodeError):
        decode_payload("a: [1, 2")


def test_format_json_data_shapes():
    assert format_json_data({"a": (1, 2)}) == {"a": [1, 2]}
    assert format_json_data([{"a": 1}]) == [{"a": 1}]
    assert format_json_data("just text") == {}
    assert format_json_data(3.5) == {}
    assert format_json_data(None) == {}


def test_format_json_data_normalizes_values():
    account = uuid.uuid4()
    formatted = format_json_data({"id": account, "on": datetime.date(2024, 1, 15), "tags": {"x"}})
    assert formatted == {"id": str(account), "on": "2024-01-15", "tags": ["x"]}


def test_dump_instance_uses_external_names():
    customer = Customer(name="Ana", address=Address(city="Recife", zip_code="50000"))
    assert dump_instance(customer) == {"name": "Ana", "address": {"city": "Recife", "zip": "50000"}}


def test_dump_instance_omits_empty_omitempty_members():
    assert dump_instance(Newsletter(email="")) == {"topics": []}
    assert dump_instance(Newsletter(email="a@b.com")) == {"email": "a@b.com", "topics": []}


def test_dump_instance_normalizes_nested_values():
    account = uuid.UUID("12345678-1234-5678-1234-567812345678")
    dumped = dump_instance(Signup(username="jane", account_id=account))
    assert dumped["accountId"] == "12345678-1234-5678-1234-567812345678"
    assert dumped["birthday"] is None

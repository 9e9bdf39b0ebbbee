import dataclasses
import uuid
from typing import Dict, List, Optional, Tuple

from dto_validator import dto_field
from dto_validator.validator import build_instance

from tests.schemas import Address, Customer, Point, Signup


@dataclasses.dataclass
class Order:
    id: uuid.UUID = dto_field(json="id")
    lines: List[Address] = dto_field(json="lines")
    sizes: Tuple[int, ...] = dto_field(json="sizes")
    extra: Dict[str, str] = dto_field(json="extra")
    note: Optional[str] = dto_field(json="note")
    hidden: str = dto_field(json="-", default="kept")
    untagged: int = 0


def test_members_matched_by_external_name():
    customer = build_instance(Customer, {"name": "Ana", "address": {"city": "Recife", "zip": "50000"}})
    assert customer == Customer(name="Ana", address=Address(city="Recife", zip_code="50000"))


def test_missing_members_keep_defaults_or_get_zero_values():
    assert build_instance(Point, {"x": 3}) == Point(x=3, y=0)
    assert build_instance(Signup, {}) == Signup()

    order = build_instance(Order, {})
    assert order.id == uuid.UUID(int=0)
    assert order.lines == []
    assert order.sizes == ()
    assert order.extra == {}
    assert order.note is None
    assert order.hidden == "kept"
    assert order.untagged == 0


def test_wrong_shapes_fall_back_to_zero_values():
    assert build_instance(Point, {"x": "three", "y": True}) == Point(x=0, y=0)
    order = build_instance(Order, {"id": "not-a-uuid", "lines": "x", "extra": [1], "note": 5})
    assert order.id == uuid.UUID(int=0)
    assert order.lines == []
    assert order.extra == {}
    assert order.note == ""


def test_nested_collections_are_decoded():
    order = build_instance(
        Order,
        {
            "id": "12345678-1234-5678-1234-567812345678",
            "lines": [{"city": "Recife"}, {"city": "Natal", "zip": "59000"}],
            "sizes": [1, 2.0],
            "extra": {"k": "v"},
            "note": None,
            "hidden": "ignored",
            "untagged": 7,
        },
    )
    assert order.id == uuid.UUID("12345678-1234-5678-1234-567812345678")
    assert order.lines == [Address(city="Recife"), Address(city="Natal", zip_code="59000")]
    assert order.sizes == (1, 2)
    assert order.extra == {"k": "v"}
    assert order.note is None
    assert order.hidden == "kept"
    assert order.untagged == 7


def test_non_mapping_input_yields_zero_instance():
    assert build_instance(Point, ["x"]) == Point(x=0, y=0)

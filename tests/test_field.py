import dataclasses
from typing import List

import pytest

from dto_validator import SchemaDefinitionError, dto_field
from dto_validator.rules import RuleKind
from dto_validator.validator import Field, build_fields

from tests.schemas import (
    CityOnlyCustomer,
    Company,
    Customer,
    Document,
    Misspelled,
    Node,
    OptionalAddressCustomer,
    Person,
    Signup,
)


@dataclasses.dataclass
class Shipping:
    destination: CityOnlyCustomer = dto_field(json="Destination", default_factory=CityOnlyCustomer)


def _names(schema_type):
    return [field.name for field in build_fields(schema_type)]


def _field(schema_type, name):
    return next(field for field in build_fields(schema_type) if field.name == name)


def test_nested_fields_follow_their_parent():
    assert _names(Customer) == ["name", "address", "address.city", "address.zip"]


def test_hidden_parent_name_leaves_children_untouched():
    assert _names(Document) == ["title", "audit", "createdBy"]


def test_nested_props_whitelist():
    assert _names(CityOnlyCustomer) == ["address", "address.city"]
    assert _names(Misspelled) == ["code", "address", "address.city", "address.zip"]


def test_prefix_is_lower_cased_parent_name():
    assert _names(Shipping) == ["Destination", "destination.address", "destination.address.city"]


def test_if_exists_propagates_to_children():
    fields = build_fields(OptionalAddressCustomer)
    assert all(field.validate_if_exists for field in fields)
    assert not _field(Customer, "address.city").validate_if_exists


def test_recursive_schema_is_rejected():
    with pytest.raises(SchemaDefinitionError, match="Node"):
        build_fields(Node)


def test_rule_order():
    kinds = [rule.kind for rule in _field(Signup, "username").generate_rules()]
    assert kinds == [RuleKind.REQUIRED, RuleKind.TYPE, RuleKind.MIN_LENGTH, RuleKind.MAX_LENGTH]


def test_type_rule_only_when_required_or_requested():
    assert [rule.kind for rule in _field(Person, "age").generate_rules()] == [RuleKind.REQUIRED, RuleKind.TYPE]
    assert [rule.kind for rule in _field(Person, "height").generate_rules()] == [RuleKind.TYPE]
    assert [rule.kind for rule in _field(Signup, "email").generate_rules()] == [
        RuleKind.REQUIRED, RuleKind.TYPE, RuleKind.EMAIL,
    ]
    assert [rule.kind for rule in _field(Signup, "tags").generate_rules()] == [
        RuleKind.SLICE_MAX_LEN, RuleKind.MAX_LENGTH,
    ]


def test_unknown_hints_are_skipped():
    assert [rule.kind for rule in _field(Misspelled, "code").generate_rules()] == [RuleKind.REQUIRED, RuleKind.TYPE]


def test_extract_value_from_tree():
    data = {"name": "Ana", "address": {"city": "Recife"}, "createdBy": "ops"}
    assert _field(Customer, "name").extract_value_from(data) == "Ana"
    assert _field(Customer, "address.city").extract_value_from(data) == "Recife"
    assert _field(Customer, "address.zip").extract_value_from(data) is None
    assert _field(Customer, "address.city").extract_value_from({"address": "Recife"}) is None
    assert _field(Customer, "address.city").extract_value_from({}) is None
    assert _field(Document, "createdBy").extract_value_from(data) == "ops"


def test_extract_value_from_root_list():
    assert _field(Signup, "tags").extract_value_from(["a", "b"]) == ["a", "b"]


def test_collect_errors_per_element():
    @dataclasses.dataclass
    class Codes:
        codes: List[str] = dto_field(json="codes", validate="required,len=2", default_factory=list)

    field = build_fields(Codes)[0]
    field.value = ["ab", "abc", 7, "cd"]
    errors = field.collect_errors()
    # per-element rules never stop early
    assert [error.name for error in errors] == ["codes[2]", "codes[1]", "codes[2]"]
    assert [error.rule_type for error in errors] == [RuleKind.TYPE, RuleKind.LENGTH, RuleKind.LENGTH]


def test_collect_errors_empty_collection_only_reports_required():
    @dataclasses.dataclass
    class Codes:
        codes: List[str] = dto_field(json="codes", validate="required,len=2", default_factory=list)

    field = build_fields(Codes)[0]
    for value in ([], None):
        field.value = value
        errors = field.collect_errors()
        assert [(error.name, error.rule_type) for error in errors] == [("codes", RuleKind.REQUIRED)]


def test_collect_errors_stops_at_first_failure():
    field = _field(Signup, "username")
    field.value = ""
    assert [error.rule_type for error in field.collect_errors()] == [RuleKind.REQUIRED]


def test_field_repr():
    assert repr(_field(Customer, "address.city")) == "Field(name='address.city', type_name='str')"
    assert isinstance(_field(Customer, "name"), Field)


def test_whitelisted_struct_keeps_its_descendants():
    assert _names(Company) == ["branch", "branch.address", "branch.address.city", "branch.address.zip"]

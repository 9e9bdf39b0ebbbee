import re

import pytest

from dto_validator.config import DEFAULT_DATE_FORMAT
from dto_validator.rules import (
    HintMatcher,
    Rule,
    RuleKind,
    RuleRegistry,
    default_registry,
    get_rule_by_hint,
    get_type_validator,
    length_matcher,
    new_required_rule,
)
from dto_validator.rules.length import new_length_rule


@pytest.mark.parametrize(
    "hint, kind, argument",
    [
        ("len=5", RuleKind.LENGTH, "5"),
        ("minlen=3", RuleKind.MIN_LENGTH, "3"),
        ("maxlen=20", RuleKind.MAX_LENGTH, "20"),
        ("slice:len=2", RuleKind.SLICE_LEN, "2"),
        ("slice:minlen=1", RuleKind.SLICE_MIN_LEN, "1"),
        ("slice:maxlen=9", RuleKind.SLICE_MAX_LEN, "9"),
        ("email", RuleKind.EMAIL, ""),
        ("date", RuleKind.DATE, DEFAULT_DATE_FORMAT),
        ("date=", RuleKind.DATE, DEFAULT_DATE_FORMAT),
        ("date=%d/%m/%Y", RuleKind.DATE, "%d/%m/%Y"),
    ],
)
def test_hint_compiles_to_rule(hint, kind, argument):
    rule = get_rule_by_hint(hint)
    assert rule is not None
    assert rule.kind is kind
    assert rule.argument == argument


@pytest.mark.parametrize("hint", ["required", "type", "ifExists", "omitempty", "nestedProps=a|b", "lenght=3", "len=-1", "emails"])
def test_structural_and_unknown_hints_compile_to_nothing(hint):
    assert get_rule_by_hint(hint) is None


def test_slice_rules_are_flagged():
    assert get_rule_by_hint("slice:minlen=2").is_slice_rule()
    assert not get_rule_by_hint("minlen=2").is_slice_rule()
    assert not new_required_rule("str").is_slice_rule()


def test_registry_is_ordered_length_family_first():
    matchers = default_registry.matchers
    assert len(matchers) == 8
    assert matchers[0].compile("len=1").kind is RuleKind.LENGTH
    assert matchers[-1].compile("date").kind is RuleKind.DATE


def test_unparseable_length_argument_defaults_to_zero():
    matcher = length_matcher(r"len=(\w+)", new_length_rule)
    rule = matcher.compile("len=abc")
    assert rule.argument == "0"


def test_extend_returns_new_registry():
    upper = Rule(
        kind=RuleKind.TYPE,
        description="verify if a value is upper case",
        validator=lambda value: isinstance(value, str) and value.isupper(),
        argument="upper case str",
    )
    registry = default_registry.extend(validation_matchers=[HintMatcher(re.compile(r"upper"), lambda match: upper)])

    assert registry.get_rule_by_hint("upper") is upper
    assert default_registry.get_rule_by_hint("upper") is None
    assert registry.get_rule_by_hint("len=2").kind is RuleKind.LENGTH
    assert isinstance(registry, RuleRegistry)


@pytest.mark.parametrize(
    "value, expected",
    [(None, False), ("", False), ("x", True), ([], False), ([1], True), ({}, True), (0, True), (False, True)],
)
def test_required_rule(value, expected):
    assert new_required_rule("any").is_valid(value) is expected


def test_length_rules_count_characters_of_strings_only():
    assert get_rule_by_hint("len=5").is_valid("abcde")
    assert not get_rule_by_hint("len=5").is_valid("abcd")
    assert get_rule_by_hint("len=2").is_valid("çã")
    assert not get_rule_by_hint("minlen=1").is_valid(5)
    assert get_rule_by_hint("maxlen=3").is_valid("abc")
    assert not get_rule_by_hint("maxlen=3").is_valid("abcd")


def test_collection_count_rules():
    assert get_rule_by_hint("slice:len=2").is_valid([1, 2])
    assert get_rule_by_hint("slice:minlen=2").is_valid((1, 2, 3))
    assert not get_rule_by_hint("slice:minlen=2").is_valid([])
    assert not get_rule_by_hint("slice:maxlen=1").is_valid([1, 2])
    assert not get_rule_by_hint("slice:len=0").is_valid(None)
    assert not get_rule_by_hint("slice:len=3").is_valid("abc")


@pytest.mark.parametrize(
    "value, expected",
    [
        ("a@b.com", True),
        ("Jane Doe <jane@acme.io>", True),
        ("not-an-email", False),
        ("a@b.com, c@d.com", False),
        ("", False),
        (42, False),
    ],
)
def test_email_rule(value, expected):
    assert get_rule_by_hint("email").is_valid(value) is expected


def test_date_rule():
    assert get_rule_by_hint("date").is_valid("2024-01-15")
    assert not get_rule_by_hint("date").is_valid("2024-02-30")
    assert not get_rule_by_hint("date").is_valid("15/01/2024")
    assert get_rule_by_hint("date=%d/%m/%Y").is_valid("15/01/2024")
    assert not get_rule_by_hint("date").is_valid(20240115)


def test_type_rules():
    int_rule = get_type_validator("int")
    assert int_rule.is_valid(3)
    assert int_rule.is_valid(3.0)
    assert int_rule.is_valid(None)
    assert not int_rule.is_valid(3.5)
    assert not int_rule.is_valid(True)
    assert not int_rule.is_valid("3")

    float_rule = get_type_validator("float")
    assert float_rule.is_valid(1)
    assert float_rule.is_valid(1.5)
    assert not float_rule.is_valid(False)

    assert get_type_validator("str").is_valid("x")
    assert not get_type_validator("str").is_valid(1)
    assert get_type_validator("bool").is_valid(False)
    assert not get_type_validator("bool").is_valid(0)

    assert get_type_validator("struct") is None
    assert get_type_validator("list[str]") is None


def test_date_rule_rejects_unpadded_fields():
    assert not get_rule_by_hint("date").is_valid("2024-1-5")
    assert not get_rule_by_hint("date=%d/%m/%Y").is_valid("5/1/2024")
    assert get_rule_by_hint("date=%d %b %Y").is_valid("05 jan 2024")

import pytest

from dto_validator import DtoValidatorError, FieldError, RuleKind, ValidationError, new_error_by_field


@pytest.mark.parametrize(
    "kind, argument, message",
    [
        (RuleKind.REQUIRED, "str", "'name' field of type 'str' is missing or empty"),
        (RuleKind.TYPE, "int", "'name' field type must be 'int'"),
        (RuleKind.TYPE, "struct", "'name' field type must be 'json'"),
        (RuleKind.LENGTH, "5", "'name' field must have 5 characters"),
        (RuleKind.MIN_LENGTH, "3", "'name' field must have at least 3 characters"),
        (RuleKind.MAX_LENGTH, "20", "'name' field must have 20 characters at max"),
        (RuleKind.EMAIL, "", "the value provided for the 'name' field isn't a valid email"),
        (RuleKind.DATE, "%Y-%m-%d", "'name' field doesn't match with the '%Y-%m-%d' format"),
        (RuleKind.SLICE_LEN, "2", "the 'name' field must have 2 elements"),
        (RuleKind.SLICE_MIN_LEN, "2", "the 'name' field must have at least 2 elements"),
        (RuleKind.SLICE_MAX_LEN, "2", "the 'name' field must have 2 elements at max"),
    ],
)
def test_messages_per_rule_kind(kind, argument, message):
    error = new_error_by_field(kind, "name", argument)
    assert error == FieldError(name="name", message=message, rule_type=kind)


def test_rule_kind_accepts_its_string_value():
    assert new_error_by_field("slice:minlen", "items", "2").rule_type is RuleKind.SLICE_MIN_LEN
    assert str(RuleKind.SLICE_MIN_LEN) == "slice:minlen"


def test_unknown_rule_kind_is_rejected():
    with pytest.raises(ValueError):
        new_error_by_field("nope", "name")


def test_validation_error_views():
    errors = [
        new_error_by_field(RuleKind.REQUIRED, "name", "str"),
        new_error_by_field(RuleKind.EMAIL, "email"),
    ]
    error = ValidationError(errors)

    assert isinstance(error, DtoValidatorError)
    assert len(error) == 2
    assert list(error) == errors
    assert error.field_errors == errors
    assert error.fields() == ["name", "email"]
    assert error.rule_types() == [RuleKind.REQUIRED, RuleKind.EMAIL]
    assert error.messages() == [errors[0].message, errors[1].message]
    assert str(error) == f"{errors[0].message} & {errors[1].message}"
    assert str(ValidationError(errors, separator="\n")) == "\n".join(error.messages())

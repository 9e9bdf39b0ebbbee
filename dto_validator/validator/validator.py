# Copyright 2026 TIER IV, inc.
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

"""Validation executor.

A call runs once through discovery (flatten the schema into Fields),
binding (extract each Field's value), evaluation (run its rules) and
aggregation (collect FieldErrors). An empty aggregate means success.
"""

from __future__ import annotations

import logging
from typing import Any, List, Optional, Tuple, Type, TypeVar

from ..config import validator_config
from ..rules import FieldError, RuleRegistry
from ..schema.description import check_hints
from .error import ValidationError
from .field import Field, build_fields
from .instance_builder import build_instance
from .utils import format_json_data

logger = logging.getLogger(__name__)

T = TypeVar("T")


def build_validators(schema_type: type, registry: Optional[RuleRegistry] = None) -> List[Field]:
    if validator_config.strict_hints:
        check_hints(schema_type, registry)
    return build_fields(schema_type, registry)


def _can_skip(field: Field, value: Any) -> bool:
    if not field.validate_if_exists:
        return False
    if value is None:
        return True
    # an empty collection only counts as absent when ifExists is explicit
    return field.is_slice and field.member.requests_if_exists and isinstance(value, (list, tuple)) and len(value) == 0


def try_validators(data: Any, fields: List[Field]) -> List[FieldError]:
    """Bind every non-struct field to its value and collect rule failures."""
    errors: List[FieldError] = []
    for field in fields:
        # struct members only seed their nested fields
        if field.is_struct:
            continue
        value = field.extract_value_from(data)
        if _can_skip(field, value):
            logger.debug(f"Skipping absent field '{field.name}'")
            continue
        field.value = value
        errors.extend(field.collect_errors())
    return errors


def _validate_formatted(schema_type: type, formatted: Any, registry: Optional[RuleRegistry]) -> Optional[ValidationError]:
    fields = build_validators(schema_type, registry)
    field_errors = try_validators(formatted, fields)
    logger.debug(
        f"Validated {schema_type.__name__}: {len(fields)} fields, {len(field_errors)} errors"
    )
    if not field_errors:
        return None
    return ValidationError(field_errors)


def validate(schema_type: type, data: Any, *, registry: Optional[RuleRegistry] = None) -> Optional[ValidationError]:
    """Validate ``data`` against ``schema_type``.

    Returns:
        None on success, otherwise a ValidationError holding every violation.

    Raises:
        SchemaDefinitionError: If the schema cannot be described.
        PayloadDecodeError: If a raw payload cannot be decoded.
    """
    return _validate_formatted(schema_type, format_json_data(data), registry)


def validate_dto(
    schema_type: Type[T], data: Any, *, registry: Optional[RuleRegistry] = None
) -> Tuple[Optional[T], Optional[ValidationError]]:
    """Validate, then decode ``data`` into an instance only if it is valid."""
    formatted = format_json_data(data)
    error = _validate_formatted(schema_type, formatted, registry)
    if error is not None:
        return None, error
    return build_instance(schema_type, formatted), None


def validate_dto_partially(
    schema_type: Type[T], data: Any, *, registry: Optional[RuleRegistry] = None
) -> Tuple[T, Optional[ValidationError]]:
    """Decode ``data`` into an instance whatever the outcome, and report the outcome."""
    formatted = format_json_data(data)
    return build_instance(schema_type, formatted), _validate_formatted(schema_type, formatted, registry)


def ensure_valid_dto(schema_type: Type[T], data: Any, *, registry: Optional[RuleRegistry] = None) -> T:
    """Like :func:`validate_dto` but raises the ValidationError instead of returning it."""
    instance, error = validate_dto(schema_type, data, registry=registry)
    if error is not None:
        raise error
    return instance

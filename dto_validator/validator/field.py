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

"""Per-call field descriptors built from schema descriptions."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any, List, Optional, Tuple

from ..exceptions import SchemaDefinitionError
from ..rules import FieldError, Rule, RuleKind, RuleRegistry, default_registry, get_type_validator, new_required_rule
from ..schema.description import (
    FIELD_DELIMITER,
    NESTED_PROPS_HINT,
    STRUCTURAL_HINTS,
    SchemaMember,
    describe_schema,
    is_whitelisted,
)

logger = logging.getLogger(__name__)


def _is_sequence(value: Any) -> bool:
    return isinstance(value, (list, tuple))


class Field:
    """One schema member bound to the data of a single validation call."""

    def __init__(self, member: SchemaMember, registry: Optional[RuleRegistry] = None):
        self.member = member
        self.name: str = member.name
        self.value: Any = None
        self.validate_if_exists: bool = member.validate_if_exists
        self._registry = registry or default_registry

    def __repr__(self) -> str:
        return f"Field(name={self.name!r}, type_name={self.type_name!r})"

    @property
    def type_name(self) -> str:
        return self.member.type_name

    @property
    def hide_parent_name(self) -> bool:
        return self.member.hide_parent_name

    @property
    def omitempty(self) -> bool:
        return self.member.omitempty

    @property
    def is_struct(self) -> bool:
        return self.member.is_struct

    @property
    def is_slice(self) -> bool:
        return self.member.is_slice

    @property
    def is_required(self) -> bool:
        return self.member.is_required

    @property
    def must_validate_type(self) -> bool:
        return self.member.must_validate_type

    @property
    def hints(self) -> Tuple[str, ...]:
        return self.member.hints

    def collect_errors(self) -> List[FieldError]:
        """Run every rule against the bound value.

        Per-element rules on a collection report each failing element and
        never stop early. Any other rule stops the field at its first failure.
        """
        errors: List[FieldError] = []
        for rule in self.generate_rules():
            if self.is_slice and not rule.is_slice_rule() and (self.value is None or _is_sequence(self.value)):
                if not self.value:
                    if rule.kind is RuleKind.REQUIRED:
                        errors.append(rule.generate_error(self.name))
                    continue
                for index, element in enumerate(self.value):
                    if not rule.is_valid(element):
                        errors.append(rule.generate_error(f"{self.name}[{index}]"))
            elif not rule.is_valid(self.value):
                errors.append(rule.generate_error(self.name))
                break
        return errors

    def generate_rules(self) -> List[Rule]:
        rules: List[Rule] = []
        if self.is_required:
            rules.append(new_required_rule(self.type_name))
        if self.is_required or self.must_validate_type:
            type_name = self.member.element_type_name if self.is_slice else self.type_name
            type_rule = get_type_validator(type_name)
            if type_rule is not None:
                rules.append(type_rule)
        for hint in self.hints:
            rule = self._registry.get_rule_by_hint(hint)
            if rule is None:
                if hint not in STRUCTURAL_HINTS and not hint.startswith(NESTED_PROPS_HINT):
                    logger.debug(f"Ignoring unknown hint '{hint}' on field '{self.name}'")
                continue
            rules.append(rule)
        return rules

    def generate_nested_fields(self, ancestors: Tuple[type, ...] = ()) -> List["Field"]:
        schema = self.member.nested_schema
        if schema is None:
            return []
        if schema in ancestors:
            raise SchemaDefinitionError(
                f"Recursive schema: '{schema.__name__}' is nested inside itself (field '{self.name}')"
            )

        nested_fields = build_fields(schema, registry=self._registry, ancestors=ancestors + (schema,))

        whitelist = self.member.nested_props
        if whitelist:
            nested_fields = [nested for nested in nested_fields if is_whitelisted(nested.name, whitelist)]

        if self.member.requests_if_exists:
            for nested in nested_fields:
                if not nested.validate_if_exists:
                    nested.validate_if_exists = True

        if not self.hide_parent_name:
            prefix = self.name.lower()
            for nested in nested_fields:
                nested.name = f"{prefix}{FIELD_DELIMITER}{nested.name}"
        return nested_fields

    def extract_value_from(self, data: Any) -> Any:
        """Look the field's (possibly dotted) name up in an untyped tree."""
        if FIELD_DELIMITER not in self.name:
            if isinstance(data, list):
                return data
            if not isinstance(data, Mapping):
                return None
            return data.get(self.name)

        value: Any = data
        for key in self.name.split(FIELD_DELIMITER):
            if not isinstance(value, Mapping):
                return None
            value = value.get(key)
            if value is None:
                return None
        return value


def build_fields(
    schema_type: type,
    registry: Optional[RuleRegistry] = None,
    ancestors: Optional[Tuple[type, ...]] = None,
) -> List[Field]:
    """Flatten a schema into Fields, nested members following their parent."""
    if ancestors is None:
        ancestors = (schema_type,)

    fields: List[Field] = []
    for member in describe_schema(schema_type):
        field = Field(member, registry)
        fields.append(field)
        if field.is_struct or field.is_slice:
            fields.extend(field.generate_nested_fields(ancestors))
    return fields

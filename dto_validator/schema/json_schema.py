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

"""Render a schema description as a Draft 7 JSON Schema document.

The export covers what JSON Schema can express of the hint vocabulary:
presence and type, string length and collection count bounds, and the
``email`` / ``date`` formats. A date hint with a non-default format is kept
as an ``x-date-format`` annotation.
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional, Tuple

import jsonschema
from jsonschema.exceptions import SchemaError

from ..config import DEFAULT_DATE_FORMAT
from ..exceptions import SchemaDefinitionError
from ..rules import RuleKind, RuleRegistry, default_registry
from .description import FIELD_DELIMITER, UUID_TYPE_NAME, MemberKind, SchemaMember, describe_schema

JSON_SCHEMA_DRAFT = "http://json-schema.org/draft-07/schema#"

_JSON_TYPES: Dict[str, str] = {
    "str": "string",
    "int": "integer",
    "float": "number",
    "bool": "boolean",
    "dict": "object",
    UUID_TYPE_NAME: "string",
}


def _scalar_schema(type_name: Optional[str]) -> Dict[str, Any]:
    json_type = _JSON_TYPES.get(type_name or "")
    if json_type is None:
        return {}
    schema: Dict[str, Any] = {"type": json_type}
    if type_name == UUID_TYPE_NAME:
        schema["format"] = "uuid"
    return schema


def _apply_hint_rules(member: SchemaMember, schema: Dict[str, Any], registry: RuleRegistry) -> None:
    # per-element rules constrain the items of a collection
    target = schema.get("items", schema) if member.is_slice else schema
    for hint in member.hints:
        rule = registry.get_rule_by_hint(hint)
        if rule is None:
            continue
        if rule.kind is RuleKind.LENGTH:
            target["minLength"] = target["maxLength"] = int(rule.argument)
        elif rule.kind is RuleKind.MIN_LENGTH:
            target["minLength"] = int(rule.argument)
        elif rule.kind is RuleKind.MAX_LENGTH:
            target["maxLength"] = int(rule.argument)
        elif rule.kind is RuleKind.SLICE_LEN:
            schema["minItems"] = schema["maxItems"] = int(rule.argument)
        elif rule.kind is RuleKind.SLICE_MIN_LEN:
            schema["minItems"] = int(rule.argument)
        elif rule.kind is RuleKind.SLICE_MAX_LEN:
            schema["maxItems"] = int(rule.argument)
        elif rule.kind is RuleKind.EMAIL:
            target["format"] = "email"
        elif rule.kind is RuleKind.DATE:
            if rule.argument == DEFAULT_DATE_FORMAT:
                target["format"] = "date"
            else:
                target["x-date-format"] = rule.argument


def _narrow(whitelist: Tuple[str, ...], name: str) -> Optional[Tuple[str, ...]]:
    # None drops the member; () keeps it with all of its children
    if name in whitelist:
        return ()
    prefix = f"{name}{FIELD_DELIMITER}"
    inner = tuple(entry[len(prefix):] for entry in whitelist if entry.startswith(prefix))
    return inner or None


def _member_schema(
    member: SchemaMember,
    registry: RuleRegistry,
    seen: Tuple[type, ...],
    whitelists: Tuple[Tuple[str, ...], ...],
    conditional: bool,
) -> Dict[str, Any]:
    nested = member.nested_schema
    if member.nested_props:
        whitelists = whitelists + (member.nested_props,)
    if member.kind is MemberKind.STRUCT:
        schema = _object_schema(nested, registry, seen, whitelists, conditional)
    elif member.kind is MemberKind.COLLECTION:
        if nested is not None:
            items = _object_schema(nested, registry, seen, whitelists, conditional)
        else:
            items = _scalar_schema(member.element_type_name)
        schema = {"type": "array", "items": items}
    elif member.kind is MemberKind.MAPPING:
        schema = {"type": "object"}
    else:
        schema = _scalar_schema(member.type_name)

    _apply_hint_rules(member, schema, registry)

    if member.is_required and not conditional:
        if schema.get("type") == "string":
            schema.setdefault("minLength", 1)
        elif schema.get("type") == "array":
            schema.setdefault("minItems", 1)
    elif isinstance(schema.get("type"), str):
        schema["type"] = [schema["type"], "null"]
    return schema


def _object_schema(
    schema_type: type,
    registry: RuleRegistry,
    seen: Tuple[type, ...],
    whitelists: Tuple[Tuple[str, ...], ...] = (),
    conditional: bool = False,
) -> Dict[str, Any]:
    """Render one schema level.

    ``whitelists`` holds the ``nestedProps`` restrictions that apply at this
    level; ``conditional`` is set below an ``ifExists`` member, where nothing
    is required.
    """
    if schema_type in seen:
        return {"type": "object"}
    seen = seen + (schema_type,)

    properties: Dict[str, Any] = {}
    required: List[str] = []
    for member in describe_schema(schema_type):
        narrowed = [_narrow(whitelist, member.name) for whitelist in whitelists]
        if None in narrowed:
            continue
        member_conditional = conditional or member.requests_if_exists
        prop = _member_schema(
            member, registry, seen, tuple(inner for inner in narrowed if inner), member_conditional
        )
        if member.is_struct and member.hide_parent_name:
            # children of a hidden member live one level up
            properties.update(prop.get("properties", {}))
            required.extend(prop.get("required", []))
            continue
        properties[member.name] = prop
        if member.is_required and not member_conditional:
            required.append(member.name)

    schema: Dict[str, Any] = {"type": "object", "properties": properties}
    if required:
        schema["required"] = required
    return schema


def to_json_schema(schema_type: type, registry: Optional[RuleRegistry] = None) -> Dict[str, Any]:
    """Export ``schema_type`` as a JSON Schema dictionary.

    Raises:
        SchemaDefinitionError: If the schema cannot be described or the
            rendered document is not a valid Draft 7 schema.
    """
    body = _object_schema(schema_type, registry or default_registry, ())
    document = {"$schema": JSON_SCHEMA_DRAFT, "title": schema_type.__name__, **body}
    try:
        jsonschema.Draft7Validator.check_schema(document)
    except SchemaError as e:
        raise SchemaDefinitionError(f"Rendered JSON Schema for '{schema_type.__name__}' is invalid: {e.message}") from e
    return document

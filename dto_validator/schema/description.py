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

"""Static description of dataclass schemas.

A schema is a dataclass whose members carry their annotations in the field
metadata. Describing a schema type resolves every member once into a frozen
:class:`SchemaMember` record; the records are cached per type and shared
read-only between validation calls.
"""

from __future__ import annotations

import collections.abc
import dataclasses
import logging
import re
import types
import typing
import uuid
from enum import Enum
from typing import Any, Dict, List, Optional, Tuple

from ..config import validator_config
from ..exceptions import SchemaDefinitionError
from ..rules.compilers import RuleRegistry, default_registry

logger = logging.getLogger(__name__)

# Metadata keys
JSON_TAG = "json"
VALIDATION_TAG = "validate"
HIDE_PARENT_NAME_TAG = "hideParentName"

# Structural hints
REQUIRED_HINT = "required"
TYPE_HINT = "type"
IF_EXISTS_HINT = "ifExists"
OMITEMPTY_HINT = "omitempty"
NESTED_PROPS_HINT = "nestedProps"

# Joins a parent name and a nested member name
FIELD_DELIMITER = "."

STRUCTURAL_HINTS = frozenset({REQUIRED_HINT, TYPE_HINT, IF_EXISTS_HINT, OMITEMPTY_HINT})

# Type names
STRUCT_TYPE_NAME = "struct"
MAPPING_TYPE_NAME = "dict"
UUID_TYPE_NAME = "string UUID"
ANY_TYPE_NAME = "any"

_NESTED_PROPS_RE = re.compile(r"nestedProps=([A-Za-z0-9_.|]+)")

_COLLECTION_ORIGINS = (
    list,
    tuple,
    set,
    frozenset,
    collections.abc.Sequence,
    collections.abc.MutableSequence,
    collections.abc.Set,
    collections.abc.MutableSet,
)
_MAPPING_ORIGINS = (dict, collections.abc.Mapping, collections.abc.MutableMapping)

_UNION_TYPES: Tuple[Any, ...] = (typing.Union,)
if hasattr(types, "UnionType"):
    _UNION_TYPES += (types.UnionType,)


class MemberKind(str, Enum):
    SCALAR = "scalar"
    STRUCT = "struct"
    COLLECTION = "collection"
    MAPPING = "mapping"


@dataclasses.dataclass(frozen=True)
class SchemaMember:
    """One member of a schema type, resolved."""

    attr_name: str
    name: str
    annotation: Any
    kind: MemberKind
    type_name: str
    optional: bool = False
    validation: str = ""
    json_options: Tuple[str, ...] = ()
    hide_parent_name: bool = False
    element_type: Any = None
    element_type_name: Optional[str] = None
    nested_schema: Optional[type] = None

    @property
    def hints(self) -> Tuple[str, ...]:
        return split_hints(self.validation)

    @property
    def is_struct(self) -> bool:
        return self.kind is MemberKind.STRUCT

    @property
    def is_slice(self) -> bool:
        return self.kind is MemberKind.COLLECTION

    @property
    def omitempty(self) -> bool:
        return OMITEMPTY_HINT in self.json_options or OMITEMPTY_HINT in self.hints

    @property
    def is_required(self) -> bool:
        return REQUIRED_HINT in self.hints and not self.omitempty

    @property
    def must_validate_type(self) -> bool:
        return TYPE_HINT in self.hints

    @property
    def requests_if_exists(self) -> bool:
        """True when the annotation explicitly asks for conditional validation."""
        return IF_EXISTS_HINT in self.hints

    @property
    def validate_if_exists(self) -> bool:
        return self.requests_if_exists or REQUIRED_HINT not in self.hints

    @property
    def nested_props(self) -> Tuple[str, ...]:
        match = _NESTED_PROPS_RE.search(self.validation)
        if match is None:
            return ()
        return tuple(name for name in match.group(1).split("|") if name)


def is_whitelisted(name: str, whitelist: Tuple[str, ...]) -> bool:
    """True when ``name`` is a whitelisted member or lies beneath one."""
    return any(name == entry or name.startswith(f"{entry}{FIELD_DELIMITER}") for entry in whitelist)


def split_hints(validation: str) -> Tuple[str, ...]:
    return tuple(token.strip() for token in validation.split(",") if token.strip())


def dto_field(
    *,
    json: Optional[str] = None,
    validate: str = "",
    hide_parent_name: bool = False,
    metadata: Optional[Dict[str, Any]] = None,
    **kwargs: Any,
) -> Any:
    """Declare a schema member.

    Args:
        json: External name, optionally followed by comma-separated options
            (e.g. ``"email,omitempty"``)
        validate: Comma-separated constraint hints (e.g. ``"required,maxlen=20"``)
        hide_parent_name: Do not prefix nested member names with this member's name
        metadata: Extra metadata to keep on the dataclass field
        **kwargs: Passed through to :func:`dataclasses.field`

    Returns:
        A dataclass field carrying the annotations in its metadata.
    """
    merged: Dict[str, Any] = dict(metadata or {})
    if json is not None:
        merged[JSON_TAG] = json
    if validate:
        merged[VALIDATION_TAG] = validate
    if hide_parent_name:
        merged[HIDE_PARENT_NAME_TAG] = True
    return dataclasses.field(metadata=merged, **kwargs)


def unwrap_optional(annotation: Any) -> Tuple[Any, bool]:
    """Strip ``Optional[...]`` from an annotation."""
    if typing.get_origin(annotation) in _UNION_TYPES:
        args = [arg for arg in typing.get_args(annotation) if arg is not type(None)]
        if len(args) == 1:
            return args[0], True
    return annotation, False


def _is_schema(annotation: Any) -> bool:
    return isinstance(annotation, type) and dataclasses.is_dataclass(annotation)


def scalar_type_name(annotation: Any) -> str:
    if annotation is Any:
        return ANY_TYPE_NAME
    if annotation is uuid.UUID:
        return UUID_TYPE_NAME
    name = getattr(annotation, "__name__", None)
    return name if isinstance(name, str) else str(annotation)


def _element_of(annotation: Any, origin: Any) -> Any:
    args = typing.get_args(annotation)
    if not args:
        return Any
    if origin is tuple and not (len(args) == 2 and args[1] is Ellipsis):
        return args[0] if len(set(args)) == 1 else Any
    return args[0]


def classify(annotation: Any) -> Dict[str, Any]:
    """Resolve kind, type name and nested references of an annotation."""
    annotation, _ = unwrap_optional(annotation)
    if _is_schema(annotation):
        return {"kind": MemberKind.STRUCT, "type_name": STRUCT_TYPE_NAME, "nested_schema": annotation}

    origin = typing.get_origin(annotation) or annotation
    if origin in _COLLECTION_ORIGINS:
        element, _ = unwrap_optional(_element_of(annotation, origin))
        element_name = scalar_type_name(element)
        return {
            "kind": MemberKind.COLLECTION,
            "type_name": f"list[{element_name}]",
            "element_type": element,
            "element_type_name": element_name,
            "nested_schema": element if _is_schema(element) else None,
        }
    if origin in _MAPPING_ORIGINS:
        return {"kind": MemberKind.MAPPING, "type_name": MAPPING_TYPE_NAME}

    return {"kind": MemberKind.SCALAR, "type_name": scalar_type_name(annotation)}


def _describe_member(schema_field: dataclasses.Field, annotation: Any) -> SchemaMember:
    json_tag = str(schema_field.metadata.get(JSON_TAG, "") or "")
    name, *json_options = json_tag.split(",")
    _, optional = unwrap_optional(annotation)
    return SchemaMember(
        attr_name=schema_field.name,
        name=name,
        annotation=annotation,
        optional=optional,
        validation=str(schema_field.metadata.get(VALIDATION_TAG, "") or ""),
        json_options=tuple(option.strip() for option in json_options),
        hide_parent_name=bool(schema_field.metadata.get(HIDE_PARENT_NAME_TAG, False)),
        **classify(annotation),
    )


_DESCRIPTION_CACHE: Dict[type, Tuple[SchemaMember, ...]] = {}


def describe_schema(schema_type: type) -> Tuple[SchemaMember, ...]:
    """Describe every member of a dataclass schema, in declaration order.

    Raises:
        SchemaDefinitionError: If ``schema_type`` is not a dataclass type or
            its annotations cannot be resolved.
    """
    if validator_config.cache_enabled and schema_type in _DESCRIPTION_CACHE:
        logger.debug(f"Loading schema description from cache: {schema_type.__name__}")
        return _DESCRIPTION_CACHE[schema_type]

    if not _is_schema(schema_type):
        raise SchemaDefinitionError(f"Schema must be a dataclass type, got: {schema_type!r}")

    try:
        annotations = typing.get_type_hints(schema_type)
    except (NameError, TypeError) as e:
        raise SchemaDefinitionError(
            f"Cannot resolve annotations of schema '{schema_type.__name__}': {e}"
        ) from e

    members = tuple(
        _describe_member(schema_field, annotations.get(schema_field.name, Any))
        for schema_field in dataclasses.fields(schema_type)
    )
    logger.debug(f"Described schema {schema_type.__name__} with {len(members)} members")

    if validator_config.cache_enabled:
        _DESCRIPTION_CACHE[schema_type] = members
    return members


def clear_cache() -> None:
    """Clear the schema description cache. Useful for testing."""
    _DESCRIPTION_CACHE.clear()


def _unknown_hints(schema_type: type, registry: RuleRegistry, seen: Tuple[type, ...]) -> List[str]:
    unknown: List[str] = []
    for member in describe_schema(schema_type):
        for hint in member.hints:
            if hint in STRUCTURAL_HINTS or hint.startswith(f"{NESTED_PROPS_HINT}="):
                continue
            if registry.get_rule_by_hint(hint) is None:
                unknown.append(f"{schema_type.__name__}.{member.attr_name}: '{hint}'")
        nested = member.nested_schema
        if nested is not None and nested not in seen:
            unknown.extend(_unknown_hints(nested, registry, seen + (nested,)))
    return unknown


def check_hints(schema_type: type, registry: Optional[RuleRegistry] = None) -> None:
    """Fail fast on hints that compile to no rule.

    Raises:
        SchemaDefinitionError: Listing every unknown hint of the schema and
            its nested schemas.
    """
    unknown = _unknown_hints(schema_type, registry or default_registry, (schema_type,))
    if unknown:
        details = "\n".join(f"  - {entry}" for entry in unknown)
        raise SchemaDefinitionError(f"Unknown hints in schema '{schema_type.__name__}':\n{details}")

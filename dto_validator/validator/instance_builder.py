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

"""Best-effort decoding of an untyped tree into a schema instance.

Nothing here validates: a value whose shape does not fit its member falls
back to the member's zero value, the way a lenient JSON decoder would.
"""

from __future__ import annotations

import collections.abc
import dataclasses
import typing
import uuid
from collections.abc import Mapping
from typing import Any, Dict, Type, TypeVar

from ..schema.description import MemberKind, classify, describe_schema, unwrap_optional

T = TypeVar("T")

_NIL_UUID = uuid.UUID(int=0)
_SCALAR_ZERO_VALUES: Dict[Any, Any] = {int: 0, float: 0.0, str: "", bool: False}
_SET_ORIGINS = (set, collections.abc.Set, collections.abc.MutableSet)


def _container_of(annotation: Any, items: list) -> Any:
    origin = typing.get_origin(annotation) or annotation
    if origin is tuple:
        return tuple(items)
    if origin is frozenset:
        return frozenset(items)
    if origin in _SET_ORIGINS:
        return set(items)
    return items


def zero_value(annotation: Any) -> Any:
    inner, optional = unwrap_optional(annotation)
    if optional:
        return None
    info = classify(inner)
    if info["kind"] is MemberKind.STRUCT:
        return build_instance(inner, {})
    if info["kind"] is MemberKind.COLLECTION:
        return _container_of(inner, [])
    if info["kind"] is MemberKind.MAPPING:
        return {}
    if inner is uuid.UUID:
        return _NIL_UUID
    return _SCALAR_ZERO_VALUES.get(inner)


def _decode_scalar(annotation: Any, value: Any) -> Any:
    if annotation is uuid.UUID:
        if isinstance(value, uuid.UUID):
            return value
        try:
            return uuid.UUID(str(value))
        except ValueError:
            return _NIL_UUID
    if annotation is bool:
        return value if isinstance(value, bool) else False
    if annotation is int:
        if isinstance(value, bool):
            return 0
        if isinstance(value, int):
            return value
        if isinstance(value, float) and value.is_integer():
            return int(value)
        return 0
    if annotation is float:
        if isinstance(value, (int, float)) and not isinstance(value, bool):
            return float(value)
        return 0.0
    if annotation is str:
        return value if isinstance(value, str) else ""
    return value


def decode_value(annotation: Any, value: Any) -> Any:
    inner, optional = unwrap_optional(annotation)
    if value is None:
        return None if optional else zero_value(inner)

    info = classify(inner)
    if info["kind"] is MemberKind.STRUCT:
        return build_instance(inner, value) if isinstance(value, Mapping) else zero_value(inner)
    if info["kind"] is MemberKind.COLLECTION:
        if not isinstance(value, (list, tuple)):
            return zero_value(inner)
        element = info["element_type"]
        return _container_of(inner, [decode_value(element, item) for item in value])
    if info["kind"] is MemberKind.MAPPING:
        return dict(value) if isinstance(value, Mapping) else {}
    return _decode_scalar(inner, value)


def build_instance(schema_type: Type[T], data: Any) -> T:
    """Decode ``data`` into a ``schema_type`` instance.

    Members are matched by external name, falling back to the attribute
    name for untagged members. Missing members keep their declared default
    or get their zero value.
    """
    if not isinstance(data, Mapping):
        data = {}

    kwargs: Dict[str, Any] = {}
    for member, schema_field in zip(describe_schema(schema_type), dataclasses.fields(schema_type)):
        if not schema_field.init:
            continue
        key = member.name or member.attr_name
        if key != "-" and key in data:
            kwargs[member.attr_name] = decode_value(member.annotation, data[key])
        elif schema_field.default is dataclasses.MISSING and schema_field.default_factory is dataclasses.MISSING:
            kwargs[member.attr_name] = zero_value(member.annotation)
    return schema_type(**kwargs)

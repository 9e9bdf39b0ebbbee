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

"""Turn whatever the caller hands in into a plain mapping/list tree."""

import dataclasses
import uuid
from collections.abc import Mapping
from datetime import date, datetime, time
from typing import Any, Dict, Union

import yaml

from ..exceptions import PayloadDecodeError
from ..schema.description import JSON_TAG, OMITEMPTY_HINT

_TIMESTAMP_TAG = "tag:yaml.org,2002:timestamp"


class PayloadLoader(yaml.SafeLoader):
    """Safe loader that leaves timestamps as plain strings."""


PayloadLoader.yaml_implicit_resolvers = {
    first: [(tag, regexp) for tag, regexp in resolvers if tag != _TIMESTAMP_TAG]
    for first, resolvers in yaml.SafeLoader.yaml_implicit_resolvers.items()
}


def decode_payload(payload: Union[str, bytes, bytearray]) -> Any:
    """Decode a JSON or YAML payload.

    Raises:
        PayloadDecodeError: If the payload is not valid UTF-8 or YAML/JSON.
    """
    if isinstance(payload, (bytes, bytearray)):
        try:
            payload = payload.decode("utf-8")
        except UnicodeDecodeError as e:
            raise PayloadDecodeError(f"Payload is not valid UTF-8: {e}") from e

    try:
        data = yaml.load(payload, Loader=PayloadLoader)
    except yaml.YAMLError as e:
        raise PayloadDecodeError(f"Failed to decode payload: {e}") from e
    return {} if data is None else data


def _is_empty(value: Any) -> bool:
    return value is None or value is False or value == 0 or (hasattr(value, "__len__") and len(value) == 0)


def dump_instance(instance: Any) -> Dict[str, Any]:
    """Dump a dataclass instance under the external names of its members."""
    data: Dict[str, Any] = {}
    for schema_field in dataclasses.fields(instance):
        name, *options = str(schema_field.metadata.get(JSON_TAG, "") or "").split(",")
        if name == "-":
            continue
        value = getattr(instance, schema_field.name)
        if OMITEMPTY_HINT in options and _is_empty(value):
            continue
        data[name or schema_field.name] = _normalize(value)
    return data


def _normalize(value: Any) -> Any:
    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        return dump_instance(value)
    if isinstance(value, Mapping):
        return {key: _normalize(item) for key, item in value.items()}
    if isinstance(value, (list, tuple, set, frozenset)):
        return [_normalize(item) for item in value]
    if isinstance(value, uuid.UUID):
        return str(value)
    if isinstance(value, (datetime, date, time)):
        return value.isoformat()
    return value


def format_json_data(data: Any) -> Any:
    """Normalize input into the untyped tree the validator walks.

    Returns a mapping, or a list when the payload's root is a collection.
    Scalars and ``None`` become an empty mapping.
    """
    if isinstance(data, (str, bytes, bytearray)):
        data = decode_payload(data)
    formatted = _normalize(data)
    if isinstance(formatted, (dict, list)):
        return formatted
    return {}

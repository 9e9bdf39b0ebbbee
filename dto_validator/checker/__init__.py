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

"""Payload checker: validate JSON/YAML payload files against a schema."""

import importlib
import logging
from pathlib import Path
from typing import List

from ..exceptions import PayloadDecodeError, SchemaDefinitionError
from ..validator import validate
from .payload_loader import PAYLOAD_SUFFIXES, load_payload_with_source
from .report import CheckResult
from .source_location import field_name_to_pointer, lookup_source

__all__ = ['check_files', 'load_schema_type', 'CheckResult', 'PAYLOAD_SUFFIXES']

logger = logging.getLogger(__name__)


def load_schema_type(reference: str) -> type:
    """Import a schema type from a ``package.module:ClassName`` reference.

    Raises:
        SchemaDefinitionError: If the reference is malformed or cannot be imported.
    """
    module_name, sep, attr_path = reference.partition(":")
    if not sep or not module_name or not attr_path:
        raise SchemaDefinitionError(
            f"Invalid schema reference: '{reference}'. Expected format: 'package.module:ClassName'"
        )
    try:
        target = importlib.import_module(module_name)
    except ImportError as e:
        raise SchemaDefinitionError(f"Cannot import schema module '{module_name}': {e}") from e

    for attr in attr_path.split("."):
        try:
            target = getattr(target, attr)
        except AttributeError as e:
            raise SchemaDefinitionError(f"Schema '{attr_path}' not found in module '{module_name}'") from e
    return target


def check_files(schema_type: type, file_paths: List[Path]) -> List[CheckResult]:
    """Validate a list of payload files.

    Args:
        schema_type: Dataclass schema every payload must satisfy
        file_paths: List of payload files to check

    Returns:
        List of CheckResult objects, one per file
    """
    results = []

    for file_path in file_paths:
        result = CheckResult(file_path)
        results.append(result)

        try:
            data, source_map = load_payload_with_source(file_path)
        except PayloadDecodeError as e:
            result.add_error(f"Failed to load payload: {e}")
            continue

        error = validate(schema_type, data)
        if error is None:
            continue
        for field_error in error:
            loc = lookup_source(source_map, field_name_to_pointer(field_error.name))
            result.add_error(
                field_error.message,
                field=field_error.name,
                rule=str(field_error.rule_type),
                line=loc.line,
                column=loc.column,
                yaml_path=loc.yaml_path,
            )
        logger.debug(f"{file_path}: {len(result.errors)} errors")

    return results

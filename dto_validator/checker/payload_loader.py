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

"""Payload file loader with line/column tracking."""

import logging
from pathlib import Path
from typing import Any, Dict, List, Tuple, Union

import yaml

from ..exceptions import PayloadDecodeError
from ..validator.utils import PayloadLoader, decode_payload
from .source_location import escape_pointer_token

logger = logging.getLogger(__name__)

PAYLOAD_SUFFIXES = ('.json', '.yaml', '.yml')


def _position(node: yaml.Node) -> Dict[str, int]:
    # PyYAML marks are 0-based
    return {"line": node.start_mark.line + 1, "column": node.start_mark.column + 1}


def build_source_map(content: str) -> Dict[str, Dict[str, int]]:
    """Map the JSON pointer of every node in ``content`` to its 1-based line/column.

    The node tree from ``yaml.compose`` carries positions that the decoded data
    loses. Content that does not compose yields an empty map.
    """
    try:
        root = yaml.compose(content, Loader=PayloadLoader)
    except yaml.YAMLError:
        return {}
    if root is None:
        return {}

    source_map: Dict[str, Dict[str, int]] = {}
    pending: List[Tuple[str, yaml.Node]] = [("", root)]
    while pending:
        pointer, node = pending.pop()
        source_map[pointer] = _position(node)
        if isinstance(node, yaml.MappingNode):
            pending.extend(
                (f"{pointer}/{escape_pointer_token(str(key.value))}", value)
                for key, value in node.value
                if isinstance(key, yaml.ScalarNode)
            )
        elif isinstance(node, yaml.SequenceNode):
            pending.extend((f"{pointer}/{index}", item) for index, item in enumerate(node.value))
    return source_map


def load_payload_with_source(file_path: Union[str, Path]) -> Tuple[Any, Dict[str, Dict[str, int]]]:
    """Load a JSON/YAML payload file and return (data, source_map).

    Raises:
        PayloadDecodeError: If the file is missing, unreadable or not valid YAML/JSON.
    """
    path = Path(file_path)
    if not path.is_file():
        raise PayloadDecodeError(f"Payload file not found: {path}")

    logger.debug(f"Loading payload file: {path}")
    try:
        content = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise PayloadDecodeError(f"Failed to read payload file {path}: {e}") from e

    return decode_payload(content), build_source_map(content)

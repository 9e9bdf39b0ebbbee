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

from __future__ import annotations

import re
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, Optional

_INDEX_RE = re.compile(r"\[(\d+)\]")


@dataclass(frozen=True)
class SourceLocation:
    file_path: Optional[Path] = None
    yaml_path: Optional[str] = None
    line: Optional[int] = None  # 1-based
    column: Optional[int] = None  # 1-based


def escape_pointer_token(token: str) -> str:
    return token.replace("~", "~0").replace("/", "~1")


def field_name_to_pointer(field_name: str) -> str:
    """Convert a field error name (``items[2].name``) to a JSON pointer (``/items/2/name``)."""
    tokens = []
    for segment in field_name.split("."):
        head = _INDEX_RE.split(segment)
        # split() alternates name, index, "", index, ...
        if head[0]:
            tokens.append(escape_pointer_token(head[0]))
        tokens.extend(token for token in head[1:] if token)
    return "".join(f"/{token}" for token in tokens)


def lookup_source(source_map: Optional[Dict[str, Dict[str, int]]], yaml_path: Optional[str]) -> SourceLocation:
    """Locate ``yaml_path``, falling back to its closest existing ancestor.

    Missing fields report the position of their closest enclosing node.
    """
    if not source_map or yaml_path is None:
        return SourceLocation(yaml_path=yaml_path)

    candidate = yaml_path
    while True:
        entry = source_map.get(candidate)
        if entry:
            return SourceLocation(yaml_path=yaml_path, line=entry.get("line"), column=entry.get("column"))
        if not candidate:
            return SourceLocation(yaml_path=yaml_path)
        candidate = candidate.rsplit("/", 1)[0]


def format_source(loc: Optional[SourceLocation]) -> str:
    """Render ``loc`` as `` (at file:line:col, path /a/0)``, or ``""`` when nothing is known."""
    if loc is None:
        return ""

    parts = []
    if loc.file_path is not None:
        position = [str(loc.file_path)] + [str(n) for n in (loc.line, loc.column) if n is not None]
        parts.append("at " + ":".join(position))
    if loc.yaml_path:
        parts.append(f"path {loc.yaml_path}")
    return f" ({', '.join(parts)})" if parts else ""

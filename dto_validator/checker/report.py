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

"""Per-file results of a payload check."""

from pathlib import Path
from typing import Any, Dict, List, Optional


class CheckResult:
    """Errors found in one payload file, in validation order."""

    def __init__(self, file_path: Path):
        self.file_path = file_path
        self.errors: List[Dict[str, Any]] = []

    @property
    def ok(self) -> bool:
        return not self.errors

    def add_error(
        self,
        message: str,
        field: Optional[str] = None,
        rule: Optional[str] = None,
        line: Optional[int] = None,
        column: Optional[int] = None,
        yaml_path: Optional[str] = None,
    ) -> None:
        """Record an error; location details that are unknown are left out.

        Args:
            message: Human readable error message
            field: Field name as reported by the validator (``tags[1]``)
            rule: Rule kind that failed
            line: 1-based line in the payload file
            column: 1-based column in the payload file
            yaml_path: JSON pointer of the offending value
        """
        details = {'field': field, 'rule': rule, 'line': line, 'column': column, 'yaml_path': yaml_path}
        error: Dict[str, Any] = {'message': message}
        error.update((key, value) for key, value in details.items() if value is not None)
        self.errors.append(error)

    def to_dict(self) -> Dict[str, Any]:
        return {'file': str(self.file_path), 'ok': self.ok, 'errors': list(self.errors)}

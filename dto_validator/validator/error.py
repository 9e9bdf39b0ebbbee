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

from typing import Iterable, Iterator, List, Optional

from ..config import validator_config
from ..exceptions import DtoValidatorError
from ..rules import FieldError, RuleKind


class ValidationError(DtoValidatorError):
    """All field errors of one validation call, in field discovery order."""

    def __init__(self, field_errors: Iterable[FieldError], separator: Optional[str] = None):
        self._field_errors = tuple(field_errors)
        self._separator = validator_config.error_separator if separator is None else separator
        super().__init__(str(self))

    def __str__(self) -> str:
        return self._separator.join(self.messages())

    def __repr__(self) -> str:
        return f"ValidationError({list(self._field_errors)!r})"

    def __len__(self) -> int:
        return len(self._field_errors)

    def __iter__(self) -> Iterator[FieldError]:
        return iter(self._field_errors)

    @property
    def field_errors(self) -> List[FieldError]:
        return list(self._field_errors)

    def messages(self) -> List[str]:
        return [field_error.message for field_error in self._field_errors]

    def fields(self) -> List[str]:
        return [field_error.name for field_error in self._field_errors]

    def rule_types(self) -> List[RuleKind]:
        return [field_error.rule_type for field_error in self._field_errors]

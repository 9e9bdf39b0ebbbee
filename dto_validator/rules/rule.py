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

from dataclasses import dataclass
from typing import Any, Callable

from .errors import FieldError, new_error_by_field
from .kinds import SLICE_RULE_KINDS, RuleKind


ValidatorFunc = Callable[[Any], bool]


@dataclass(frozen=True)
class Rule:
    """A compiled constraint: a predicate plus what it takes to report it."""

    kind: RuleKind
    description: str
    validator: ValidatorFunc
    argument: str = ""

    def is_valid(self, value: Any) -> bool:
        return self.validator(value)

    def generate_error(self, field_name: str) -> FieldError:
        return new_error_by_field(self.kind, field_name, self.argument)

    def is_slice_rule(self) -> bool:
        """True for rules bound to a collection's element count."""
        return self.kind in SLICE_RULE_KINDS

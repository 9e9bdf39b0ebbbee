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

"""Fixed vocabulary of rule kinds."""

from enum import Enum
from typing import FrozenSet


class RuleKind(str, Enum):
    """Identifier carried by every rule and every field error."""

    REQUIRED = "required"
    TYPE = "type"
    LENGTH = "length"
    MIN_LENGTH = "minlength"
    MAX_LENGTH = "maxlength"
    EMAIL = "email"
    DATE = "date"
    SLICE_LEN = "slice:len"
    SLICE_MIN_LEN = "slice:minlen"
    SLICE_MAX_LEN = "slice:maxlen"

    def __str__(self) -> str:
        return self.value


SLICE_RULE_KINDS: FrozenSet[RuleKind] = frozenset(
    {RuleKind.SLICE_LEN, RuleKind.SLICE_MIN_LEN, RuleKind.SLICE_MAX_LEN}
)

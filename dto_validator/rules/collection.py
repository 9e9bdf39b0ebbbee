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

"""Rules bound to the element count of a collection value."""

import operator
from typing import Any, Callable

from .kinds import RuleKind
from .rule import Rule, ValidatorFunc


def _count_validator(count: int, compare: Callable[[int, int], bool]) -> ValidatorFunc:
    def _validate(value: Any) -> bool:
        if value is None:
            return False
        if not isinstance(value, (list, tuple)):
            return False
        return compare(len(value), count)
    return _validate


def new_slice_len_rule(count: int) -> Rule:
    return Rule(
        kind=RuleKind.SLICE_LEN,
        description="verify if a value is an array and if has N elements",
        validator=_count_validator(count, operator.eq),
        argument=str(count),
    )


def new_slice_min_len_rule(count: int) -> Rule:
    return Rule(
        kind=RuleKind.SLICE_MIN_LEN,
        description="verify if a value is an array and if has at least N elements",
        validator=_count_validator(count, operator.ge),
        argument=str(count),
    )


def new_slice_max_len_rule(count: int) -> Rule:
    return Rule(
        kind=RuleKind.SLICE_MAX_LEN,
        description="verify if a value is an array and if has N elements at max",
        validator=_count_validator(count, operator.le),
        argument=str(count),
    )

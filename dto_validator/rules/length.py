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

from typing import Any

from .kinds import RuleKind
from .rule import Rule, ValidatorFunc


def _length_of(value: Any):
    if not isinstance(value, str):
        return None
    return len(value)


def _length_validator(length: int) -> ValidatorFunc:
    def _validate(value: Any) -> bool:
        size = _length_of(value)
        return size is not None and size == length
    return _validate


def _min_length_validator(length: int) -> ValidatorFunc:
    def _validate(value: Any) -> bool:
        size = _length_of(value)
        return size is not None and size >= length
    return _validate


def _max_length_validator(length: int) -> ValidatorFunc:
    def _validate(value: Any) -> bool:
        size = _length_of(value)
        return size is not None and size <= length
    return _validate


def new_length_rule(length: int) -> Rule:
    return Rule(
        kind=RuleKind.LENGTH,
        description=f"verify if a value has length equals to {length}",
        validator=_length_validator(length),
        argument=str(length),
    )


def new_min_length_rule(length: int) -> Rule:
    return Rule(
        kind=RuleKind.MIN_LENGTH,
        description=f"verify if a value has a minimum length of {length}",
        validator=_min_length_validator(length),
        argument=str(length),
    )


def new_max_length_rule(length: int) -> Rule:
    return Rule(
        kind=RuleKind.MAX_LENGTH,
        description=f"verify if a value has a maximum length of {length}",
        validator=_max_length_validator(length),
        argument=str(length),
    )

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

"""Type-convertibility rules, one shared instance per primitive type name."""

from __future__ import annotations

from typing import Any, Dict, Optional

from .kinds import RuleKind
from .rule import Rule, ValidatorFunc


def _is_int(value: Any) -> bool:
    if isinstance(value, bool):
        return False
    if isinstance(value, int):
        return True
    return isinstance(value, float) and value.is_integer()


def _is_float(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _is_str(value: Any) -> bool:
    return isinstance(value, str)


def _is_bool(value: Any) -> bool:
    return isinstance(value, bool)


def _nil_is_valid(check: ValidatorFunc) -> ValidatorFunc:
    # requiredness is a separate rule
    def _validate(value: Any) -> bool:
        if value is None:
            return True
        return check(value)
    return _validate


def new_type_rule(type_name: str, check: ValidatorFunc) -> Rule:
    return Rule(
        kind=RuleKind.TYPE,
        description=f"verify if a value is convertable to {type_name}",
        validator=_nil_is_valid(check),
        argument=type_name,
    )


_TYPE_VALIDATORS: Dict[str, Rule] = {
    "int": new_type_rule("int", _is_int),
    "float": new_type_rule("float", _is_float),
    "str": new_type_rule("str", _is_str),
    "bool": new_type_rule("bool", _is_bool),
}


def get_type_validator(type_name: str) -> Optional[Rule]:
    """Return the shared type rule for ``type_name``, or None when there is none."""
    return _TYPE_VALIDATORS.get(type_name)

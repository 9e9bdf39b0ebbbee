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

"""Field error records and the per-kind message renderers.

A message depends only on (rule kind, field name, argument), so any
FieldError can be rebuilt from those three values with
:func:`new_error_by_field`.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Dict, Union

from .kinds import RuleKind


@dataclass(frozen=True)
class FieldError:
    name: str
    message: str
    rule_type: RuleKind


def _required_message(field_name: str, field_type: str) -> str:
    return f"'{field_name}' field of type '{field_type}' is missing or empty"


def _type_message(field_name: str, field_type: str) -> str:
    if field_type == "struct":
        field_type = "json"
    return f"'{field_name}' field type must be '{field_type}'"


def _length_message(field_name: str, length: str) -> str:
    return f"'{field_name}' field must have {length} characters"


def _min_length_message(field_name: str, length: str) -> str:
    return f"'{field_name}' field must have at least {length} characters"


def _max_length_message(field_name: str, length: str) -> str:
    return f"'{field_name}' field must have {length} characters at max"


def _email_message(field_name: str, _argument: str) -> str:
    return f"the value provided for the '{field_name}' field isn't a valid email"


def _date_message(field_name: str, date_format: str) -> str:
    return f"'{field_name}' field doesn't match with the '{date_format}' format"


def _slice_len_message(field_name: str, count: str) -> str:
    return f"the '{field_name}' field must have {count} elements"


def _slice_min_len_message(field_name: str, count: str) -> str:
    return f"the '{field_name}' field must have at least {count} elements"


def _slice_max_len_message(field_name: str, count: str) -> str:
    return f"the '{field_name}' field must have {count} elements at max"


_MESSAGE_RENDERERS: Dict[RuleKind, Callable[[str, str], str]] = {
    RuleKind.REQUIRED: _required_message,
    RuleKind.TYPE: _type_message,
    RuleKind.LENGTH: _length_message,
    RuleKind.MIN_LENGTH: _min_length_message,
    RuleKind.MAX_LENGTH: _max_length_message,
    RuleKind.EMAIL: _email_message,
    RuleKind.DATE: _date_message,
    RuleKind.SLICE_LEN: _slice_len_message,
    RuleKind.SLICE_MIN_LEN: _slice_min_len_message,
    RuleKind.SLICE_MAX_LEN: _slice_max_len_message,
}


def new_error_by_field(rule_type: Union[RuleKind, str], field_name: str, argument: str = "") -> FieldError:
    """Render the FieldError of ``rule_type`` for ``field_name``.

    Raises:
        ValueError: If ``rule_type`` is not part of the rule vocabulary.
    """
    kind = RuleKind(rule_type)
    message = _MESSAGE_RENDERERS[kind](field_name, argument)
    return FieldError(name=field_name, message=message, rule_type=kind)

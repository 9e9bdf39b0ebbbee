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

from datetime import datetime
from typing import Any

from .kinds import RuleKind
from .rule import Rule, ValidatorFunc


def _date_validator(date_format: str) -> ValidatorFunc:
    def _validate(value: Any) -> bool:
        if not isinstance(value, str):
            return False
        try:
            parsed = datetime.strptime(value, date_format)
        except ValueError:
            return False
        # strptime accepts unpadded numbers (2024-1-5); the value must be canonical
        return parsed.strftime(date_format).lower() == value.lower()
    return _validate


def new_date_rule(date_format: str) -> Rule:
    return Rule(
        kind=RuleKind.DATE,
        description="verify if a value is a valid date",
        validator=_date_validator(date_format),
        argument=date_format,
    )

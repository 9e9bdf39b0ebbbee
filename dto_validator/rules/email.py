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

from email.utils import getaddresses
from typing import Any

from email_validator import EmailNotValidError, validate_email

from .kinds import RuleKind
from .rule import Rule


def validate_email_value(value: Any) -> bool:
    """Accept a single address, bare (``a@b.com``) or with a display name."""
    if not isinstance(value, str):
        return False
    addresses = getaddresses([value])
    if len(addresses) != 1:
        return False
    _, address = addresses[0]
    if not address:
        return False
    try:
        validate_email(address, check_deliverability=False)
    except EmailNotValidError:
        return False
    return True


EMAIL_RULE = Rule(
    kind=RuleKind.EMAIL,
    description="verify if a value is a valid email",
    validator=validate_email_value,
)


def new_email_rule() -> Rule:
    return EMAIL_RULE

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

"""Rules, their error records and the hint compiler."""

from .compilers import HintMatcher, RuleRegistry, default_registry, get_rule_by_hint, length_matcher
from .errors import FieldError, new_error_by_field
from .kinds import SLICE_RULE_KINDS, RuleKind
from .required import new_required_rule
from .rule import Rule, ValidatorFunc
from .type_rules import get_type_validator

__all__ = [
    "FieldError",
    "HintMatcher",
    "Rule",
    "RuleKind",
    "RuleRegistry",
    "SLICE_RULE_KINDS",
    "ValidatorFunc",
    "default_registry",
    "get_rule_by_hint",
    "get_type_validator",
    "length_matcher",
    "new_error_by_field",
    "new_required_rule",
]

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

"""Hint compiler: turns constraint-annotation tokens into rules.

Matchers live in two ordered, immutable families. The length family is
tried before the validation family and the first matching pattern wins.
A hint that matches nothing compiles to ``None``.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from re import Match, Pattern
from typing import Callable, Iterable, Optional, Tuple

from ..config import validator_config
from .collection import new_slice_len_rule, new_slice_max_len_rule, new_slice_min_len_rule
from .date import new_date_rule
from .email import new_email_rule
from .length import new_length_rule, new_max_length_rule, new_min_length_rule
from .rule import Rule


@dataclass(frozen=True)
class HintMatcher:
    pattern: Pattern[str]
    build: Callable[[Match[str]], Rule]

    def compile(self, hint: str) -> Optional[Rule]:
        match = self.pattern.fullmatch(hint)
        if match is None:
            return None
        return self.build(match)


def _int_argument(match: Match[str]) -> int:
    try:
        return int(match.group(1))
    except (TypeError, ValueError):
        return 0


def length_matcher(pattern: str, builder: Callable[[int], Rule]) -> HintMatcher:
    """Matcher whose single capture group is a non-negative integer argument."""
    return HintMatcher(re.compile(pattern), lambda match: builder(_int_argument(match)))


def _build_date_rule(match: Match[str]) -> Rule:
    date_format = match.group(1) or validator_config.default_date_format
    return new_date_rule(date_format)


LENGTH_MATCHERS: Tuple[HintMatcher, ...] = (
    length_matcher(r"len=(\d+)", new_length_rule),
    length_matcher(r"minlen=(\d+)", new_min_length_rule),
    length_matcher(r"maxlen=(\d+)", new_max_length_rule),
    length_matcher(r"slice:len=(\d+)", new_slice_len_rule),
    length_matcher(r"slice:minlen=(\d+)", new_slice_min_len_rule),
    length_matcher(r"slice:maxlen=(\d+)", new_slice_max_len_rule),
)

VALIDATION_MATCHERS: Tuple[HintMatcher, ...] = (
    HintMatcher(re.compile(r"email"), lambda match: new_email_rule()),
    HintMatcher(re.compile(r"date(?:=(.*))?"), _build_date_rule),
)


class RuleRegistry:
    """Ordered, read-only table of hint matchers."""

    def __init__(
        self,
        length_matchers: Iterable[HintMatcher] = LENGTH_MATCHERS,
        validation_matchers: Iterable[HintMatcher] = VALIDATION_MATCHERS,
    ):
        self._length_matchers = tuple(length_matchers)
        self._validation_matchers = tuple(validation_matchers)

    @property
    def matchers(self) -> Tuple[HintMatcher, ...]:
        return self._length_matchers + self._validation_matchers

    def get_rule_by_hint(self, hint: str) -> Optional[Rule]:
        for matcher in self.matchers:
            rule = matcher.compile(hint)
            if rule is not None:
                return rule
        return None

    def extend(
        self,
        *,
        length_matchers: Iterable[HintMatcher] = (),
        validation_matchers: Iterable[HintMatcher] = (),
    ) -> "RuleRegistry":
        """Return a new registry with extra matchers appended to each family."""
        return RuleRegistry(
            self._length_matchers + tuple(length_matchers),
            self._validation_matchers + tuple(validation_matchers),
        )


default_registry = RuleRegistry()


def get_rule_by_hint(hint: str) -> Optional[Rule]:
    return default_registry.get_rule_by_hint(hint)

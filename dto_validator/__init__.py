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

"""Schema-driven validation of untyped data trees against dataclass schemas."""

__version__ = "0.3.0"

from .exceptions import DtoValidatorError, PayloadDecodeError, SchemaDefinitionError
from .rules import FieldError, Rule, RuleKind, RuleRegistry, new_error_by_field
from .schema import describe_schema, dto_field, to_json_schema
from .validator import (
    ValidationError,
    ensure_valid_dto,
    validate,
    validate_dto,
    validate_dto_partially,
)

__all__ = [
    "DtoValidatorError",
    "FieldError",
    "PayloadDecodeError",
    "Rule",
    "RuleKind",
    "RuleRegistry",
    "SchemaDefinitionError",
    "ValidationError",
    "describe_schema",
    "dto_field",
    "ensure_valid_dto",
    "new_error_by_field",
    "to_json_schema",
    "validate",
    "validate_dto",
    "validate_dto_partially",
]

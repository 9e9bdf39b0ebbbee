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

"""Configuration management for the validation engine."""

import os
import logging
from dataclasses import dataclass

from .utils.logging_utils import DEFAULT_LOG_FORMAT, PACKAGE_LOGGER_NAME, configure_split_stream_logging


DEFAULT_DATE_FORMAT = "%Y-%m-%d"
DEFAULT_ERROR_SEPARATOR = " & "


@dataclass
class ValidatorConfig:
    """Configuration class for the validation engine."""
    log_level: str = "INFO"
    print_level: str = "ERROR"
    cache_enabled: bool = True
    # unknown hints raise SchemaDefinitionError instead of being skipped
    strict_hints: bool = False
    default_date_format: str = DEFAULT_DATE_FORMAT
    error_separator: str = DEFAULT_ERROR_SEPARATOR

    @classmethod
    def from_env(cls) -> 'ValidatorConfig':
        """Create configuration from environment variables."""
        return cls(
            log_level=os.getenv('DTO_VALIDATOR_LOG_LEVEL', 'INFO'),
            print_level=os.getenv('DTO_VALIDATOR_PRINT_LEVEL', 'ERROR'),
            cache_enabled=os.getenv('DTO_VALIDATOR_CACHE_ENABLED', 'true').lower() == 'true',
            strict_hints=os.getenv('DTO_VALIDATOR_STRICT_HINTS', 'false').lower() == 'true',
            default_date_format=os.getenv('DTO_VALIDATOR_DATE_FORMAT', DEFAULT_DATE_FORMAT),
            error_separator=os.getenv('DTO_VALIDATOR_ERROR_SEPARATOR', DEFAULT_ERROR_SEPARATOR),
        )

    def set_logging(self) -> logging.Logger:
        """Setup logging based on configuration."""
        level = getattr(logging, self.log_level.upper(), logging.INFO)
        stderr_level = getattr(logging, self.print_level.upper(), logging.ERROR)

        return configure_split_stream_logging(
            level=level,
            stderr_level=stderr_level,
            formatter=logging.Formatter(DEFAULT_LOG_FORMAT),
            logger_name=PACKAGE_LOGGER_NAME,
        )


# Global configuration instance
validator_config = ValidatorConfig.from_env()

# Copyright 2025 TIER IV, inc.
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

"""Process-level configuration for the semantic key linter."""

import os
import logging
from dataclasses import dataclass
from typing import Optional

from .utils.logging_utils import DEFAULT_FORMAT, configure_split_stream_logging, parse_log_level

ENV_PREFIX = "SEMANTIC_KEY_LINT_"


@dataclass
class LintConfig:
    """Configuration class for a lint run."""
    log_level: str = "WARNING"
    print_level: str = "WARNING"
    cache_enabled: bool = False

    @classmethod
    def from_env(cls) -> 'LintConfig':
        """Create configuration from environment variables."""
        return cls(
            log_level=os.getenv(f'{ENV_PREFIX}LOG_LEVEL', 'WARNING'),
            print_level=os.getenv(f'{ENV_PREFIX}PRINT_LEVEL', 'WARNING'),
            cache_enabled=os.getenv(f'{ENV_PREFIX}CACHE_ENABLED', 'false').lower() == 'true',
        )

    def set_logging(self, log_level: Optional[str] = None) -> logging.Logger:
        """Setup logging based on configuration.

        Args:
            log_level: Optional override of the configured level (e.g. from the CLI)
        """
        level = parse_log_level(log_level or self.log_level, logging.WARNING)
        stderr_level = parse_log_level(self.print_level, logging.WARNING)

        formatter = logging.Formatter(DEFAULT_FORMAT)
        configure_split_stream_logging(level=level, stderr_level=stderr_level, formatter=formatter)

        return logging.getLogger('semantic_key_lint')


# Global configuration instance
lint_config = LintConfig.from_env()

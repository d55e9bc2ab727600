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

"""Custom exceptions for the semantic key linter.

Rule evaluators never raise these; they are used by the loading and
configuration layers around the rules.
"""


class SemanticKeyLintError(Exception):
    """Base exception for semantic-key-lint related errors."""
    pass


class ValidationError(SemanticKeyLintError):
    """Exception raised for validation errors."""
    pass


class DocumentLoadError(ValidationError):
    """Exception raised when an API document cannot be read or parsed."""
    pass


class RulesetConfigError(ValidationError):
    """Exception raised for invalid ruleset configuration."""
    pass


class UnknownRuleError(RulesetConfigError):
    """Exception raised when a ruleset names a rule that does not exist."""
    pass

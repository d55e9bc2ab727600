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

"""Error reporting for the linter."""

from pathlib import Path
from typing import List, Dict, Any, Optional

from ..engine.runner import Finding
from ..file_io.source_location import SourceLocation, format_source
from ..rules import SEVERITY_ERROR


class LintResult:
    """Container for linting results for a single document."""

    def __init__(self, file_path: Path):
        """Initialize lint result.

        Args:
            file_path: Path to the document being linted
        """
        self.file_path = file_path
        self.errors: List[Dict[str, Any]] = []
        self.warnings: List[Dict[str, Any]] = []

    @staticmethod
    def _entry(
        message: str,
        rule: Optional[str],
        line: Optional[int],
        column: Optional[int],
        json_pointer: Optional[str],
    ) -> Dict[str, Any]:
        entry: Dict[str, Any] = {'message': message}
        if rule is not None:
            entry['rule'] = rule
        if line is not None:
            entry['line'] = line
        if column is not None:
            entry['column'] = column
        if json_pointer is not None:
            entry['json_pointer'] = json_pointer
        return entry

    def add_error(
        self,
        message: str,
        rule: Optional[str] = None,
        line: Optional[int] = None,
        column: Optional[int] = None,
        json_pointer: Optional[str] = None,
    ):
        """Add an error message."""
        self.errors.append(self._entry(message, rule, line, column, json_pointer))

    def add_warning(
        self,
        message: str,
        rule: Optional[str] = None,
        line: Optional[int] = None,
        column: Optional[int] = None,
        json_pointer: Optional[str] = None,
    ):
        """Add a warning message."""
        self.warnings.append(self._entry(message, rule, line, column, json_pointer))

    def add_finding(self, finding: Finding):
        """Record an engine finding as an error or a warning by its severity.

        The message gets a ``(source= file:line:column json_pointer=...)`` suffix.
        """
        src = SourceLocation(
            file_path=self.file_path,
            json_pointer=finding.pointer,
            line=finding.line,
            column=finding.column,
        )
        add = self.add_error if finding.severity == SEVERITY_ERROR else self.add_warning
        add(
            f"{finding.message}{format_source(src)}",
            rule=finding.rule,
            line=finding.line,
            column=finding.column,
            json_pointer=finding.pointer,
        )

    @property
    def has_errors(self) -> bool:
        return bool(self.errors)

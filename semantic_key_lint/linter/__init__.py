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

"""Linter package: run the semantic key rules over API document files."""

import logging
from pathlib import Path
from typing import List, Optional

from ..engine.runner import lint_document
from ..exceptions import DocumentLoadError
from ..parsers.yaml_parser import document_parser
from ..ruleset import Ruleset, default_ruleset
from .report import LintResult

__all__ = ['lint_files', 'LintResult']

logger = logging.getLogger(__name__)


def lint_files(file_paths: List[Path], ruleset: Optional[Ruleset] = None) -> List[LintResult]:
    """Lint a list of OpenAPI documents.

    Args:
        file_paths: List of file paths to lint
        ruleset: Rule severities and options; defaults to all built-in rules

    Returns:
        List of LintResult objects, one per file
    """
    ruleset = ruleset or default_ruleset()
    results = []

    for file_path in file_paths:
        result = LintResult(file_path)

        try:
            document, source_map = document_parser.load_document_with_source(file_path)
        except DocumentLoadError as e:
            result.add_error(f"Failed to load document: {str(e)}")
            results.append(result)
            continue

        for finding in lint_document(document, ruleset, source_map=source_map):
            result.add_finding(finding)

        logger.debug(
            f"{file_path}: {len(result.errors)} error(s), {len(result.warnings)} warning(s)"
        )
        results.append(result)

    return results

#!/usr/bin/env python3
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

"""CLI entry point for linting OpenAPI documents for semantic key usage."""

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import List

from ..config import lint_config
from ..exceptions import RulesetConfigError
from ..ruleset import default_ruleset, load_ruleset
from . import lint_files, LintResult

logger = logging.getLogger(__name__)

DOCUMENT_EXTENSIONS = ('.yaml', '.yml', '.json')

EXIT_OK = 0
EXIT_LINT_ERRORS = 1
EXIT_CONFIG_ERROR = 2


def find_document_files(paths: List[str]) -> List[Path]:
    """Find all YAML/JSON documents in given paths."""
    document_files = []

    for path_str in paths:
        path = Path(path_str)

        if not path.exists():
            logger.warning(f"Path does not exist: {path}")
            continue

        if path.is_file():
            if path.suffix in DOCUMENT_EXTENSIONS:
                document_files.append(path)
            else:
                logger.warning(f"File does not look like a YAML/JSON document: {path}")
        elif path.is_dir():
            for ext in DOCUMENT_EXTENSIONS:
                document_files.extend(path.rglob(f'*{ext}'))
        else:
            logger.warning(f"Path is neither file nor directory: {path}")

    return sorted(set(document_files))


def _print_json(results: List[LintResult]) -> None:
    output = {
        'files': len(results),
        'errors': sum(len(r.errors) for r in results),
        'warnings': sum(len(r.warnings) for r in results),
        'results': [
            {
                'file': str(r.file_path),
                'errors': r.errors,
                'warnings': r.warnings,
            }
            for r in results
        ]
    }
    print(json.dumps(output, indent=2))


def _print_github_actions(results: List[LintResult]) -> None:
    for result in results:
        for error in result.errors:
            print(f"::error file={result.file_path},line={error.get('line', 1)}::{error['message']}")
        for warning in result.warnings:
            print(f"::warning file={result.file_path},line={warning.get('line', 1)}::{warning['message']}")


def _print_human(results: List[LintResult]) -> None:
    for result in results:
        if result.errors or result.warnings:
            print(f"\n{result.file_path}:")
            for error in result.errors:
                line_info = f":{error['line']}" if 'line' in error else ""
                rule_info = f" [{error['rule']}]" if 'rule' in error else ""
                print(f"  ERROR{line_info}{rule_info}: {error['message']}")
            for warning in result.warnings:
                line_info = f":{warning['line']}" if 'line' in warning else ""
                rule_info = f" [{warning['rule']}]" if 'rule' in warning else ""
                print(f"  WARNING{line_info}{rule_info}: {warning['message']}")


def main(argv: List[str] | None = None) -> None:
    """Main entry point for the linter CLI."""
    parser = argparse.ArgumentParser(
        prog='semantic-key-lint',
        description='Check that key-like identifiers in OpenAPI documents carry a semantic type',
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        'paths',
        nargs='*',
        default=None,
        help='Document paths or directories to lint (default: current directory)',
    )
    parser.add_argument(
        '--ruleset',
        default=None,
        help='YAML/JSON ruleset file with rule severities and options',
    )
    parser.add_argument(
        '--format',
        choices=['human', 'json', 'github-actions'],
        default='human',
        help='Output format (default: human)',
    )
    parser.add_argument(
        '--log-level',
        default=None,
        help='Logging level (default: from SEMANTIC_KEY_LINT_LOG_LEVEL or WARNING)',
    )

    args = parser.parse_args(argv)
    lint_config.set_logging(args.log_level)

    if not args.paths:
        args.paths = ['.']

    try:
        ruleset = load_ruleset(args.ruleset) if args.ruleset else default_ruleset()
    except RulesetConfigError as e:
        logger.error(str(e))
        sys.exit(EXIT_CONFIG_ERROR)

    document_files = find_document_files(args.paths)

    if not document_files:
        logger.error("No YAML/JSON documents found.")
        sys.exit(EXIT_LINT_ERRORS)

    results = lint_files(document_files, ruleset)

    if args.format == 'json':
        _print_json(results)
    elif args.format == 'github-actions':
        _print_github_actions(results)
    else:
        _print_human(results)

    if any(r.has_errors for r in results):
        sys.exit(EXIT_LINT_ERRORS)
    if args.format == 'human':
        print("Lint succeeded with no errors.")
    sys.exit(EXIT_OK)


if __name__ == '__main__':
    main()

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

"""Apply the enabled rules to every selected node of one document."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, List, Optional

from ..file_io.source_location import SourceMap, lookup_source
from ..models.violation import DocumentPath, RuleContext, to_json_pointer
from ..rules import SEVERITY_ERROR
from ..ruleset import Ruleset, default_ruleset
from .selectors import SELECTORS

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Finding:
    rule: str
    severity: str
    message: str
    path: DocumentPath = ()
    line: Optional[int] = None
    column: Optional[int] = None

    @property
    def pointer(self) -> str:
        return to_json_pointer(self.path)


def lint_document(
    document: Any,
    ruleset: Optional[Ruleset] = None,
    resolved: Any = None,
    source_map: Optional[SourceMap] = None,
) -> List[Finding]:
    """Run every enabled rule over the nodes its selector picks.

    Args:
        document: Parsed document root
        ruleset: Rule severities and options; defaults to all built-in rules
        resolved: Optional dereferenced view of the document
        source_map: Optional JSON pointer -> line/column map for the document

    Returns:
        Findings grouped by rule, in document order within each rule
    """
    ruleset = ruleset or default_ruleset()
    findings: List[Finding] = []

    for rule, settings in ruleset.enabled_rules():
        select = SELECTORS[rule.given]
        for target, path in select(document):
            context = RuleContext(path=path, document=document, resolved=resolved)
            try:
                violations = rule.evaluate(target, settings.options, context)
            except Exception as exc:
                logger.exception(f"Rule '{rule.name}' failed at {to_json_pointer(path)}")
                findings.append(_make_finding(
                    rule.name,
                    SEVERITY_ERROR,
                    f"Unexpected error in rule '{rule.name}': {exc}",
                    path,
                    source_map,
                ))
                continue

            for violation in violations:
                violation_path = violation.path if violation.path is not None else path
                findings.append(_make_finding(
                    rule.name, settings.severity, violation.message, violation_path, source_map
                ))

        logger.debug(f"Rule '{rule.name}' done, {len(findings)} finding(s) so far")

    return findings


def _make_finding(
    rule: str,
    severity: str,
    message: str,
    path: DocumentPath,
    source_map: Optional[SourceMap],
) -> Finding:
    loc = lookup_source(source_map, to_json_pointer(path))
    return Finding(
        rule=rule,
        severity=severity,
        message=message,
        path=tuple(path),
        line=loc.line,
        column=loc.column,
    )

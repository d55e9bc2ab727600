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

"""Ruleset configuration: which rules run, at what severity, with which options.

A ruleset file looks like::

    rules:
      key-path-params: error
      key-properties-deep:
        severity: warn
        options:
          exceptions: "legacyKey otherKey"
      request-body-additional-properties: off

Rules not mentioned keep their default severity.
"""

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Mapping, Tuple, Union

import jsonschema
from jsonschema.exceptions import ValidationError as JsonSchemaValidationError

from .exceptions import DocumentLoadError, RulesetConfigError
from .parsers.yaml_parser import document_parser
from .rules import RULES, SEVERITY_OFF, Rule, get_rule
from .schema import load_schema

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RuleSettings:
    severity: str
    options: Mapping[str, Any] = field(default_factory=dict)


@dataclass
class Ruleset:
    """Effective settings per rule name."""

    settings: Dict[str, RuleSettings] = field(default_factory=dict)

    def settings_for(self, rule: Rule) -> RuleSettings:
        return self.settings.get(rule.name) or RuleSettings(severity=rule.severity)

    def enabled_rules(self) -> List[Tuple[Rule, RuleSettings]]:
        enabled = []
        for rule in RULES:
            settings = self.settings_for(rule)
            if settings.severity != SEVERITY_OFF:
                enabled.append((rule, settings))
        return enabled


def default_ruleset() -> Ruleset:
    """Every built-in rule at its default severity, without options."""
    return Ruleset()


def _format_schema_error(exc: JsonSchemaValidationError) -> str:
    location = "/".join(str(p) for p in exc.absolute_path)
    if location:
        return f"{exc.message} (at /{location})"
    return exc.message


def _unfold_off(data: Any) -> Any:
    """Map YAML 1.1 ``off`` (loaded as False) back to the severity string."""
    if not isinstance(data, Mapping) or not isinstance(data.get("rules"), Mapping):
        return data

    rules = {}
    for name, value in data["rules"].items():
        if value is False:
            value = SEVERITY_OFF
        elif isinstance(value, Mapping) and value.get("severity") is False:
            value = {**value, "severity": SEVERITY_OFF}
        rules[name] = value
    return {**data, "rules": rules}


def ruleset_from_dict(data: Any) -> Ruleset:
    """Build a Ruleset from parsed configuration data.

    Raises:
        RulesetConfigError: If the data does not match the ruleset schema or
            names an unknown rule
    """
    if data is None:
        data = {}
    data = _unfold_off(data)

    try:
        jsonschema.validate(instance=data, schema=load_schema("ruleset"))
    except JsonSchemaValidationError as exc:
        raise RulesetConfigError(f"Invalid ruleset: {_format_schema_error(exc)}") from exc

    settings: Dict[str, RuleSettings] = {}
    for name, value in (data.get("rules") or {}).items():
        rule = get_rule(name)
        if isinstance(value, str):
            settings[name] = RuleSettings(severity=value)
        else:
            settings[name] = RuleSettings(
                severity=value.get("severity", rule.severity),
                options=dict(value.get("options") or {}),
            )
        logger.debug(f"Rule '{name}' configured with severity {settings[name].severity}")

    return Ruleset(settings=settings)


def load_ruleset(file_path: Union[str, Path]) -> Ruleset:
    """Load a YAML or JSON ruleset file.

    Raises:
        RulesetConfigError: If the file cannot be loaded or is invalid
    """
    try:
        data = document_parser.load_document(file_path)
    except DocumentLoadError as exc:
        raise RulesetConfigError(f"Failed to load ruleset: {exc}") from exc

    logger.debug(f"Loaded ruleset from {file_path}")
    return ruleset_from_dict(data)

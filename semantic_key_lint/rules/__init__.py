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

"""Built-in rule evaluators and their registry.

Every evaluator has the signature ``(target, options, context)`` and returns a
list of :class:`Violation`. An empty list means nothing was found or the rule
did not apply to the target.
"""

from dataclasses import dataclass
from typing import Any, Callable, Dict, List, Mapping, Optional, Tuple

from ..exceptions import UnknownRuleError
from ..models.violation import RuleContext, Violation
from .deep_property_key import check_deep_property_keys
from .path_param_key import check_path_param_key
from .request_body_additional_properties import check_request_body_additional_properties
from .schema_declaration_key import check_schema_declaration_key

RuleFunction = Callable[[Any, Optional[Mapping], Optional[RuleContext]], List[Violation]]

SEVERITY_ERROR = "error"
SEVERITY_WARN = "warn"
SEVERITY_OFF = "off"
SEVERITIES: Tuple[str, ...] = (SEVERITY_ERROR, SEVERITY_WARN, SEVERITY_OFF)


@dataclass(frozen=True)
class Rule:
    name: str
    evaluate: RuleFunction
    # Name of the selector in engine.selectors choosing target nodes
    given: str
    severity: str = SEVERITY_ERROR
    description: str = ""


RULES: Tuple[Rule, ...] = (
    Rule(
        name="key-path-params",
        evaluate=check_path_param_key,
        given="parameters",
        description="Path parameters named *Key must $ref a semantic key schema or inline one.",
    ),
    Rule(
        name="key-properties-deep",
        evaluate=check_deep_property_keys,
        given="schema_bearing_nodes",
        description="Properties named fooKey must not be inline primitive strings.",
    ),
    Rule(
        name="key-schemas-semantic-type",
        evaluate=check_schema_declaration_key,
        given="component_schemas",
        description="Schemas named *Key must declare x-semantic-type (or x-semantic-key).",
    ),
    Rule(
        name="request-body-additional-properties",
        evaluate=check_request_body_additional_properties,
        given="request_body_ref_schemas",
        severity=SEVERITY_WARN,
        description="Schemas referenced from request bodies must declare additionalProperties.",
    ),
)

_RULES_BY_NAME: Dict[str, Rule] = {rule.name: rule for rule in RULES}


def get_rule(name: str) -> Rule:
    """Look up a built-in rule by name.

    Raises:
        UnknownRuleError: If no rule has this name
    """
    try:
        return _RULES_BY_NAME[name]
    except KeyError:
        raise UnknownRuleError(
            f"Unknown rule '{name}'. Expected one of: {', '.join(_RULES_BY_NAME)}"
        ) from None


__all__ = [
    "RULES",
    "Rule",
    "get_rule",
    "check_path_param_key",
    "check_deep_property_keys",
    "check_schema_declaration_key",
    "check_request_body_additional_properties",
]

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

"""Key-named properties must reference a semantic key schema."""

from collections.abc import Mapping
from typing import Any, List, Optional

from ..models.violation import DocumentPath, RuleContext, Violation
from ..naming import exceptions_from_options, is_lower_key_property
from ..walker import walk_key_properties


def check_deep_property_keys(
    target: Any,
    options: Optional[Mapping] = None,
    context: Optional[RuleContext] = None,
) -> List[Violation]:
    """Report every ``fooKey`` property declared as an inline string.

    Violations are returned in document order, each tagged with the path of
    the offending property schema. Properties behind a ``$ref`` are not
    visited.
    """
    context = context or RuleContext()
    exceptions = exceptions_from_options(options)
    violations: List[Violation] = []

    def _on_match(path: DocumentPath, name: str) -> None:
        violations.append(Violation(
            f"Property '{name}' must use $ref to a semantic key schema "
            f"(x-semantic-type or x-semantic-key), not an inline primitive string.",
            path=path,
        ))

    walk_key_properties(target, context.path, _on_match, is_lower_key_property, exceptions)
    return violations

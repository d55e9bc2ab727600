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

"""Schemas named ``*Key`` must declare a semantic marker.

The path and property rules only ensure that key schemas are *referenced*.
This rule covers the naming surface itself: any ``components.schemas`` entry
named like a key must declare ``x-semantic-type`` (preferred) or the
transitional ``x-semantic-key``. Purely syntactic; no reference resolution.
"""

from collections.abc import Mapping
from typing import Any, List, Optional

from ..markers import has_marker
from ..models.violation import RuleContext, Violation
from ..naming import exceptions_from_options, is_excepted, is_key_suffix


def check_schema_declaration_key(
    target: Any,
    options: Optional[Mapping] = None,
    context: Optional[RuleContext] = None,
) -> List[Violation]:
    path = (context or RuleContext()).path
    # Expect [..., 'schemas', <SchemaName>]
    if len(path) < 3 or path[-2] != "schemas":
        return []

    schema_name = path[-1]
    if not is_key_suffix(schema_name):
        return []

    exceptions = exceptions_from_options(options)
    if is_excepted(schema_name, exceptions):
        return []

    if isinstance(target, Mapping) and not has_marker(target):
        return [Violation(
            f"Schema '{schema_name}' must declare x-semantic-type (or transitional x-semantic-key).",
            path=path,
        )]
    return []

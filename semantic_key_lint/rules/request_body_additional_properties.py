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

"""Request body schemas referenced by ``$ref`` must declare additionalProperties.

Only the top-level referenced schema is checked. ``allOf``/``oneOf`` members
of the target are not followed.
"""

from collections.abc import Mapping
from typing import Any, List, Optional

from ..models.schema_view import RefSchema, schema_view
from ..models.violation import RuleContext, Violation
from ..resolver import parse_local_schema_ref, resolve_local_schema


def check_request_body_additional_properties(
    target: Any,
    options: Optional[Mapping] = None,
    context: Optional[RuleContext] = None,
) -> List[Violation]:
    view = schema_view(target)
    if not isinstance(view, RefSchema) or not view.ref:
        return []

    schema_name = parse_local_schema_ref(view.local_ref)
    if schema_name is None:
        return []

    context = context or RuleContext()
    referenced = resolve_local_schema(schema_name, context.document, context.resolved)
    if referenced is None:
        return [Violation(f"Referenced schema '{schema_name}' not found under components.schemas.")]

    if "additionalProperties" not in referenced:
        return [Violation(
            f"Referenced schema '{schema_name}' used in a request body must explicitly "
            f"declare additionalProperties (boolean or schema)."
        )]
    return []

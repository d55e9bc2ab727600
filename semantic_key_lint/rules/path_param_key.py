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

"""Path parameters named ``*Key`` must carry a semantic key schema."""

from collections.abc import Mapping
from typing import Any, List, Optional

from ..markers import has_marker
from ..models.schema_view import RefSchema, schema_view
from ..models.violation import RuleContext, Violation
from ..naming import exceptions_from_options, is_excepted, is_key_suffix


def check_path_param_key(
    target: Any,
    options: Optional[Mapping] = None,
    context: Optional[RuleContext] = None,
) -> List[Violation]:
    """Check one OpenAPI parameter object.

    A ``$ref`` schema passes; the referenced schema is checked by the schema
    declaration rule. An inline schema passes only with ``type: string`` and a
    semantic marker.
    """
    if not isinstance(target, Mapping):
        return []

    name = target.get("name")
    if not name or not isinstance(name, str):
        return []

    exceptions = exceptions_from_options(options)
    if target.get("in") != "path" or not is_key_suffix(name) or is_excepted(name, exceptions):
        return []

    schema = target.get("schema")
    # An empty mapping is still a schema; false, 0 and "" are not
    if not isinstance(schema, Mapping) and not schema:
        return [Violation(
            f"Path parameter '{name}' must reference a semantic key schema via $ref "
            f"or inline semantic marker."
        )]

    view = schema_view(schema)
    if isinstance(view, RefSchema) and view.ref:
        return []
    # An empty $ref is no reference; judge the schema inline
    if isinstance(schema, Mapping) and schema.get("type") == "string" and has_marker(schema):
        return []

    return [Violation(
        f"Path parameter '{name}' must be a $ref to a semantic key schema or inline "
        f"with type: string and x-semantic-type (or x-semantic-key)."
    )]

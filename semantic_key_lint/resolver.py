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

"""Lookup of local ``#/components/schemas/<Name>`` references.

Only the single local form is supported. External and file references are
never followed, and nothing is resolved transitively.
"""

import re
from collections.abc import Mapping
from typing import Any, Optional

LOCAL_SCHEMA_REF_RE = re.compile(r"#/components/schemas/(.+)", re.DOTALL)


def parse_local_schema_ref(ref: Any) -> Optional[str]:
    """Extract the schema name from a local component reference.

    Args:
        ref: Value of a ``$ref`` key

    Returns:
        The schema name, or None if ``ref`` is not of the local form
    """
    if not isinstance(ref, str):
        return None
    match = LOCAL_SCHEMA_REF_RE.fullmatch(ref)
    if not match:
        return None
    return match.group(1)


def resolve_local_schema(name: str, document: Any, resolved: Any = None) -> Optional[Mapping]:
    """Find ``components.schemas[name]``.

    The resolved view is preferred when the host supplies one; otherwise the
    raw document root is used.

    Returns:
        The schema mapping, or None if it is missing or not a mapping
    """
    root = resolved or document
    if not isinstance(root, Mapping):
        return None

    components = root.get("components")
    if not isinstance(components, Mapping):
        return None

    schemas = components.get("schemas")
    if not isinstance(schemas, Mapping):
        return None

    schema = schemas.get(name)
    if not isinstance(schema, Mapping):
        return None
    return schema

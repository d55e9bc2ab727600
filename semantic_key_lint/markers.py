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

"""Semantic marker annotations on schema objects."""

from collections.abc import Mapping
from typing import Any

SEMANTIC_TYPE_MARKER = "x-semantic-type"
# Transitional alias, accepted with equal weight
LEGACY_SEMANTIC_KEY_MARKER = "x-semantic-key"

SEMANTIC_MARKERS = (SEMANTIC_TYPE_MARKER, LEGACY_SEMANTIC_KEY_MARKER)


def has_marker(schema: Any) -> bool:
    """Check if a schema object directly declares a semantic marker.

    Only presence of the key matters; ``null`` or ``false`` values count.
    """
    if not isinstance(schema, Mapping):
        return False
    return any(marker in schema for marker in SEMANTIC_MARKERS)

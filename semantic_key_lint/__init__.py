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

"""Governance rules for key-like identifiers in OpenAPI documents.

Properties and parameters whose names end in ``Key`` must carry a semantic
type marker (``x-semantic-type`` or the legacy ``x-semantic-key``), either
directly or through a ``$ref`` to a schema that carries one.
"""

__version__ = "0.1.0"

from .markers import has_marker
from .models import RuleContext, Violation
from .naming import (
    exceptions_from_options,
    is_excepted,
    is_key_suffix,
    is_lower_key_property,
    normalize_exceptions,
)
from .rules import (
    RULES,
    check_deep_property_keys,
    check_path_param_key,
    check_request_body_additional_properties,
    check_schema_declaration_key,
)
from .walker import walk_key_properties

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

"""Naming conventions for key-like identifiers.

Two patterns are used by different rules and are kept separate:

  * suffix-only (``is_key_suffix``): the name ends with ``Key``. Used for
    path parameter names and ``components.schemas`` entry names.
  * lowercase-leading (``is_lower_key_property``): the name starts with a
    lowercase ASCII letter and ends with ``Key``. Used for property names.
"""

import re
from typing import Any, FrozenSet, Iterable, Mapping

KEY_SUFFIX = "Key"

_LOWER_KEY_PROPERTY_RE = re.compile(r"[a-z].*Key")


def is_key_suffix(name: Any) -> bool:
    """Check if a name ends with the literal ``Key``.

    Args:
        name: Name to check

    Returns:
        True if name is a string ending with ``Key``
    """
    if not isinstance(name, str):
        return False
    return name.endswith(KEY_SUFFIX)


def is_lower_key_property(name: Any) -> bool:
    """Check if a property name starts lowercase and ends with ``Key``.

    Examples: userKey, processDefinitionKey. Not: UserKey, key, _fooKey

    Args:
        name: Name to check

    Returns:
        True if name matches ``^[a-z].*Key$``
    """
    if not isinstance(name, str):
        return False
    return _LOWER_KEY_PROPERTY_RE.fullmatch(name) is not None


def normalize_exceptions(raw: Any) -> FrozenSet[str]:
    """Normalize an ``exceptions`` option into a set of exact names.

    Accepted shapes:
      * None or empty -> no exceptions
      * whitespace separated string ("fooKey barKey")
      * list/tuple/set of names
      * mapping whose keys with truthy values are names

    Any other shape is treated as no exceptions.
    """
    if not raw:
        return frozenset()

    if isinstance(raw, str):
        return frozenset(raw.split())

    if isinstance(raw, Mapping):
        return frozenset(str(key) for key, enabled in raw.items() if enabled)

    if isinstance(raw, (list, tuple, set, frozenset)):
        return frozenset(item for item in raw if isinstance(item, str))

    return frozenset()


def exceptions_from_options(options: Any) -> FrozenSet[str]:
    """Read ``options.exceptions``; options that are not a mapping carry none."""
    if not isinstance(options, Mapping):
        return frozenset()
    return normalize_exceptions(options.get("exceptions"))


def is_excepted(name: Any, exceptions: Iterable[str]) -> bool:
    """Exact, case-sensitive membership test."""
    return isinstance(name, str) and name in exceptions

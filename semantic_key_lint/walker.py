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

"""Deep traversal of schema composition structures.

The walker visits property maps, ``allOf``/``oneOf``/``anyOf`` members and
``items`` and reports key-named properties declared as inline strings. It
never crosses a ``$ref``: referenced schemas are checked on their own when the
host visits them under ``components.schemas``.
"""

import logging
from typing import Any, Callable, Iterable, Set

from .models.schema_view import CompositeSchema, RefSchema, schema_view
from .models.violation import DocumentPath
from .naming import is_excepted

logger = logging.getLogger(__name__)

OnMatch = Callable[[DocumentPath, str], None]
KeyNamePredicate = Callable[[Any], bool]


def walk_key_properties(
    node: Any,
    path: DocumentPath,
    on_match: OnMatch,
    is_key_name: KeyNamePredicate,
    exceptions: Iterable[str] = frozenset(),
) -> None:
    """Walk a schema node and call ``on_match(child_path, name)`` per match.

    A property matches when ``is_key_name(name)`` holds, the name is not
    excepted, and its schema is an inline (non-``$ref``) ``type: string``.
    Every property schema is descended into whether or not it matched, so
    nested key properties at any depth are found too.

    Args:
        node: Schema node to start from
        path: Path of ``node`` within the document
        on_match: Callback receiving the path of the matching property schema
        is_key_name: Naming predicate for property names
        exceptions: Exact property names to skip
    """
    visited: Set[int] = set()
    _visit(node, tuple(path), on_match, is_key_name, exceptions, visited)


def _visit(
    node: Any,
    path: DocumentPath,
    on_match: OnMatch,
    is_key_name: KeyNamePredicate,
    exceptions: Iterable[str],
    visited: Set[int],
) -> None:
    view = schema_view(node)
    if view is None or isinstance(view, RefSchema):
        return
    if not isinstance(view, CompositeSchema):
        return

    # Only hand-built in-memory graphs can cycle here; $ref is never followed
    if id(node) in visited:
        logger.debug(f"Skipping already visited schema node at {list(path)}")
        return
    visited.add(id(node))

    for name, child in view.properties():
        child_path = path + ("properties", name)
        if is_key_name(name) and not is_excepted(name, exceptions):
            child_view = schema_view(child)
            if child_view is not None and not isinstance(child_view, RefSchema) and child_view.is_string:
                on_match(child_path, name)
        _visit(child, child_path, on_match, is_key_name, exceptions, visited)

    for keyword, idx, member in view.compositions():
        _visit(member, path + (keyword, idx), on_match, is_key_name, exceptions, visited)

    if view.items is not None:
        _visit(view.items, path + ("items",), on_match, is_key_name, exceptions, visited)

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

"""Selection of the document nodes each rule is applied to.

Every selector yields ``(target, path)`` pairs in document order and skips
shapes it does not understand instead of raising.
"""

from collections.abc import Mapping
from typing import Any, Callable, Dict, Iterator, Tuple

from ..models.violation import DocumentPath

Selection = Iterator[Tuple[Any, DocumentPath]]

HTTP_METHODS = ("get", "put", "post", "delete", "options", "head", "patch", "trace")


def _mapping_items(value: Any) -> Iterator[Tuple[Any, Any]]:
    if isinstance(value, Mapping):
        yield from value.items()


def _list_items(value: Any) -> Iterator[Tuple[int, Any]]:
    if isinstance(value, list):
        yield from enumerate(value)


def _get(node: Any, key: str) -> Any:
    return node.get(key) if isinstance(node, Mapping) else None


def _operations(document: Any) -> Iterator[Tuple[Any, DocumentPath]]:
    for path_key, path_item in _mapping_items(_get(document, "paths")):
        for method in HTTP_METHODS:
            operation = _get(path_item, method)
            if isinstance(operation, Mapping):
                yield operation, ("paths", path_key, method)


def _content_schemas(holder: Any, path: DocumentPath) -> Selection:
    """Yield ``content.<mediaType>.schema`` of a request body or response."""
    for media_type, media in _mapping_items(_get(holder, "content")):
        schema = _get(media, "schema")
        if schema is not None:
            yield schema, path + ("content", media_type, "schema")


def parameters(document: Any) -> Selection:
    """Parameters on path items, operations and in ``components.parameters``."""
    for path_key, path_item in _mapping_items(_get(document, "paths")):
        for idx, param in _list_items(_get(path_item, "parameters")):
            yield param, ("paths", path_key, "parameters", idx)
        for method in HTTP_METHODS:
            for idx, param in _list_items(_get(_get(path_item, method), "parameters")):
                yield param, ("paths", path_key, method, "parameters", idx)

    for name, param in _mapping_items(_get(_get(document, "components"), "parameters")):
        yield param, ("components", "parameters", name)


def component_schemas(document: Any) -> Selection:
    for name, schema in _mapping_items(_get(_get(document, "components"), "schemas")):
        yield schema, ("components", "schemas", name)


def request_body_schemas(document: Any) -> Selection:
    for operation, op_path in _operations(document):
        yield from _content_schemas(_get(operation, "requestBody"), op_path + ("requestBody",))

    for name, body in _mapping_items(_get(_get(document, "components"), "requestBodies")):
        yield from _content_schemas(body, ("components", "requestBodies", name))


def media_type_schemas(document: Any) -> Selection:
    """Inline schemas of request bodies, responses and parameters."""
    yield from request_body_schemas(document)

    for operation, op_path in _operations(document):
        for status, response in _mapping_items(_get(operation, "responses")):
            yield from _content_schemas(response, op_path + ("responses", status))

    components = _get(document, "components")
    for name, response in _mapping_items(_get(components, "responses")):
        yield from _content_schemas(response, ("components", "responses", name))

    for param, param_path in parameters(document):
        schema = _get(param, "schema")
        if schema is not None:
            yield schema, param_path + ("schema",)


def schema_bearing_nodes(document: Any) -> Selection:
    yield from component_schemas(document)
    yield from media_type_schemas(document)


def request_body_ref_schemas(document: Any) -> Selection:
    for schema, path in request_body_schemas(document):
        if isinstance(schema, Mapping) and "$ref" in schema:
            yield schema, path


SELECTORS: Dict[str, Callable[[Any], Selection]] = {
    "parameters": parameters,
    "component_schemas": component_schemas,
    "media_type_schemas": media_type_schemas,
    "schema_bearing_nodes": schema_bearing_nodes,
    "request_body_ref_schemas": request_body_ref_schemas,
}

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, Iterator, Optional, Tuple, Union


COMPOSITION_KEYWORDS: Tuple[str, ...] = ("allOf", "oneOf", "anyOf")
STRUCTURAL_KEYWORDS: Tuple[str, ...] = ("properties",) + COMPOSITION_KEYWORDS + ("items",)


@dataclass(frozen=True)
class RefSchema:
    """A schema node that owns ``$ref``. Never expanded during traversal."""

    raw: Mapping
    ref: Any

    @property
    def local_ref(self) -> Optional[str]:
        return self.ref if isinstance(self.ref, str) else None


@dataclass(frozen=True)
class InlineSchema:
    """A schema node declared in place with no structural keywords."""

    raw: Mapping

    @property
    def type(self) -> Any:
        return self.raw.get("type")

    @property
    def is_string(self) -> bool:
        return self.type == "string"


@dataclass(frozen=True)
class CompositeSchema(InlineSchema):
    """An inline schema that nests other schemas."""

    def properties(self) -> Iterator[Tuple[Any, Any]]:
        props = self.raw.get("properties")
        if isinstance(props, Mapping):
            yield from props.items()

    def compositions(self) -> Iterator[Tuple[str, int, Any]]:
        for keyword in COMPOSITION_KEYWORDS:
            members = self.raw.get(keyword)
            if isinstance(members, list):
                for idx, member in enumerate(members):
                    yield keyword, idx, member

    @property
    def items(self) -> Any:
        return self.raw.get("items")


SchemaView = Union[RefSchema, InlineSchema, CompositeSchema]


def schema_view(node: Any) -> Optional[SchemaView]:
    """Classify a raw document node.

    Returns None for anything that is not a mapping.
    """
    if not isinstance(node, Mapping):
        return None
    if "$ref" in node:
        return RefSchema(raw=node, ref=node["$ref"])
    if any(keyword in node for keyword in STRUCTURAL_KEYWORDS):
        return CompositeSchema(raw=node)
    return InlineSchema(raw=node)

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional, Tuple, Union


PathSegment = Union[str, int]
DocumentPath = Tuple[PathSegment, ...]
JsonPointer = str


def escape_pointer_token(token: str) -> str:
    return token.replace("~", "~0").replace("/", "~1")


def to_json_pointer(path: Optional[DocumentPath]) -> JsonPointer:
    """Render a path as an RFC 6901 JSON pointer ("" is the document root)."""
    if not path:
        return ""
    return "".join(f"/{escape_pointer_token(str(segment))}" for segment in path)


@dataclass(frozen=True)
class Violation:
    """A single report unit produced by a rule evaluator."""

    message: str
    path: Optional[DocumentPath] = None

    @property
    def pointer(self) -> Optional[JsonPointer]:
        if self.path is None:
            return None
        return to_json_pointer(self.path)


@dataclass(frozen=True)
class RuleContext:
    """Host-supplied context for one evaluator invocation.

    ``path`` locates the target node in the document. ``resolved`` is an
    optional view of the document with local references already dereferenced.
    """

    path: DocumentPath = ()
    document: Any = None
    resolved: Any = None

    def __post_init__(self):
        # Hosts commonly hand over a list
        object.__setattr__(self, "path", tuple(self.path or ()))

    def child(self, *segments: PathSegment) -> DocumentPath:
        return self.path + tuple(segments)

from __future__ import annotations

from dataclasses import dataclass
import os
from pathlib import Path
from typing import Dict, Optional

SourceMap = Dict[str, Dict[str, int]]


@dataclass(frozen=True)
class SourceLocation:
    file_path: Optional[Path] = None
    json_pointer: Optional[str] = None
    line: Optional[int] = None  # 1-based
    column: Optional[int] = None  # 1-based


def _parent_pointer(pointer: str) -> Optional[str]:
    if not pointer:
        return None
    return pointer.rsplit("/", 1)[0]


def lookup_source(source_map: Optional[SourceMap], json_pointer: Optional[str]) -> SourceLocation:
    """Find the line/column of a JSON pointer.

    Falls back to the nearest ancestor that was recorded, so a violation on a
    node that the source map lacks still points at its enclosing block. The
    returned location always carries the requested pointer.
    """
    if not source_map or json_pointer is None:
        return SourceLocation(json_pointer=json_pointer)

    pointer: Optional[str] = json_pointer
    while pointer is not None:
        entry = source_map.get(pointer)
        if entry:
            return SourceLocation(
                json_pointer=json_pointer,
                line=entry.get("line"),
                column=entry.get("column"),
            )
        pointer = _parent_pointer(pointer)

    return SourceLocation(json_pointer=json_pointer)


def _infer_workspace_root(path: Path) -> Optional[Path]:
    """Infer a reasonable workspace root to make paths relative."""

    env_root = os.environ.get("SEMANTIC_KEY_LINT_SOURCE_ROOT")
    if env_root:
        return Path(env_root)
    return None


def _format_file_path(path: Path) -> str:
    root = _infer_workspace_root(path)
    if not root:
        return str(path)

    try:
        return str(path.relative_to(root))
    except ValueError:
        return str(path)


def format_source(loc: Optional[SourceLocation]) -> str:
    if not loc:
        return ""

    parts = []
    if loc.file_path is not None:
        file_path = _format_file_path(loc.file_path)
        if loc.line is not None and loc.column is not None:
            parts.append(f"source= {file_path}:{loc.line}:{loc.column} ")
        elif loc.line is not None:
            parts.append(f"source= {file_path}:{loc.line} ")
        else:
            parts.append(f"source= {file_path} ")

    if loc.json_pointer:
        parts.append(f"json_pointer={loc.json_pointer}")

    if not parts:
        return ""

    return " (" + " ".join(parts) + ")"

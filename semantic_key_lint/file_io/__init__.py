"""File location helpers for reporting."""

from .source_location import SourceLocation, SourceMap, format_source, lookup_source

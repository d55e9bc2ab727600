"""Data model for rule inputs and outputs."""

from .schema_view import (
    CompositeSchema,
    InlineSchema,
    RefSchema,
    SchemaView,
    schema_view,
)
from .violation import (
    DocumentPath,
    PathSegment,
    RuleContext,
    Violation,
    to_json_pointer,
)

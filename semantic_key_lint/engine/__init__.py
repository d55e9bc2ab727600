"""Reference host: node selection and rule execution over a whole document."""

from .runner import Finding, lint_document
from .selectors import SELECTORS

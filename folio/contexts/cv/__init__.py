"""
CV Context

Responsibilities:
- Represents the CV JSON document as typed data
- Validates the document on load
- Applies visibility rules to entries
- Exports the CV to Markdown and LinkedIn text

Owns: CV document schema, visibility rules, text exporters
Never: Renders HTML or PDF
"""

from folio.contexts.cv.cv_data_structure import CVData, is_visible, load_cv, parse_cv
from folio.contexts.cv.exceptions import CVNotFoundError, InvalidCVStructureError
from folio.contexts.cv.linkedin_exporter import export_to_linkedin
from folio.contexts.cv.markdown_exporter import export_to_markdown

__all__ = [
    "CVData",
    "load_cv",
    "parse_cv",
    "is_visible",
    "export_to_markdown",
    "export_to_linkedin",
    "CVNotFoundError",
    "InvalidCVStructureError",
]

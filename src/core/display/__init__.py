"""
Display helpers: DisplayList labels and the brace-delimited list format.
"""

from src.core.display.formatting import (
    EVENS_LABEL,
    ORIGINAL_LABEL,
    SQUARED_EVENS_LABEL,
    TOTAL_LABEL,
    format_report_lines,
    render,
    render_sequence,
    to_labels,
)

__all__ = [
    # Line headers
    "ORIGINAL_LABEL",
    "EVENS_LABEL",
    "SQUARED_EVENS_LABEL",
    "TOTAL_LABEL",
    # Functions
    "to_labels",
    "render",
    "render_sequence",
    "format_report_lines",
]

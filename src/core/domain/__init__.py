"""
Domain models and value objects.

Contains the immutable value types of the numeric pipeline.
"""

from src.core.domain.number_sequence import NumberSequence
from src.core.domain.pipeline_result import REPORT_SCHEMA_VERSION, PipelineResult

__all__ = [
    # Sequence model
    "NumberSequence",
    # Result model
    "PipelineResult",
    "REPORT_SCHEMA_VERSION",
]

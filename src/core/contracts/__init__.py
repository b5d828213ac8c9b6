"""
Contract Validation Module

Модуль для валидации JSON контрактов (pipeline_report).
"""

from .validators import (
    ContractValidator,
    PipelineReportValidator,
    SchemaLoader,
    validate_pipeline_report,
)

__all__ = [
    # Classes
    "SchemaLoader",
    "ContractValidator",
    "PipelineReportValidator",
    # Functions
    "validate_pipeline_report",
]

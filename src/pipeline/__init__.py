"""Pipeline: оркестрация filter → transform → reduce."""

from .numeric_pipeline import NumericPipeline, PipelineConfig

__all__ = [
    "NumericPipeline",
    "PipelineConfig",
]

"""
PipelineResult — Результат прогона numeric pipeline

Immutable Pydantic модель: исходная последовательность, чётная
подпоследовательность, её квадраты и их сумма.
Совместима с JSON Schema (src/core/contracts/schema/pipeline_report.json).
"""

from typing import Any, Final

from pydantic import BaseModel, Field, model_validator

from .number_sequence import NumberSequence

# Версия контракта pipeline_report
REPORT_SCHEMA_VERSION: Final[str] = "1"


class PipelineResult(BaseModel):
    """Снапшот всех стадий filter → transform → reduce."""

    original: NumberSequence = Field(..., description="Исходная последовательность")
    evens: NumberSequence = Field(..., description="Чётные элементы original")
    squared_evens: NumberSequence = Field(..., description="Квадраты элементов evens")
    total: int = Field(..., description="Сумма squared_evens")

    model_config = {"frozen": True}

    @model_validator(mode="after")
    def validate_stage_lengths(self) -> "PipelineResult":
        """Transform сохраняет длину, filter не увеличивает её"""
        if len(self.squared_evens) != len(self.evens):
            raise ValueError(
                f"squared_evens length {len(self.squared_evens)} "
                f"!= evens length {len(self.evens)}"
            )
        if len(self.evens) > len(self.original):
            raise ValueError(
                f"evens length {len(self.evens)} exceeds original length {len(self.original)}"
            )
        return self

    def to_contract(self) -> dict[str, Any]:
        """
        JSON-совместимое представление для контракта pipeline_report.

        Returns:
            dict с schema_version, original, evens, squared_evens, total
        """
        return {
            "schema_version": REPORT_SCHEMA_VERSION,
            "original": self.original.to_list(),
            "evens": self.evens.to_list(),
            "squared_evens": self.squared_evens.to_list(),
            "total": self.total,
        }

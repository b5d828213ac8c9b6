"""NumericPipeline: filter → transform → reduce над последовательностью целых.

Стадии:
1. NumberSequence из входа (валидация типов)
2. filter_even: чётная подпоследовательность
3. square_all: квадраты чётных элементов
4. sum_integral: сумма квадратов

Политика переполнения задаётся в PipelineConfig. По умолчанию WIDEN,
поэтому демонстрационный вход {1..6} всегда даёт 56.
"""

import logging
from collections.abc import Iterable
from dataclasses import dataclass

from src.core.contracts import PipelineReportValidator
from src.core.display import format_report_lines
from src.core.domain import NumberSequence, PipelineResult
from src.core.math import (
    DEFAULT_INTEGER_BITS,
    OverflowPolicy,
    filter_even,
    square_all,
    sum_integral,
    validate_bits,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PipelineConfig:
    """Конфигурация NumericPipeline."""

    # Переполнение при squaring/summing
    overflow_policy: OverflowPolicy = OverflowPolicy.WIDEN
    integer_bits: int = DEFAULT_INTEGER_BITS

    # Проверять результат против pipeline_report JSON Schema
    validate_contract: bool = True

    def __post_init__(self):
        object.__setattr__(self, "overflow_policy", OverflowPolicy(self.overflow_policy))
        validate_bits(self.integer_bits)


class NumericPipeline:
    """Однопроходный pipeline чётных квадратов.

    Stateless: один экземпляр можно вызывать сколько угодно раз.
    """

    def __init__(self, config: PipelineConfig | None = None):
        self.config = config or PipelineConfig()

        # Схема загружается и компилируется один раз на экземпляр
        self.report_validator: PipelineReportValidator | None = None
        if self.config.validate_contract:
            self.report_validator = PipelineReportValidator()

    def run(self, numbers: Iterable[int] | NumberSequence) -> PipelineResult:
        """Прогон всех стадий.

        Args:
            numbers: исходные целые (любой iterable или NumberSequence)

        Returns:
            PipelineResult со всеми промежуточными последовательностями

        Raises:
            pydantic.ValidationError: вход содержит не целые значения
            IntegerOverflowError: policy == CHECKED и результат вне диапазона
            jsonschema.ValidationError: результат нарушает pipeline_report
        """
        policy = self.config.overflow_policy
        bits = self.config.integer_bits

        if isinstance(numbers, NumberSequence):
            original = numbers
        else:
            original = NumberSequence.from_iterable(numbers)
        logger.debug("pipeline input: %d numbers", len(original))

        evens = NumberSequence.from_iterable(filter_even(original))
        logger.debug("filter_even kept %d of %d", len(evens), len(original))

        squared_evens = NumberSequence.from_iterable(square_all(evens, policy, bits))
        total = sum_integral(squared_evens, policy, bits)
        logger.debug(
            "sum of squared evens: %d bits (policy=%s)", total.bit_length(), policy.value
        )

        result = PipelineResult(
            original=original,
            evens=evens,
            squared_evens=squared_evens,
            total=total,
        )

        if self.report_validator is not None:
            self.report_validator.validate(result.to_contract())

        return result

    @staticmethod
    def report_lines(result: PipelineResult) -> list[str]:
        """Четыре строки отчёта для result."""
        return format_report_lines(
            result.original,
            result.evens,
            result.squared_evens,
            result.total,
        )

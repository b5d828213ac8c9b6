"""
NumberSequence — Неизменяемая упорядоченная последовательность целых

Immutable Pydantic модель. Создаётся один раз из литерала или внешнего
входа, дальше только читается чистыми функциями.

Допустимы дубликаты, ноль и отрицательные значения.
bool, float и строки отклоняются (ValidationError).
"""

from collections.abc import Iterable, Iterator
from typing import Any

from pydantic import BaseModel, Field, field_validator

from src.core.math.integral_ops import is_integral


class NumberSequence(BaseModel):
    """
    Упорядоченная последовательность целых со знаком.

    Порядок сохраняется во всех производных последовательностях.
    """

    values: tuple[int, ...] = Field(
        default_factory=tuple, description="Элементы в исходном порядке"
    )

    model_config = {"frozen": True}

    @field_validator("values", mode="before")
    @classmethod
    def validate_values(cls, v: Any) -> Any:
        """Каждый элемент должен быть целым (без неявной конверсии из float/str/bool)"""
        if isinstance(v, (str, bytes)) or not isinstance(v, Iterable):
            raise ValueError(f"values must be an iterable of integers, got {type(v).__name__}")

        items = tuple(v)
        for index, item in enumerate(items):
            if not is_integral(item):
                raise ValueError(
                    f"values[{index}] must be an integer, got {type(item).__name__}: {item!r}"
                )
        return tuple(int(item) for item in items)

    @classmethod
    def of(cls, *numbers: int) -> "NumberSequence":
        """NumberSequence.of(1, 2, 3)"""
        return cls(values=numbers)

    @classmethod
    def from_iterable(cls, numbers: Iterable[int]) -> "NumberSequence":
        """Построение из любого iterable (list, tuple, generator)."""
        return cls(values=tuple(numbers))

    def concat(self, other: "NumberSequence") -> "NumberSequence":
        """Конкатенация: элементы self, затем other."""
        return NumberSequence(values=self.values + other.values)

    def to_list(self) -> list[int]:
        return list(self.values)

    def __len__(self) -> int:
        return len(self.values)

    def __iter__(self) -> Iterator[int]:  # type: ignore[override]
        return iter(self.values)

    def __getitem__(self, index: int | slice) -> "int | NumberSequence":
        if isinstance(index, slice):
            return NumberSequence(values=self.values[index])
        return self.values[index]

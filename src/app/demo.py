"""Demo entry point: фиксированный вход {1, 2, 3, 4, 5, 6}, четыре строки в stdout.

Логи идут в stderr, stdout содержит только отчёт.
"""

import logging
from typing import Final

from src.pipeline import NumericPipeline

DEMO_NUMBERS: Final[tuple[int, ...]] = (1, 2, 3, 4, 5, 6)

LOG_FORMAT: Final[str] = "%(asctime)s - %(levelname)s - %(message)s"


def main() -> int:
    """Прогон demo последовательности. Всегда возвращает 0."""
    logging.basicConfig(level=logging.WARNING, format=LOG_FORMAT)

    pipeline = NumericPipeline()
    result = pipeline.run(DEMO_NUMBERS)

    for line in pipeline.report_lines(result):
        print(line)

    return 0

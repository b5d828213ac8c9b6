"""
Тесты demo entry point

Проверяет точный вывод в stdout и код возврата.
"""

import runpy

import pytest

from src.app import DEMO_NUMBERS, main

EXPECTED_OUTPUT = (
    'Original numbers: {"1", "2", "3", "4", "5", "6"}\n'
    'Even numbers: {"2", "4", "6"}\n'
    'Squared even numbers: {"4", "16", "36"}\n'
    "Sum of squared even numbers: 56\n"
)


class TestDemoEntry:
    """Тесты main()"""

    def test_demo_numbers(self) -> None:
        assert DEMO_NUMBERS == (1, 2, 3, 4, 5, 6)

    def test_exit_status_zero(self, capsys) -> None:
        assert main() == 0

    def test_exact_stdout(self, capsys) -> None:
        main()
        captured = capsys.readouterr()
        assert captured.out == EXPECTED_OUTPUT

    def test_run_as_module(self, capsys) -> None:
        with pytest.raises(SystemExit) as exc_info:
            runpy.run_module("src.app", run_name="__main__")
        assert exc_info.value.code == 0
        assert capsys.readouterr().out == EXPECTED_OUTPUT

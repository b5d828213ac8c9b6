"""Demo application for the numeric pipeline."""

from .demo import DEMO_NUMBERS, main

__all__ = ["DEMO_NUMBERS", "main"]

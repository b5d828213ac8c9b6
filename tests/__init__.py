"""
Test suite for the even squares pipeline

Contains:
- tests/unit/          : Unit tests for individual modules
"""

"""
Test suite for numerics

Contains:
- tests/unit/          : Unit tests for capabilities, precisions and Complex
"""

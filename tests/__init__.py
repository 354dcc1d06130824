"""
Test suite for the math value types library

Contains:
- tests/unit/          : Unit tests for individual modules
"""

"""
Test suite for limbint

Contains:
- tests/unit/          : Unit and property-based tests for individual modules
"""

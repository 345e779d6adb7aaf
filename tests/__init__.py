"""
Test suite for the mixed-radix counter

Contains:
- tests/unit/          : Unit tests for individual modules
"""

"""
Test suite for Annual Revenue

Contains:
- tests/unit/          : Unit tests for individual modules
"""

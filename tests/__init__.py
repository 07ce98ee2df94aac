"""
Test suite for mlkit

Contains:
- tests/unit/          : Unit tests for individual modules
"""

"""
Test suite for the last-character ordering toolkit

Contains:
- tests/unit/          : Unit tests for individual modules
"""

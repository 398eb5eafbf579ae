"""
Test suite for the coordinate core

Contains:
- tests/unit/          : Unit tests for individual modules
"""

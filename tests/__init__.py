"""
Test suite for geoprim

Contains:
- tests/unit/          : Unit tests for individual modules
"""

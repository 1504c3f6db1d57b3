"""
Test suite for ringnum

Contains:
- tests/unit/          : Unit tests for individual modules
"""

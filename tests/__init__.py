"""
Test suite for the fraction package

Contains:
- tests/unit/          : Unit tests for individual modules
"""

"""
Test suite for fixed-decimal

Contains:
- tests/unit/          : Unit and property-based tests for individual modules
"""

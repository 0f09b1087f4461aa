"""
Test suite for infixcalc

Contains:
- tests/unit/          : Unit tests for individual modules
"""

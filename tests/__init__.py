"""
Test suite for the lexjusticia mechanism engine

Contains:
- tests/unit/          : Unit tests for individual modules
"""

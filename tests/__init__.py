"""
Test suite for the toolbox computation layer

Contains:
- tests/unit/          : Unit tests for individual modules
"""

"""
Test suite for the replenishment domain core

Contains:
- tests/unit/          : Unit tests for individual modules
"""

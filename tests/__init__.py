"""
Test suite for the Scientific Number Engine

Contains:
- tests/unit/          : Unit tests for individual modules
"""

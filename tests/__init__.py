"""
Test suite for core-rational

Contains:
- tests/unit/          : Unit tests for individual modules
"""

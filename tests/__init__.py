"""
Test suite for CalcVis core

Contains:
- tests/unit/          : Unit tests for individual modules
"""

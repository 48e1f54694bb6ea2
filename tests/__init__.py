"""
Test suite for quaternion_group

Contains:
- tests/unit/          : Unit and property tests for individual modules
"""

"""
Test suite for the ray tracer foundation layer

Contains:
- tests/unit/          : Unit tests for individual modules
"""

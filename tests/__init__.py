"""
Test suite for limbint

Contains:
- tests/unit/          : Unit and property tests for limbs, parser, arithmetic, vectors, logging
"""

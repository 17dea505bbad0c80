"""
Test suite for roman-calc

Contains:
- tests/unit/          : Unit tests for codec, elements, parser, evaluator, CLI
"""

"""
Core domain models, numeral codec, and error types.

This module contains the building blocks that are independent of any
input/output: Roman numeral conversion, expression elements, and the
typed errors raised while evaluating an expression.
"""

"""Core mathematics for the Kelly stake calculator.

This package contains pure building blocks:

- ``odds_math`` — American / decimal conversion and implied probability
- ``kelly``     — Kelly criterion fraction and stake helpers

Nothing in this package imports from ``stakecalc.services`` or the dashboard.
All modules are side-effect-free and unit-testable in isolation.
"""

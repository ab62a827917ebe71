"""Math helpers for integers, floats and decimals.

Modules:
- ``numeric``: parity, primality, factorials, digit arithmetic, modulo and wrap.
- ``floats``: rounding, saturation, angle conversion and square roots.
- ``utility``: interpolation and easing functions.
"""

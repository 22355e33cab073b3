"""Monetary domain package.

This package contains the two-digit `FixedPointDecimal`, the `Money` value
object with its currency-less variant, and the allocation, rounding and
parsing rules they share.
"""

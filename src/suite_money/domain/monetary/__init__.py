"""Monetary domain package.

This package contains classes for handling monetary amounts and currencies,
including static and dynamic Currency definitions and Money calculations
with exact decimal arithmetic.
"""

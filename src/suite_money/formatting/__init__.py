"""Rendering of monetary amounts: template-driven formatting and CLDR locale formatting."""

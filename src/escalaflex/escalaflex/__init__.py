"""EscalaFlex package.

A personal shift calendar organized by feature modules (patterns, overrides,
schedule, suggestions, ...) with a thin Flask controller layer on top of
service and storage layers.
"""

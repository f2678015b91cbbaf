# failchain/core/__init__.py
"""
failchain core: error capabilities, error types, call-stack capture and chain queries.

No side effects on import.
"""

# cannot/core/__init__.py
"""
Core components: codifier, write-once cells, hook table,
the error type and its extension registry.
"""

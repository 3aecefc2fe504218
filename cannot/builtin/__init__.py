# cannot/builtin/__init__.py
"""
Built-in extensions, installed when `cannot` is imported.

- handling: matches / assert_cannot / check
- handlor: handle(...).otherwise(...)
"""

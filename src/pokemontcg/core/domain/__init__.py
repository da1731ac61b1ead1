"""Domain models and value objects.

Why:
- Pure, strict data structures (Pydantic v2 and frozen dataclasses).
- The domain knows nothing about HTTP: only cards, sets and lookup results.
"""

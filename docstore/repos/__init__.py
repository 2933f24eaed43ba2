"""
Repository implementations.

Implementation packages:
- memory: In-memory implementations
"""

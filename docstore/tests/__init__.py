"""
Tests for the docstore package.

These tests document the behaviour of the domain models, the repository
contract, the in-memory repository and the demo CLI.
"""

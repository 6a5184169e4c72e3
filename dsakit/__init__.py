"""Stacks, queues, sorting, bracket checks and infix expression utilities."""

__version__ = "0.1.0"

__all__ = ["brackets", "cli", "expressions", "queues", "sorting", "stacks"]
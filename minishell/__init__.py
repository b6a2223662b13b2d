"""A small interactive shell with quote-aware tokenizing and built-in commands."""

__version__ = "0.1.0"
__all__ = ["builtins", "checks", "commands", "environment", "expander", "shell", "tokens"]
"""Patterns, type syntax and DOT rendering helpers for a small ML-style functional language."""

__version__ = "0.2.0"
__all__ = ["patterns", "type_syntax", "dot_nodes"]
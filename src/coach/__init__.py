"""Command-line coach built on the progression engine."""

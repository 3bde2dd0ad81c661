"""Relational persistence layer."""

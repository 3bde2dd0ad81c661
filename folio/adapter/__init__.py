"""Adapters for content sources outside the relational store."""

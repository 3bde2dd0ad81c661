"""Folio: portfolio blog content API."""

"""Strongly typed identifiers for Folio domain entities.

Relational rows use integer surrogate keys assigned by the database.
"""

from typing import NewType

PostId = NewType("PostId", int)
TagId = NewType("TagId", int)

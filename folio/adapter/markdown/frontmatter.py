"""YAML frontmatter parsing for markdown documents.

A document may start with a metadata block::

    ---
    title: Hello
    date: 2024-05-01
    tags: [python, web]
    ---
    Body text...
"""

import re
from typing import Any, Optional

import yaml

from folio.adapter.error import FrontmatterError

_RE_FRONTMATTER = re.compile(
    r"\A---[ \t]*\n(.*?)^---[ \t]*$\n?", re.DOTALL | re.MULTILINE
)


def split_frontmatter(text: str) -> tuple[Optional[str], str]:
    """Split a document into its raw metadata block and body.

    Args:
        text: Full document text

    Returns:
        (metadata block or None when absent, body)
    """
    text = text.replace("\r\n", "\n")
    match = _RE_FRONTMATTER.match(text)
    if not match:
        return None, text
    return match.group(1), text[match.end():]


def load_metadata(block: Optional[str]) -> dict[str, Any]:
    """Parse a metadata block.

    Args:
        block: Raw YAML text (None or empty gives an empty mapping)

    Returns:
        Metadata mapping

    Raises:
        FrontmatterError: If the block is not valid YAML or not a mapping
    """
    if not block or not block.strip():
        return {}
    try:
        data = yaml.safe_load(block)
    except yaml.YAMLError as e:
        raise FrontmatterError(f"Invalid frontmatter: {e}") from e
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise FrontmatterError(
            f"Frontmatter must be a mapping, got {type(data).__name__}"
        )
    return data

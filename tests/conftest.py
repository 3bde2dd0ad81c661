"""Test configuration and fixtures."""

import base64
from pathlib import Path

from tests.di import TEST_ADMIN_PASSWORD, TEST_ADMIN_USERNAME


def write_document(
    root: Path,
    slug: str,
    body: str = "Body text.",
    extension: str = ".md",
    **meta,
) -> Path:
    """Helper to write a markdown post document with YAML frontmatter.

    Only simple scalar and list values are supported, which is all the
    tests need.

    Args:
        root: Content directory
        slug: Document basename
        body: Markdown body
        extension: File suffix
        **meta: Frontmatter keys

    Returns:
        Path of the written document
    """
    lines = []
    for key, value in meta.items():
        if isinstance(value, list):
            lines.append(f"{key}:")
            lines.extend(f"  - {item}" for item in value)
        elif isinstance(value, bool):
            lines.append(f"{key}: {'true' if value else 'false'}")
        else:
            lines.append(f"{key}: {value}")

    text = body
    if lines:
        text = "---\n" + "\n".join(lines) + "\n---\n" + body

    root.mkdir(parents=True, exist_ok=True)
    path = root / f"{slug}{extension}"
    path.write_text(text, encoding="utf-8")
    return path


def basic_auth_header(
    username: str = TEST_ADMIN_USERNAME, password: str = TEST_ADMIN_PASSWORD
) -> dict[str, str]:
    """Authorization header for HTTP Basic credentials (test admin by default)."""
    token = base64.b64encode(f"{username}:{password}".encode()).decode()
    return {"Authorization": f"Basic {token}"}

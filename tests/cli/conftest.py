"""Shared fixtures for CLI tests."""

import pytest


@pytest.fixture
def seed_file(tmp_path):
    """A seed file with three columns and two cards."""
    path = tmp_path / "seed.yaml"
    path.write_text(
        "columns:\n"
        "  - id: 1\n"
        "    title: Backlog\n"
        "    cards:\n"
        "      - id: 1\n"
        "        title: First card\n"
        "        description: Description one.\n"
        "      - id: 2\n"
        "        title: Second card\n"
        "  - id: 2\n"
        "    title: Doing\n"
        "  - id: 3\n"
        "    title: Done\n"
    )
    return path

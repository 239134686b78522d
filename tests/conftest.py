"""Shared fixtures for the mdtouch tests."""

import os
from pathlib import Path

import pytest
from click.testing import CliRunner

from tests.timestamps import PAST_NS


@pytest.fixture
def runner() -> CliRunner:
    # Plain text on stderr regardless of the environment running the tests
    return CliRunner(env={"FORCE_COLOR": None, "NO_COLOR": "1"})


@pytest.fixture
def old_file(tmp_path: Path) -> Path:
    """An existing file containing "hi" whose timestamps are far in the past."""
    path = tmp_path / "existing.log"
    path.write_bytes(b"hi")
    os.utime(path, ns=(PAST_NS, PAST_NS))
    return path


@pytest.fixture
def missing_parent(tmp_path: Path) -> Path:
    return tmp_path / "non_existent_dir_xyz_123" / "file.txt"

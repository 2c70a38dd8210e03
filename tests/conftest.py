"""Shared test fixtures and configuration."""

import tempfile
from pathlib import Path

import pytest


GIT_COMMIT_TEMPLATE = """
# Please enter the commit message for your changes. Lines starting
# with '#' will be ignored, and an empty message aborts the commit.
#
# On branch main
# Changes to be committed:
#\tmodified:   README.md
#
"""

GIT_MERGE_TEMPLATE = """Merge branch 'feature/login' into develop

# Please enter the commit message for your changes. Lines starting
# with '#' will be ignored, and an empty message aborts the commit.
#
# On branch develop
# All conflicts fixed but you are still merging.
#
"""


@pytest.fixture
def temp_dir():
    """Create a temporary directory for tests."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def mock_repo_root(temp_dir):
    """Create a mock git repository root directory."""
    # Create .git directory to simulate a git repo
    repo_root = temp_dir / "project"
    git_dir = repo_root / ".git"
    git_dir.mkdir(parents=True)
    return repo_root


@pytest.fixture
def commit_message_file(mock_repo_root):
    """A COMMIT_EDITMSG as Git writes it for a plain commit."""
    path = mock_repo_root / ".git" / "COMMIT_EDITMSG"
    path.write_text(GIT_COMMIT_TEMPLATE, encoding="utf-8")
    return path


@pytest.fixture
def merge_message_file(mock_repo_root):
    """A MERGE_MSG with an auto-generated first line."""
    path = mock_repo_root / ".git" / "MERGE_MSG"
    path.write_text(GIT_MERGE_TEMPLATE, encoding="utf-8")
    return path


@pytest.fixture
def config_dir(mocker, temp_dir):
    """Point the global config at a temporary ~/.gnomit."""
    mock_dir = temp_dir / ".gnomit"
    mocker.patch("gnomit.global_config._CONFIG_DIR", mock_dir)
    return mock_dir


@pytest.fixture
def commit_template():
    """Raw text of a plain commit message file."""
    return GIT_COMMIT_TEMPLATE


@pytest.fixture
def merge_template():
    """Raw text of a merge commit message file."""
    return GIT_MERGE_TEMPLATE

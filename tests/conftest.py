"""Shared pytest fixtures for the clean-scaffold test suite.

Provides reusable fixtures for:
- A selected folder to scaffold into
- Scaffolder / renderer instances with default configuration
- Pre-rendered plans for a sample feature
"""

from __future__ import annotations

from pathlib import Path

import pytest

from clean_scaffold.config import Config
from clean_scaffold.scaffolder import PlannedFile, Scaffolder, TemplateRenderer


# ---------------------------------------------------------------------------
# Paths & Directories
# ---------------------------------------------------------------------------

@pytest.fixture
def selected_folder(tmp_path: Path) -> Path:
    """The folder the user "right-clicked": an existing, empty directory."""
    folder = tmp_path / "lib" / "features"
    folder.mkdir(parents=True)
    return folder


# ---------------------------------------------------------------------------
# Scaffolder
# ---------------------------------------------------------------------------

@pytest.fixture
def renderer() -> TemplateRenderer:
    return TemplateRenderer()


@pytest.fixture
def scaffolder() -> Scaffolder:
    """Scaffolder with the default configuration (packaged templates, UTF-8)."""
    return Scaffolder(Config())


@pytest.fixture
def user_profile_plan(scaffolder: Scaffolder) -> dict[str, PlannedFile]:
    """Planned files for ``user_profile``, keyed by artifact kind value."""
    return {planned.kind.value: planned for planned in scaffolder.plan("user_profile")}


# ---------------------------------------------------------------------------
# Environment
# ---------------------------------------------------------------------------

@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Strip CLEAN_SCAFFOLD_* variables so the host environment never leaks in."""
    for var in (
        "CLEAN_SCAFFOLD_TEMPLATE_DIR",
        "CLEAN_SCAFFOLD_ENCODING",
        "CLEAN_SCAFFOLD_PLACEHOLDER",
        "CLEAN_SCAFFOLD_VERBOSE",
    ):
        monkeypatch.delenv(var, raising=False)

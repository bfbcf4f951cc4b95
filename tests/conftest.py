"""Shared pytest fixtures for the make-ca test suite.

Provides reusable fixtures for:
- Temporary, initialized project directories
- A pre-formatted sample entity
- Template override directories for failure scenarios
"""

from __future__ import annotations

import asyncio
from pathlib import Path

import pytest

from make_ca.config import Config
from make_ca.scaffolder.naming import EntityNameFormats, format_entity_name
from make_ca.scaffolder.project import ProjectInitializer


# ---------------------------------------------------------------------------
# Paths & Directories
# ---------------------------------------------------------------------------

@pytest.fixture
def tmp_project_dir(tmp_path: Path) -> Path:
    """Empty temporary directory for a project (auto-cleanup)."""
    project_dir = tmp_path / "test-project"
    project_dir.mkdir()
    yield project_dir


@pytest.fixture
def initialized_project(tmp_project_dir: Path) -> Path:
    """Temporary directory that has already been through ``init``."""
    asyncio.run(ProjectInitializer(Config()).initialize(tmp_project_dir))
    yield tmp_project_dir


@pytest.fixture
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Remove every ``MAKE_CA_*`` variable so configuration uses defaults."""
    for name in ("MAKE_CA_TEMPLATE_DIR", "MAKE_CA_SOURCE_DIR", "MAKE_CA_DEFAULT_PROJECT_DIR"):
        monkeypatch.delenv(name, raising=False)


# ---------------------------------------------------------------------------
# Entities & templates
# ---------------------------------------------------------------------------

@pytest.fixture
def user_profile() -> EntityNameFormats:
    """Formatted ``user-profile`` entity."""
    return format_entity_name("user-profile")


@pytest.fixture
def broken_template_dir(tmp_path: Path) -> Path:
    """Override directory whose service ``GetService`` template cannot render."""
    override = tmp_path / "broken-templates"
    target = override / "service" / "GetService.ts.j2"
    target.parent.mkdir(parents=True)
    target.write_text("export const x = '{{ entity.does_not_exist }}';\n", encoding="utf-8")
    yield override

"""Project skeleton and entity directory planning.

A directory is an initialized project when it holds a readable
``.make-ca.json`` marker and every layer root of the layout recorded in that
marker exists.  ``init`` creates both; ``generate`` only ever adds
directories below them.
"""

from __future__ import annotations

import asyncio
from pathlib import Path

from pydantic import ValidationError

from ..config import MARKER_FILE, Config
from ..errors import ProjectAlreadyInitializedError
from .layers import PROJECT_TARGETS, EntityDirectories
from .templates import TemplateRenderer


def load_project_config(project_root: str | Path, base: Config | None = None) -> Config | None:
    """Read the marker of *project_root*, or return ``None`` if there is none.

    Settings that are not stored in the marker (the template override
    directory) are taken from *base*.
    """
    marker = Path(project_root) / MARKER_FILE
    if not marker.is_file():
        return None
    try:
        config = Config.load(marker)
    except (OSError, ValidationError):
        return None
    if base is not None and base.template_dir is not None:
        config = config.model_copy(update={"template_dir": base.template_dir})
    return config


def is_project_initialized(project_root: str | Path) -> bool:
    """Return ``True`` if *project_root* holds a make-ca project."""
    config = load_project_config(project_root)
    if config is None:
        return False
    return all(path.is_dir() for path in config.layer_roots)


def create_entity_directories(entity_kebab: str, config: Config) -> EntityDirectories:
    """Create (if needed) and return the directories for one entity.

    Safe to call repeatedly for the same entity.
    """
    dirs = EntityDirectories(
        domain_dir=config.domain_root / entity_kebab,
        service_dir=config.service_root / entity_kebab,
        infra_dir=config.infrastructure_root / entity_kebab,
        app_dir=config.application_root / entity_kebab,
        di_feature_dir=config.di_feature_root,
    )
    for path in dirs.all():
        path.mkdir(parents=True, exist_ok=True)
    return dirs


class ProjectInitializer:
    """Lays out the skeleton of a new clean architecture project."""

    def __init__(self, config: Config | None = None, renderer: TemplateRenderer | None = None) -> None:
        self.config = config or Config()
        self.renderer = renderer or TemplateRenderer(override_dir=self.config.template_dir)

    async def initialize(self, project_root: str | Path) -> Path:
        """Create the skeleton directories, base files and marker.

        Args:
            project_root: Directory to initialize; created if missing.

        Returns:
            The resolved project root.

        Raises:
            ProjectAlreadyInitializedError: if *project_root* already holds a
                project.  Nothing is written in that case.
        """
        root = Path(project_root).resolve()
        if is_project_initialized(root):
            raise ProjectAlreadyInitializedError(str(root))

        config = self.config.with_root(root)
        if not config.project_name:
            config = config.model_copy(update={"project_name": root.name})

        await asyncio.to_thread(self._create_skeleton, config)

        context = {"project": config, "layout": config.layout}
        placeholders = {
            **config.layout.model_dump(),
            "di_dir": Path(config.layout.di_feature_dir).parent.as_posix(),
        }
        for template, destination in PROJECT_TARGETS:
            await self.renderer.render_to_file(
                template, root / destination.format(**placeholders), context
            )

        # The marker goes last so an interrupted init is not mistaken for a project.
        await asyncio.to_thread(config.save)
        return root

    @staticmethod
    def _create_skeleton(config: Config) -> None:
        directories = list(config.layer_roots)
        directories.extend(config.source_root / d for d in config.layout.skeleton_dirs)
        for directory in directories:
            directory.mkdir(parents=True, exist_ok=True)

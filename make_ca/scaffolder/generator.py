"""Entity scaffolding orchestrator.

Takes an entity name and a set of ``GenerateOptions`` and renders the
domain, service, infrastructure and application files for it inside an
initialized project, following the table in :mod:`make_ca.scaffolder.layers`.
"""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, Field

from ..config import Config
from ..errors import LayerGenerationError, ProjectNotInitializedError
from ..utils import console, print_error, print_step
from .layers import LAYERS, EntityDirectories, GenerateOptions, Layer, LayerSpec
from .naming import EntityNameFormats, format_entity_name
from .project import create_entity_directories, load_project_config
from .templates import TemplateRenderer


class GenerationReport(BaseModel):
    """Outcome of a successful ``generate`` run."""

    entity: EntityNameFormats
    layers: list[Layer] = Field(default_factory=list)
    files: list[Path] = Field(default_factory=list)


class EntityGenerator:
    """Renders every included layer of one entity.

    Layers are rendered one after another in the fixed order domain,
    service, infrastructure, application.  The first failing layer stops the
    run; files written before the failure are left on disk.
    """

    def __init__(
        self,
        project_root: str | Path,
        config: Config | None = None,
        renderer: TemplateRenderer | None = None,
    ) -> None:
        self.project_root = Path(project_root).resolve()
        self.base_config = config or Config()
        self._renderer = renderer

    # -- Public API --------------------------------------------------------

    async def generate(
        self, entity_name: str, options: GenerateOptions | None = None
    ) -> GenerationReport:
        """Generate the selected layers for *entity_name*.

        Raises:
            ProjectNotInitializedError: if the project root has no marker
                or one of its layer roots is missing.
                Nothing is written in that case.
            LayerGenerationError: if rendering any file of a layer fails.
        """
        options = options or GenerateOptions()

        config = load_project_config(self.project_root, self.base_config)
        if config is None or not all(path.is_dir() for path in config.layer_roots):
            raise ProjectNotInitializedError(str(self.project_root))
        renderer = self._renderer or TemplateRenderer(override_dir=config.template_dir)

        entity = format_entity_name(entity_name)
        dirs = create_entity_directories(entity.kebab_case, config)
        report = GenerationReport(entity=entity)

        for spec in LAYERS:
            if not options.include(spec.layer):
                continue
            written = await self._render_layer(renderer, spec, entity, dirs, config)
            report.layers.append(spec.layer)
            report.files.extend(written)

        return report

    # -- Layer rendering ---------------------------------------------------

    async def _render_layer(
        self,
        renderer: TemplateRenderer,
        spec: LayerSpec,
        entity: EntityNameFormats,
        dirs: EntityDirectories,
        config: Config,
    ) -> list[Path]:
        name = spec.layer.value
        context = {"entity": entity, "layout": config.layout}
        written: list[Path] = []

        with console.status(f"Generating {name} layer..."):
            try:
                for target in spec.targets:
                    destination = target.resolve(dirs, entity)
                    written.append(await renderer.render_to_file(target.template, destination, context))
            except Exception as exc:
                print_error(f"Failed to generate {name} layer")
                raise LayerGenerationError(name, str(exc)) from exc

        print_step(f"{name.capitalize()} layer generated successfully")
        return written

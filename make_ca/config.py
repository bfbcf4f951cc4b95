"""make-ca configuration.

Typed configuration for the scaffolder.  The project layout lives in a
Pydantic v2 model that ``init`` serialises into the project's marker file
(``.make-ca.json``); ``generate`` reads it back so every entity lands in the
directories the project was initialized with.
"""

from __future__ import annotations

import os
from pathlib import Path

from pydantic import BaseModel, Field

MARKER_FILE = ".make-ca.json"


class LayoutConfig(BaseModel):
    """Directory layout of a clean architecture project.

    Every layer directory is relative to :attr:`source_dir`, which is itself
    relative to the project root.
    """

    source_dir: str = Field(default="src", min_length=1)
    domain_dir: str = Field(default="core/domain", min_length=1)
    service_dir: str = Field(default="core/service", min_length=1)
    infrastructure_dir: str = Field(default="infrastructure/persistence/typeorm", min_length=1)
    application_dir: str = Field(default="application/api", min_length=1)
    di_feature_dir: str = Field(default="application/di/feature", min_length=1)
    skeleton_dirs: list[str] = Field(
        default_factory=lambda: ["core/common", "infrastructure/config"],
        description="Extra directories created by ``init`` next to the layer roots",
    )

    def layer_dirs(self) -> dict[str, str]:
        """Return a plain ``{name: relative_dir}`` mapping of the layer roots."""
        return {
            "domain": self.domain_dir,
            "service": self.service_dir,
            "infrastructure": self.infrastructure_dir,
            "application": self.application_dir,
            "di_feature": self.di_feature_dir,
        }


class Config(BaseModel):
    """Global make-ca configuration.

    Instances are created once by the CLI entry point (usually through
    :meth:`from_env`) and then passed to the initializer and the generator.
    """

    project_name: str = Field(default="")
    project_root: Path = Field(default=Path("."))
    default_project_dir: str = Field(default="my-clean-project")
    template_dir: Path | None = Field(
        default=None,
        description="Directory searched for templates before the packaged ones",
    )
    layout: LayoutConfig = Field(default_factory=LayoutConfig)

    # ------------------------------------------------------------------
    # Derived paths (read-only properties)
    # ------------------------------------------------------------------

    @property
    def marker_path(self) -> Path:
        """Path to the ``.make-ca.json`` marker inside the project root."""
        return self.project_root / MARKER_FILE

    @property
    def source_root(self) -> Path:
        return self.project_root / self.layout.source_dir

    @property
    def domain_root(self) -> Path:
        return self.source_root / self.layout.domain_dir

    @property
    def service_root(self) -> Path:
        return self.source_root / self.layout.service_dir

    @property
    def infrastructure_root(self) -> Path:
        return self.source_root / self.layout.infrastructure_dir

    @property
    def application_root(self) -> Path:
        return self.source_root / self.layout.application_dir

    @property
    def di_feature_root(self) -> Path:
        return self.source_root / self.layout.di_feature_dir

    @property
    def layer_roots(self) -> list[Path]:
        """Every directory that must exist for the project to count as initialized."""
        return [self.source_root / d for d in self.layout.layer_dirs().values()]

    def with_root(self, project_root: Path) -> "Config":
        """Return a copy of this configuration anchored at *project_root*."""
        return self.model_copy(update={"project_root": Path(project_root)})

    # ------------------------------------------------------------------
    # Serialisation helpers
    # ------------------------------------------------------------------

    def save(self, path: Path | None = None) -> Path:
        """Persist the project-level settings to the marker file.

        Machine-local fields (``project_root``, ``template_dir``) are not
        written so the marker can be committed alongside the project.

        Args:
            path: Destination file. Defaults to :attr:`marker_path`.

        Returns:
            The path where the file was written.
        """
        target = path or self.marker_path
        target.parent.mkdir(parents=True, exist_ok=True)
        payload = self.model_dump_json(
            indent=2, exclude={"project_root", "template_dir", "default_project_dir"}
        )
        target.write_text(payload + "\n", encoding="utf-8")
        return target

    @classmethod
    def load(cls, path: Path) -> "Config":
        """Load a project configuration from its marker file.

        The returned configuration is anchored at the marker's directory.

        Raises:
            OSError: if the file cannot be read.
            pydantic.ValidationError: if the content is not a valid config.
        """
        marker = Path(path)
        raw = marker.read_text(encoding="utf-8")
        config = cls.model_validate_json(raw)
        return config.with_root(marker.parent)

    @classmethod
    def from_env(cls) -> "Config":
        """Build a ``Config`` from environment variables.

        Recognised variables (all optional):
            MAKE_CA_TEMPLATE_DIR, MAKE_CA_SOURCE_DIR,
            MAKE_CA_DEFAULT_PROJECT_DIR.
        """
        layout_kwargs: dict[str, str] = {}
        if os.environ.get("MAKE_CA_SOURCE_DIR"):
            layout_kwargs["source_dir"] = os.environ["MAKE_CA_SOURCE_DIR"]

        template_dir = os.environ.get("MAKE_CA_TEMPLATE_DIR")

        return cls(
            default_project_dir=os.environ.get("MAKE_CA_DEFAULT_PROJECT_DIR", "my-clean-project"),
            template_dir=Path(template_dir) if template_dir else None,
            layout=LayoutConfig(**layout_kwargs),
        )

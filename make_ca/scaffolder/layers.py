"""Declarative description of the generated layers.

Every layer is one :class:`LayerSpec` row holding the ordered list of
``(template, destination)`` pairs to render for it.  The generator only iterates
:data:`LAYERS`, so adding a file or a layer means adding a row here.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field

from .naming import EntityNameFormats


class Layer(str, Enum):
    """Architectural layers in generation order."""

    DOMAIN = "domain"
    SERVICE = "service"
    INFRASTRUCTURE = "infrastructure"
    APPLICATION = "application"


# ---------------------------------------------------------------------------
# Inclusion flags
# ---------------------------------------------------------------------------


class GenerateOptions(BaseModel):
    """The six ``--skip-*`` / ``--only-*`` flags of ``generate``."""

    model_config = ConfigDict(frozen=True)

    skip_domain: bool = Field(default=False)
    skip_infrastructure: bool = Field(default=False)
    skip_application: bool = Field(default=False)
    only_domain: bool = Field(default=False)
    only_infrastructure: bool = Field(default=False)
    only_application: bool = Field(default=False)

    def include(self, layer: Layer) -> bool:
        """Return whether *layer* should be generated.

        A layer is included when its own ``only`` flag is set, or when it is
        not skipped and no other layer's ``only`` flag is set.  The service
        layer has no flags of its own and follows the domain layer.
        """
        if layer is Layer.SERVICE:
            layer = Layer.DOMAIN

        only = {
            Layer.DOMAIN: self.only_domain,
            Layer.INFRASTRUCTURE: self.only_infrastructure,
            Layer.APPLICATION: self.only_application,
        }
        skip = {
            Layer.DOMAIN: self.skip_domain,
            Layer.INFRASTRUCTURE: self.skip_infrastructure,
            Layer.APPLICATION: self.skip_application,
        }
        others_only = any(flag for other, flag in only.items() if other is not layer)
        return only[layer] or (not skip[layer] and not others_only)

    def selected_layers(self) -> list[Layer]:
        """Return the included layers in generation order."""
        return [layer for layer in Layer if self.include(layer)]


# ---------------------------------------------------------------------------
# Entity directories
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class EntityDirectories:
    """Directories that receive the files of one entity."""

    domain_dir: Path
    service_dir: Path
    infra_dir: Path
    app_dir: Path
    di_feature_dir: Path

    def all(self) -> list[Path]:
        return [self.domain_dir, self.service_dir, self.infra_dir, self.app_dir, self.di_feature_dir]


# ---------------------------------------------------------------------------
# Template table
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class TemplateTarget:
    """One generated file: a template and where its output goes.

    ``destination`` is a ``str.format`` pattern over the fields of
    :class:`EntityNameFormats` (``"{pascal_case}Controller.ts"``), relative
    to the :class:`EntityDirectories` attribute named by ``directory``.
    """

    template: str
    destination: str
    directory: str

    def resolve(self, dirs: EntityDirectories, entity: EntityNameFormats) -> Path:
        base: Path = getattr(dirs, self.directory)
        return base / self.destination.format(**entity.model_dump())


@dataclass(frozen=True)
class LayerSpec:
    layer: Layer
    targets: tuple[TemplateTarget, ...]


def _targets(directory: str, pairs: list[tuple[str, str]]) -> tuple[TemplateTarget, ...]:
    return tuple(TemplateTarget(template, destination, directory) for template, destination in pairs)


DOMAIN_TARGETS = _targets(
    "domain_dir",
    [
        ("domain/di/index.ts.j2", "di/index.ts"),
        ("domain/entity/Entity.ts.j2", "entity/{pascal_case}.ts"),
        ("domain/entity/index.ts.j2", "entity/index.ts"),
        ("domain/exception/NotFoundException.ts.j2", "exception/{pascal_case}NotFoundException.ts"),
        (
            "domain/exception/AlreadyExistsException.ts.j2",
            "exception/{pascal_case}AlreadyExistsException.ts",
        ),
        ("domain/exception/index.ts.j2", "exception/index.ts"),
        ("domain/repository/Repository.ts.j2", "repository/{pascal_case}Repository.ts"),
        ("domain/repository/RepositoryPort.ts.j2", "repository/{pascal_case}RepositoryPort.ts"),
        ("domain/repository/RepositoryResult.ts.j2", "repository/{pascal_case}RepositoryResult.ts"),
        ("domain/repository/index.ts.j2", "repository/index.ts"),
        ("domain/use-case/UseCasePort.ts.j2", "use-case/{pascal_case}UseCasePort.ts"),
        ("domain/use-case/UseCaseResult.ts.j2", "use-case/{pascal_case}UseCaseResult.ts"),
        ("domain/use-case/GetUseCase.ts.j2", "use-case/Get{pascal_case}UseCase.ts"),
        ("domain/use-case/GetManyUseCase.ts.j2", "use-case/Get{plural_pascal_case}UseCase.ts"),
        ("domain/use-case/CreateUseCase.ts.j2", "use-case/Create{pascal_case}UseCase.ts"),
        ("domain/use-case/UpdateUseCase.ts.j2", "use-case/Update{pascal_case}UseCase.ts"),
        ("domain/use-case/DeleteUseCase.ts.j2", "use-case/Delete{pascal_case}UseCase.ts"),
        ("domain/use-case/index.ts.j2", "use-case/index.ts"),
    ],
)

SERVICE_TARGETS = _targets(
    "service_dir",
    [
        ("service/GetService.ts.j2", "Get{pascal_case}Service.ts"),
        ("service/GetManyService.ts.j2", "Get{plural_pascal_case}Service.ts"),
        ("service/CreateService.ts.j2", "Create{pascal_case}Service.ts"),
        ("service/UpdateService.ts.j2", "Update{pascal_case}Service.ts"),
        ("service/DeleteService.ts.j2", "Delete{pascal_case}Service.ts"),
        ("service/index.ts.j2", "index.ts"),
    ],
)

INFRASTRUCTURE_TARGETS = _targets(
    "infra_dir",
    [
        (
            "infrastructure/persistence/typeorm/feature/TypeOrmEntity.ts.j2",
            "TypeOrm{pascal_case}.entity.ts",
        ),
        (
            "infrastructure/persistence/typeorm/feature/TypeOrmMapper.ts.j2",
            "TypeOrm{pascal_case}Mapper.ts",
        ),
        (
            "infrastructure/persistence/typeorm/feature/TypeOrmRepository.ts.j2",
            "TypeOrm{pascal_case}Repository.ts",
        ),
        ("infrastructure/persistence/typeorm/feature/index.ts.j2", "index.ts"),
    ],
)

APPLICATION_TARGETS = _targets(
    "app_dir",
    [
        ("application/controller/Controller.ts.j2", "controller/{pascal_case}Controller.ts"),
        (
            "application/documentation/body/RestApiCreateBody.ts.j2",
            "documentation/body/RestApiCreate{pascal_case}Body.ts",
        ),
        (
            "application/documentation/body/RestApiUpdateBody.ts.j2",
            "documentation/body/RestApiUpdate{pascal_case}Body.ts",
        ),
        ("application/documentation/body/index.ts.j2", "documentation/body/index.ts"),
        (
            "application/documentation/query/RestApiGetQuery.ts.j2",
            "documentation/query/RestApiGet{plural_pascal_case}Query.ts",
        ),
        ("application/documentation/query/index.ts.j2", "documentation/query/index.ts"),
        ("application/documentation/index.ts.j2", "documentation/index.ts"),
    ],
) + _targets(
    "di_feature_dir",
    [("application/di/feature/EntityModule.ts.j2", "{pascal_case}Module.ts")],
)


LAYERS: tuple[LayerSpec, ...] = (
    LayerSpec(Layer.DOMAIN, DOMAIN_TARGETS),
    LayerSpec(Layer.SERVICE, SERVICE_TARGETS),
    LayerSpec(Layer.INFRASTRUCTURE, INFRASTRUCTURE_TARGETS),
    LayerSpec(Layer.APPLICATION, APPLICATION_TARGETS),
)


# Files rendered once by ``init``.  Destinations are relative to the project
# root and may use the ``LayoutConfig`` fields as ``str.format`` keys.
PROJECT_TARGETS: tuple[tuple[str, str], ...] = (
    ("project/README.md.j2", "README.md"),
    ("project/common/Exception.ts.j2", "{source_dir}/core/common/exception/Exception.ts"),
    ("project/common/UseCase.ts.j2", "{source_dir}/core/common/use-case/UseCase.ts"),
    ("project/common/Nullable.ts.j2", "{source_dir}/core/common/type/Nullable.ts"),
    ("project/di/RootModule.ts.j2", "{source_dir}/{di_dir}/RootModule.ts"),
)

"""make-ca scaffolder -- renders clean architecture layers for an entity.

Quick usage::

    from make_ca.scaffolder import EntityGenerator, GenerateOptions, ProjectInitializer

    root = await ProjectInitializer().initialize("/tmp/my-clean-project")
    generator = EntityGenerator(root)
    report = await generator.generate("user-profile", GenerateOptions(only_domain=True))
"""

from make_ca.scaffolder.generator import EntityGenerator, GenerationReport
from make_ca.scaffolder.layers import LAYERS, GenerateOptions, Layer
from make_ca.scaffolder.naming import EntityNameFormats, format_entity_name, validate_entity_name
from make_ca.scaffolder.project import ProjectInitializer, is_project_initialized
from make_ca.scaffolder.templates import TemplateRenderer

__all__ = [
    "EntityGenerator",
    "EntityNameFormats",
    "GenerateOptions",
    "GenerationReport",
    "LAYERS",
    "Layer",
    "ProjectInitializer",
    "TemplateRenderer",
    "format_entity_name",
    "is_project_initialized",
    "validate_entity_name",
]

"""Jinja2 template rendering for entity scaffolding.

Provides the TemplateRenderer class which loads Jinja2 templates from the
packaged ``make_ca/scaffolder/templates/`` directory (optionally shadowed by a
user supplied directory) and renders them with the entity name bundle.
"""

from __future__ import annotations

import asyncio
from pathlib import Path
from typing import Any

from jinja2 import ChoiceLoader, Environment, FileSystemLoader, StrictUndefined, select_autoescape

from ..utils import write_text
from .naming import pluralize, to_camel_case, to_kebab_case, to_pascal_case, to_snake_case


# ---------------------------------------------------------------------------
# Template directory discovery
# ---------------------------------------------------------------------------

DEFAULT_TEMPLATE_DIR = Path(__file__).parent / "templates"


# ---------------------------------------------------------------------------
# TemplateRenderer
# ---------------------------------------------------------------------------


class TemplateRenderer:
    """Renders Jinja2 templates for entity scaffolding.

    Template identifiers are paths relative to the template root, e.g.
    ``"domain/entity/Entity.ts.j2"``.  When an override directory is given it
    is searched first, so a project can replace individual templates without
    copying the whole set.
    """

    def __init__(
        self,
        template_dir: str | Path | None = None,
        override_dir: str | Path | None = None,
    ) -> None:
        if template_dir is None:
            template_dir = DEFAULT_TEMPLATE_DIR
        self.template_dir = Path(template_dir)
        self.override_dir = Path(override_dir) if override_dir is not None else None

        loaders = [FileSystemLoader(str(self.template_dir))]
        if self.override_dir is not None:
            loaders.insert(0, FileSystemLoader(str(self.override_dir)))

        self.env = Environment(
            loader=ChoiceLoader(loaders),
            autoescape=select_autoescape([]),
            undefined=StrictUndefined,
            keep_trailing_newline=True,
            trim_blocks=True,
            lstrip_blocks=True,
        )
        self.env.filters["kebab_case"] = to_kebab_case
        self.env.filters["camel_case"] = to_camel_case
        self.env.filters["pascal_case"] = to_pascal_case
        self.env.filters["snake_case"] = to_snake_case
        self.env.filters["pluralize"] = pluralize

    # -- Single template rendering -----------------------------------------

    def render(self, template_path: str, context: dict[str, Any]) -> str:
        """Render a single template with the provided context.

        Args:
            template_path: Path relative to the template directory.
            context: Dictionary of variables available inside the template.

        Returns:
            The rendered template content as a string.

        Raises:
            jinja2.TemplateNotFound: if no loader knows *template_path*.
            jinja2.UndefinedError: if the template uses a missing variable.
        """
        template = self.env.get_template(template_path)
        return template.render(**context)

    def render_string(self, template_string: str, context: dict[str, Any]) -> str:
        """Render an inline template string with the provided context."""
        template = self.env.from_string(template_string)
        return template.render(**context)

    # -- File-based rendering (async) --------------------------------------

    async def render_to_file(
        self,
        template_path: str,
        output_path: str | Path,
        context: dict[str, Any],
    ) -> Path:
        """Render a template and write the result to *output_path*.

        Any existing file is overwritten and parent directories are created
        automatically.  Returns the output path.
        """
        content = self.render(template_path, context)
        out = Path(output_path)
        await asyncio.to_thread(write_text, out, content)
        return out

    # -- Utility -----------------------------------------------------------

    def list_templates(self, prefix: str = "") -> list[str]:
        """Return a sorted list of all ``.j2`` template paths under *prefix*.

        Paths are relative to the template root directory.  Templates from
        the override directory are included.
        """
        roots = [self.template_dir]
        if self.override_dir is not None:
            roots.append(self.override_dir)

        found: set[str] = set()
        for root in roots:
            search_dir = root / prefix if prefix else root
            if not search_dir.is_dir():
                continue
            found.update(p.relative_to(root).as_posix() for p in search_dir.rglob("*.j2"))
        return sorted(found)

"""Template resolution for storybook scaffolding."""
import os
from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional

import yaml
from jinja2 import Environment, FileSystemLoader, StrictUndefined, TemplateError

from phx_gen_storybook.core.errors import ManifestError, TemplateNotFoundError, TemplateRenderError
from phx_gen_storybook.core.logger import get_logger
from phx_gen_storybook.core.project import underscore

logger = get_logger(__name__)

DEFAULT_TEMPLATE_DIR = Path(__file__).parent / "templates"
TEMPLATES_ENV_VAR = "PHX_STORYBOOK_TEMPLATES"
MANIFEST_NAME = "manifest.yml"
RENDERABLE_SUFFIX = ".j2"

# Manifest `when` values mapped to the tailwind option they require
_PREDICATES = {"tailwind": True, "no_tailwind": False}


def find_template_dir(template_dir: Optional[Path] = None) -> Path:
    """Locate the directory holding the storybook templates."""
    if template_dir:
        return Path(template_dir)

    if env_dir := os.environ.get(TEMPLATES_ENV_VAR):
        return Path(env_dir)

    return DEFAULT_TEMPLATE_DIR


@dataclass(frozen=True)
class SubstitutionContext:
    """Values available to renderable templates as ``schema``."""
    app: str
    sandbox_class: str
    module: str

    @classmethod
    def for_web_module(cls, module: str) -> "SubstitutionContext":
        app = underscore(module)
        return cls(app=app, sandbox_class=app.replace("_", "-"), module=module)


@dataclass(frozen=True)
class FileMapping:
    """One template and where it lands in the host project."""
    template: str
    destination: str
    when: Optional[str] = None

    def applies(self, tailwind: bool) -> bool:
        if self.when is None:
            return True
        return _PREDICATES[self.when] == tailwind

    def target(self, context: SubstitutionContext) -> str:
        return self.destination.format(app=context.app)


class TemplateEngine:
    """Loads the file manifest and resolves template contents."""

    def __init__(self, template_dir: Optional[Path] = None):
        self.template_dir = find_template_dir(template_dir)
        self.jinja_env = Environment(
            loader=FileSystemLoader(str(self.template_dir)),
            autoescape=False,
            keep_trailing_newline=True,
            undefined=StrictUndefined,
        )

    def load_manifest(self) -> List[FileMapping]:
        """Load the ordered file mapping.

        Raises:
            ManifestError: If the manifest is missing or malformed
        """
        manifest_path = self.template_dir / MANIFEST_NAME
        if not manifest_path.exists():
            raise ManifestError(f"Manifest not found at {manifest_path}")

        try:
            with open(manifest_path) as f:
                data = yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            raise ManifestError(f"Invalid YAML in {manifest_path}: {e}") from e

        entries = data.get("files") if isinstance(data, dict) else None
        if not isinstance(entries, list) or not entries:
            raise ManifestError(f"{manifest_path} must define a non-empty 'files' list")

        mapping = []
        for index, entry in enumerate(entries):
            if not isinstance(entry, dict) or not entry.get("template") or not entry.get("destination"):
                raise ManifestError(
                    f"{manifest_path}: entry {index} needs 'template' and 'destination'"
                )
            when = entry.get("when")
            if when is not None and when not in _PREDICATES:
                raise ManifestError(
                    f"{manifest_path}: entry {index} has unknown 'when' value '{when}' "
                    f"(expected one of: {', '.join(_PREDICATES)})"
                )
            mapping.append(FileMapping(entry["template"], entry["destination"], when))

        logger.debug(f"Loaded {len(mapping)} manifest entries from {manifest_path}")
        return mapping

    def is_renderable(self, template_name: str) -> bool:
        return template_name.endswith(RENDERABLE_SUFFIX)

    def resolve(self, template_name: str, context: SubstitutionContext) -> bytes:
        """Return the content a template produces.

        ``.j2`` templates are rendered with ``context`` as ``schema``; everything
        else is returned byte-for-byte.

        Raises:
            TemplateNotFoundError: If the template is missing or unreadable
            TemplateRenderError: If a .j2 template fails to render
        """
        template_path = self.template_dir / template_name
        if not template_path.is_file():
            raise TemplateNotFoundError(
                f"Template '{template_name}' not found at {template_path}"
            )

        if not self.is_renderable(template_name):
            try:
                return template_path.read_bytes()
            except OSError as e:
                raise TemplateNotFoundError(f"Cannot read template {template_path}: {e}") from e

        try:
            template = self.jinja_env.get_template(template_name)
            rendered = template.render(schema=context)
        except TemplateError as e:
            raise TemplateRenderError(f"Failed to render template {template_path}: {e}") from e
        logger.debug(f"Rendered {template_name}")
        return rendered.encode("utf-8")

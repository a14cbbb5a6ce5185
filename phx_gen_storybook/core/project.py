"""Host Phoenix project metadata.

The generator only needs a handful of facts about the project it writes into:
the OTP app name and umbrella flag from ``mix.exs``, plus the ``namespace`` and
``generators: [context_app: ...]`` settings configured for that app in
``config/config.exs``. Everything else about the host project is left alone.
"""
import re
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, Optional

from phx_gen_storybook.core.errors import ProjectError
from phx_gen_storybook.core.logger import get_logger

logger = get_logger(__name__)

_COMMENT_RE = re.compile(r"^\s*#.*$", re.MULTILINE)
_APP_RE = re.compile(r"\bapp:\s*:(\w+)")
_APPS_PATH_RE = re.compile(r"\bapps_path:")
# `config :my_app, key: value` (plain app config, not `config :my_app, MyApp.Repo, ...`)
_CONFIG_BLOCK_RE = re.compile(
    r"^config\s+:(\w+)\s*,(?!\s*[A-Z][\w.]*\s*,)(.*?)(?=^config\s|^import_config\s|\Z)",
    re.MULTILINE | re.DOTALL,
)
_NAMESPACE_RE = re.compile(r"\bnamespace:\s*([A-Z][\w.]*)")
_CONTEXT_APP_RE = re.compile(r"\bcontext_app:\s*(?:\{\s*)?:(\w+)")


def camelize(name: str) -> str:
    """Convert ``my_app`` to ``MyApp``."""
    return "".join(part[:1].upper() + part[1:] for part in name.split("_") if part)


def underscore(module: str) -> str:
    """Convert ``MyAppWeb`` to ``my_app_web`` (``Foo.Bar`` becomes ``foo/bar``)."""
    segments = []
    for segment in module.split("."):
        segment = re.sub(r"([A-Z]+)([A-Z][a-z])", r"\1_\2", segment)
        segment = re.sub(r"([a-z\d])([A-Z])", r"\1_\2", segment)
        segments.append(segment.lower())
    return "/".join(segments)


def derive_web_module(base: str, context_app: str, otp_app: str) -> str:
    """Return the web-layer module for a project.

    Projects whose context app differs from the OTP app already live in the
    web app, so the base module is used as is.
    """
    if context_app != otp_app:
        return base
    if base.endswith("Web"):
        return base
    return f"{base}Web"


@dataclass(frozen=True)
class ProjectMetadata:
    """Facts read from the host project's mix files."""
    root: Path
    otp_app: str
    base: str
    context_app: str
    umbrella: bool = False

    @property
    def web_module(self) -> str:
        return derive_web_module(self.base, self.context_app, self.otp_app)


def _strip_comments(source: str) -> str:
    return _COMMENT_RE.sub("", source)


def _app_config(config_source: str, otp_app: str) -> Dict[str, str]:
    """Collect ``namespace`` and ``context_app`` configured for ``otp_app``."""
    settings: Dict[str, str] = {}
    for match in _CONFIG_BLOCK_RE.finditer(config_source):
        if match.group(1) != otp_app:
            continue
        body = match.group(2)
        if namespace := _NAMESPACE_RE.search(body):
            settings["namespace"] = namespace.group(1)
        if context_app := _CONTEXT_APP_RE.search(body):
            settings["context_app"] = context_app.group(1)
    return settings


def load_project(root: Optional[Path] = None) -> ProjectMetadata:
    """Read project metadata from ``root`` (defaults to the current directory).

    Raises:
        ProjectError: If ``mix.exs`` is missing or declares no app
    """
    root = Path(root) if root else Path.cwd()
    mix_file = root / "mix.exs"
    if not mix_file.exists():
        raise ProjectError(
            f"no mix.exs found in {root}. "
            "phx-gen-storybook must be invoked from your project root directory"
        )

    mix_source = _strip_comments(mix_file.read_text())
    umbrella = bool(_APPS_PATH_RE.search(mix_source))

    app_match = _APP_RE.search(mix_source)
    if not app_match:
        if umbrella:
            return ProjectMetadata(root=root, otp_app="", base="", context_app="", umbrella=True)
        raise ProjectError(f"could not find the application name (app: :name) in {mix_file}")
    otp_app = app_match.group(1)

    settings: Dict[str, str] = {}
    config_file = root / "config" / "config.exs"
    if config_file.exists():
        settings = _app_config(_strip_comments(config_file.read_text()), otp_app)
    else:
        logger.debug(f"No {config_file} found, using defaults for {otp_app}")

    metadata = ProjectMetadata(
        root=root,
        otp_app=otp_app,
        base=settings.get("namespace", camelize(otp_app)),
        context_app=settings.get("context_app", otp_app),
        umbrella=umbrella,
    )
    logger.debug(
        f"Project {metadata.otp_app}: base={metadata.base} "
        f"context_app={metadata.context_app} umbrella={metadata.umbrella}"
    )
    return metadata

"""Core storybook generation: resolve templates and write them into the host project."""
from dataclasses import dataclass
from pathlib import Path
from typing import Callable, List, Optional, Tuple

from rich.console import Console

from phx_gen_storybook.cli_support import confirm_action
from phx_gen_storybook.core.errors import ManifestError
from phx_gen_storybook.core.logger import get_logger
from phx_gen_storybook.scaffold.files import CreateResult, create_file
from phx_gen_storybook.scaffold.templates import FileMapping, SubstitutionContext, TemplateEngine

logger = get_logger(__name__)


@dataclass(frozen=True)
class GeneratorOptions:
    """Options parsed from the command line."""
    tailwind: bool = True
    force: bool = False


class StorybookGenerator:
    """Writes the storybook files into a Phoenix project."""

    def __init__(
        self,
        project_root: Path,
        console: Console,
        engine: Optional[TemplateEngine] = None,
        confirm: Callable[[str], bool] = confirm_action,
    ):
        self.project_root = Path(project_root)
        self.console = console
        self.engine = engine or TemplateEngine()
        self.confirm = confirm

    def plan(self, options: GeneratorOptions) -> List[FileMapping]:
        """Return the manifest entries that apply to ``options``, in order."""
        return [entry for entry in self.engine.load_manifest() if entry.applies(options.tailwind)]

    def _destination(self, entry: FileMapping, context: SubstitutionContext) -> Tuple[str, Path]:
        relative = entry.target(context)
        root = self.project_root.resolve()
        path = (root / relative).resolve()
        if root != path and root not in path.parents:
            raise ManifestError(
                f"Destination '{relative}' for template '{entry.template}' "
                f"is outside the project root {root}"
            )
        return relative, path

    def generate(
        self, context: SubstitutionContext, options: GeneratorOptions
    ) -> List[Tuple[str, CreateResult]]:
        """Resolve every applicable template and write it to its destination.

        Files are written in manifest order. A failure stops the run but keeps
        the files already written.

        Returns:
            List of (relative destination, result) pairs
        """
        results = []
        for entry in self.plan(options):
            relative, path = self._destination(entry, context)
            content = self.engine.resolve(entry.template, context)
            logger.debug(f"{entry.template} -> {relative}")
            result = create_file(
                path,
                content,
                self.console,
                display_path=relative,
                force=options.force,
                confirm=self.confirm,
            )
            results.append((relative, result))
        return results

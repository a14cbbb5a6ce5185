#!/usr/bin/env python3
"""phx-gen-storybook CLI - scaffold a component storybook into a Phoenix project."""
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console

from phx_gen_storybook.cli_support import handle_cli_error, reject_extra_args
from phx_gen_storybook.core.errors import StorybookGenError, UmbrellaProjectError
from phx_gen_storybook.core.logger import get_logger, set_verbose, setup_file_logging
from phx_gen_storybook.core.project import load_project
from phx_gen_storybook.scaffold import (
    GeneratorOptions,
    StorybookGenerator,
    SubstitutionContext,
    print_outcome,
    run_instructions,
)

app = typer.Typer(name="phx-gen-storybook", add_completion=False)

console = Console()
logger = get_logger(__name__)


@app.command(context_settings={"allow_extra_args": True, "ignore_unknown_options": True})
def generate(
    ctx: typer.Context,
    tailwind: bool = typer.Option(True, "--tailwind/--no-tailwind",
                                  help="Generate the TailwindCSS stylesheet and setup steps"),
    project_dir: Optional[Path] = typer.Option(None, "--project-dir", "-d",
                                               help="Phoenix project root (default: current directory)"),
    force: bool = typer.Option(False, "--force", "-f", help="Overwrite conflicting files without asking"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Debug logging and tracebacks"),
    log_file: Optional[str] = typer.Option(None, "--log-file", help="Also write logs to this file"),
):
    """Generates a Storybook to showcase your LiveComponents.

    Run it from your Phoenix project root. The generated files will contain:

      lib/my_app_web/storybook.ex          the storybook backend
      storybook/_root.index.exs            an index file
      storybook/welcome.story.exs          a welcome page
      storybook/components/icon.story.exs  an icon component
      assets/js/storybook.js               a custom js
      assets/css/storybook.css             a custom css

    Manual setup instructions are printed afterwards, one step at a time.

    Examples:
        phx-gen-storybook                  # Tailwind stylesheet
        phx-gen-storybook --no-tailwind    # Plain stylesheet, no Tailwind steps
    """
    try:
        reject_extra_args(ctx.args)

        set_verbose(verbose)

        project = load_project(project_dir)
        if project.umbrella:
            raise UmbrellaProjectError()

        if log_file:
            setup_file_logging(log_file=log_file, verbose=verbose)

        console.print("Starting storybook generation")

        web_module = project.web_module
        context = SubstitutionContext.for_web_module(web_module)
        options = GeneratorOptions(tailwind=tailwind, force=force)
        logger.debug(f"Target module {web_module}, app folder lib/{context.app}")

        StorybookGenerator(project.root, console).generate(context, options)

        completed = run_instructions(context, options, console)
        print_outcome(console, completed)
    except StorybookGenError as e:
        handle_cli_error(e, console, verbose)


if __name__ == "__main__":
    app()

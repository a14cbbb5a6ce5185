"""Manual setup instructions printed after the storybook files are generated.

Each step describes one edit the user has to make by hand in the host
project (router, esbuild, Tailwind, watchers, live reload, formatter). Steps
run in order; the first one the user declines ends the sequence.
"""
import textwrap
from dataclasses import dataclass
from typing import Callable, List

from rich.console import Console

from phx_gen_storybook.cli_support import confirm_action
from phx_gen_storybook.core.logger import get_logger
from phx_gen_storybook.scaffold.core import GeneratorOptions
from phx_gen_storybook.scaffold.templates import SubstitutionContext

logger = get_logger(__name__)

HEADER = "[green]* manual setup instructions:[/green]"
CONTINUE_PROMPT = "[Y to continue]"
SUCCESS_MESSAGES = (
    "You are all set! 🚀",
    "You can run mix phx.server and visit http://localhost:4000/storybook",
)
ABORT_MESSAGE = "storybook setup aborted 🙁"


@dataclass(frozen=True)
class InstructionStep:
    name: str
    template: str
    tailwind_only: bool = False

    def applies(self, options: GeneratorOptions) -> bool:
        return options.tailwind or not self.tailwind_only

    def render(self, context: SubstitutionContext) -> str:
        return textwrap.dedent(self.template).strip("\n").format(
            web_module=context.module.split(".")[-1],
            app=context.app,
        )


ROUTER = InstructionStep(
    name="router",
    template="""
    Add the following to your [bold]router.ex[/bold]:

      use {web_module}, :router
      import PhxLiveStorybook.Router

      scope "/" do
        storybook_assets()
      end

      scope "/", {web_module} do
        pipe_through(:browser)
        live_storybook "/storybook", backend_module: {web_module}.Storybook
      end
    """,
)

BUNDLER = InstructionStep(
    name="esbuild",
    template="""
    Add [bold]js/storybook.js[/bold] as a new entry point to your esbuild args in [bold]config/config.exs[/bold]:

      config :esbuild,
      default: [
        args:
          ~w(js/app.js [bold]js/storybook.js[/bold] --bundle --target=es2017 --outdir=../priv/static/assets ...),
        ...
      ]
    """,
)

STYLESHEET_BUILD = InstructionStep(
    name="tailwind",
    tailwind_only=True,
    template="""
    Add a new Tailwind build profile for [bold]css/storybook.css[/bold] in [bold]config/config.exs[/bold]:

      config :tailwind,
        ...
        default: [
          ...
        ],
        [bold]storybook: [
          args: ~w(
            --config=tailwind.config.js
            --input=css/storybook.css
            --output=../priv/static/assets/storybook.css
          ),
          cd: Path.expand("../assets", __DIR__)
        ][/bold]
    """,
)

WATCHER = InstructionStep(
    name="watchers",
    tailwind_only=True,
    template="""
    Add a new [bold]endpoint watcher[/bold] for your new Tailwind build profile in [bold]config/dev.exs[/bold]:

      config :{app}, {web_module}.Endpoint,
        ...
        watchers: [
          ...
          [bold]storybook_tailwind: {{Tailwind, :install_and_run, [:storybook, ~w(--watch)]}}[/bold]
        ]
    """,
)

LIVE_RELOAD = InstructionStep(
    name="live_reload",
    template="""
    Add a new [bold]live_reload pattern[/bold] to your endpoint in [bold]config/dev.exs[/bold]:

      config :{app}, {web_module}.Endpoint,
        live_reload: [
          patterns: [
            ...
            [bold]~r"storybook/.*(exs)$"[/bold]
          ]
        ]
    """,
)

FORMATTER = InstructionStep(
    name="formatter",
    template="""
    Add your storybook content to [bold].formatter.exs[/bold]

      [
        import_deps: [...],
        inputs: [
          ...
          [bold]"storybook/**/*.exs"[/bold]
        ]
      ]
    """,
)

STEPS: List[InstructionStep] = [ROUTER, BUNDLER, STYLESHEET_BUILD, WATCHER, LIVE_RELOAD, FORMATTER]


def confirm_continue(message: str) -> bool:
    """Instruction prompts continue when the user just presses Enter."""
    return confirm_action(message, default=True)


def run_instructions(
    context: SubstitutionContext,
    options: GeneratorOptions,
    console: Console,
    confirm: Callable[[str], bool] = confirm_continue,
    steps: List[InstructionStep] = STEPS,
) -> bool:
    """Walk the instruction steps, stopping at the first declined prompt.

    Returns:
        True if every applicable step was confirmed, False if one was declined
    """
    for step in steps:
        if not step.applies(options):
            logger.debug(f"Skipping {step.name} instructions (tailwind disabled)")
            continue

        console.print(HEADER)
        console.print(step.render(context), highlight=False, soft_wrap=True)
        console.print()
        if not confirm(CONTINUE_PROMPT):
            logger.debug(f"Instructions declined at {step.name}")
            return False

    return True


def print_outcome(console: Console, completed: bool) -> None:
    if completed:
        for message in SUCCESS_MESSAGES:
            console.print(message)
    else:
        console.print(ABORT_MESSAGE)

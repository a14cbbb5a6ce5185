"""Tests for the confirmation-gated setup instructions."""
from unittest.mock import Mock, patch

import pytest
from rich.console import Console

from phx_gen_storybook.scaffold.core import GeneratorOptions
from phx_gen_storybook.scaffold.instructions import (
    ABORT_MESSAGE,
    CONTINUE_PROMPT,
    STEPS,
    confirm_continue,
    print_outcome,
    run_instructions,
)
from phx_gen_storybook.scaffold.templates import SubstitutionContext


@pytest.fixture
def context():
    return SubstitutionContext.for_web_module("MyAppWeb")


@pytest.fixture
def console():
    return Console(record=True, width=200)


class TestSteps:
    def test_step_order(self):
        assert [step.name for step in STEPS] == [
            "router", "esbuild", "tailwind", "watchers", "live_reload", "formatter",
        ]

    def test_router_uses_web_module(self, context):
        text = STEPS[0].render(context)

        assert "use MyAppWeb, :router" in text
        assert 'scope "/", MyAppWeb do' in text
        assert "backend_module: MyAppWeb.Storybook" in text

    def test_watcher_uses_app_atom(self, context):
        text = STEPS[3].render(context)

        assert "config :my_app_web, MyAppWeb.Endpoint," in text
        assert "{Tailwind, :install_and_run, [:storybook, ~w(--watch)]}" in text

    def test_namespaced_module_uses_last_segment(self):
        text = STEPS[0].render(SubstitutionContext.for_web_module("Acme.ShopWeb"))

        assert "use ShopWeb, :router" in text


class TestRunInstructions:
    """Test the short-circuiting step loop."""

    def test_all_confirmed(self, context, console):
        confirm = Mock(return_value=True)

        completed = run_instructions(context, GeneratorOptions(), console, confirm=confirm)

        assert completed is True
        assert confirm.call_count == 6
        confirm.assert_called_with(CONTINUE_PROMPT)
        output = console.export_text()
        assert output.count("* manual setup instructions:") == 6
        assert "storybook/**/*.exs" in output

    def test_first_decline_stops_sequence(self, context, console):
        confirm = Mock(return_value=False)

        completed = run_instructions(context, GeneratorOptions(), console, confirm=confirm)

        assert completed is False
        assert confirm.call_count == 1
        output = console.export_text()
        assert "router.ex" in output
        assert "esbuild" not in output

    def test_decline_in_the_middle(self, context, console):
        confirm = Mock(side_effect=[True, True, False])

        completed = run_instructions(context, GeneratorOptions(), console, confirm=confirm)

        assert completed is False
        assert confirm.call_count == 3
        assert "live_reload" not in console.export_text()

    def test_tailwind_steps_skipped_without_prompt(self, context, console):
        confirm = Mock(return_value=True)

        completed = run_instructions(
            context, GeneratorOptions(tailwind=False), console, confirm=confirm
        )

        assert completed is True
        assert confirm.call_count == 4
        output = console.export_text()
        assert "Tailwind build profile" not in output
        assert "endpoint watcher" not in output
        assert "router.ex" in output
        assert "js/storybook.js" in output
        assert 'storybook/.*(exs)$' in output
        assert ".formatter.exs" in output


class TestPromptAndLayout:
    @patch("typer.confirm", return_value=True)
    def test_enter_defaults_to_continue(self, mock_confirm):
        assert confirm_continue(CONTINUE_PROMPT) is True
        mock_confirm.assert_called_once_with("[Y to continue]", default=True)

    def test_snippets_not_wrapped_on_narrow_console(self, context):
        console = Console(record=True, width=40)

        run_instructions(context, GeneratorOptions(), console, confirm=Mock(side_effect=[True, False]))

        lines = console.export_text().splitlines()
        assert any(
            "~w(js/app.js js/storybook.js --bundle --target=es2017 --outdir=../priv/static/assets ...)," in line
            for line in lines
        )


class TestPrintOutcome:
    def test_success(self, console):
        print_outcome(console, True)

        output = console.export_text()
        assert "You are all set!" in output
        assert "http://localhost:4000/storybook" in output

    def test_aborted(self, console):
        print_outcome(console, False)

        output = console.export_text()
        assert ABORT_MESSAGE in output
        assert "all set" not in output

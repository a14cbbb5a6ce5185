"""Shared test fixtures for phx-gen-storybook tests."""
import textwrap
from pathlib import Path

import pytest

from phx_gen_storybook.scaffold.templates import DEFAULT_TEMPLATE_DIR, TEMPLATES_ENV_VAR

MIX_EXS = """\
defmodule MyApp.MixProject do
  use Mix.Project

  def project do
    [
      app: :my_app,
      version: "0.1.0",
      elixir: "~> 1.14",
      deps: deps()
    ]
  end

  defp deps do
    [
      {:phoenix, "~> 1.7.0"},
      {:phx_live_storybook, "~> 0.4"}
    ]
  end
end
"""

CONFIG_EXS = """\
import Config

config :my_app,
  ecto_repos: [MyApp.Repo],
  generators: [timestamp_type: :utc_datetime]

# Configures the endpoint
config :my_app, MyAppWeb.Endpoint,
  url: [host: "localhost"],
  render_errors: [formats: [html: MyAppWeb.ErrorHTML], layout: false]

import_config "#{config_env()}.exs"
"""

UMBRELLA_MIX_EXS = """\
defmodule MyUmbrella.MixProject do
  use Mix.Project

  def project do
    [
      apps_path: "apps",
      version: "0.1.0",
      deps: []
    ]
  end
end
"""

GENERATED_FILES = [
    "lib/my_app_web/storybook.ex",
    "storybook/_root.index.exs",
    "storybook/welcome.story.exs",
    "storybook/components/icon.story.exs",
    "assets/js/storybook.js",
    "assets/css/storybook.css",
]


def write_project(root: Path, mix_exs: str = MIX_EXS, config_exs: str = CONFIG_EXS) -> Path:
    """Write a minimal Phoenix project skeleton under ``root``."""
    root.mkdir(parents=True, exist_ok=True)
    (root / "mix.exs").write_text(textwrap.dedent(mix_exs))
    if config_exs is not None:
        (root / "config").mkdir(exist_ok=True)
        (root / "config" / "config.exs").write_text(textwrap.dedent(config_exs))
    return root


@pytest.fixture(autouse=True)
def default_templates(monkeypatch):
    """Never pick up a template override from the developer's environment."""
    monkeypatch.delenv(TEMPLATES_ENV_VAR, raising=False)


@pytest.fixture
def phoenix_project(tmp_path):
    """A standard single-app Phoenix project named my_app."""
    return write_project(tmp_path / "my_app")


@pytest.fixture
def umbrella_project(tmp_path):
    """An umbrella project root."""
    return write_project(tmp_path / "my_umbrella", mix_exs=UMBRELLA_MIX_EXS, config_exs=None)


@pytest.fixture
def template_dir():
    return DEFAULT_TEMPLATE_DIR

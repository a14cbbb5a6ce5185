"""phx-gen-storybook - scaffold a component storybook into a Phoenix project."""

__version__ = "0.1.0"

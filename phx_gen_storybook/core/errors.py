"""Errors raised by the storybook generator."""


class StorybookGenError(Exception):
    """Base class for every fatal generator error."""


class InvalidOptionError(StorybookGenError):
    """Unknown switch or stray positional argument on the command line."""

    def __init__(self, token: str):
        self.token = token
        super().__init__(f"Invalid option: {token}")


class ProjectError(StorybookGenError):
    """The host project cannot be read or has an unsupported layout."""


class UmbrellaProjectError(ProjectError):
    def __init__(self):
        super().__init__(
            "umbrella projects are not supported.\n"
            "phx-gen-storybook must be invoked from within your *_web application root directory"
        )


class TemplateNotFoundError(StorybookGenError):
    """A template named by the manifest is missing or unreadable."""


class ManifestError(StorybookGenError):
    """The file mapping manifest is malformed."""


class FileEmitError(StorybookGenError):
    """A destination file could not be written."""


class TemplateRenderError(StorybookGenError):
    """A renderable template failed to render with the substitution context."""

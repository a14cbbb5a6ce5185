"""Non-destructive file creation for generated files."""
from enum import Enum
from pathlib import Path
from typing import Callable, Optional

from rich.console import Console

from phx_gen_storybook.cli_support import confirm_action, print_action
from phx_gen_storybook.core.errors import FileEmitError
from phx_gen_storybook.core.logger import get_logger

logger = get_logger(__name__)


class CreateResult(str, Enum):
    CREATED = "created"
    IDENTICAL = "identical"
    OVERWRITTEN = "overwritten"
    SKIPPED = "skipped"


def create_file(
    path: Path,
    content: bytes,
    console: Console,
    display_path: Optional[str] = None,
    force: bool = False,
    confirm: Callable[[str], bool] = confirm_action,
) -> CreateResult:
    """Write ``content`` to ``path`` without silently clobbering anything.

    Identical files are left alone, conflicting files are only replaced after
    the user agrees (or with ``force``).

    Raises:
        FileEmitError: If the file or its parent directories cannot be written
    """
    shown = display_path or str(path)

    if path.exists():
        try:
            current = path.read_bytes()
        except OSError as e:
            raise FileEmitError(f"Cannot read existing file {shown}: {e}") from e

        if current == content:
            print_action(console, "identical", shown, color="cyan")
            return CreateResult.IDENTICAL

        if not force and not confirm(f"{shown} already exists, overwrite?"):
            print_action(console, "skipping", shown, color="yellow")
            logger.debug(f"Kept existing {path}")
            return CreateResult.SKIPPED

        result = CreateResult.OVERWRITTEN
        print_action(console, "overwriting", shown, color="yellow")
    else:
        result = CreateResult.CREATED
        print_action(console, "creating", shown)

    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_bytes(content)
    except OSError as e:
        raise FileEmitError(f"Cannot write {shown}: {e}") from e

    logger.debug(f"Wrote {len(content)} bytes to {path}")
    return result

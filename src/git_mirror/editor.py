import subprocess
from pathlib import Path
from typing import IO

import click

from git_mirror.constants import EDITOR_EXECUTABLE, EDITOR_NAME, ERR_EDITOR_FAILED
from git_mirror.errors import EditorError
from git_mirror.git import find_executable


def open_in_editor(
    local_path: Path, dry_run: bool = False, file: IO[str] | None = None
) -> None:
    """Open local_path in VS Code using the `code` command-line tool."""
    if dry_run:
        click.echo(f"Dry run: open {EDITOR_NAME} at {local_path}", file=file)
        return

    code = find_executable(EDITOR_EXECUTABLE)
    result = subprocess.run([code, str(local_path)])
    if result.returncode != 0:
        raise EditorError(
            ERR_EDITOR_FAILED.format(name=EDITOR_EXECUTABLE, status=result.returncode)
        )
    click.echo(f"Opened {EDITOR_NAME} at {local_path}", file=file)

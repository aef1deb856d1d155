import shutil
import subprocess
from pathlib import Path
from typing import IO

import click

from git_mirror.constants import (
    ERR_EXECUTABLE_NOT_FOUND,
    GIT_DIR,
    GIT_EXECUTABLE,
)
from git_mirror.errors import ExecutableNotFoundError
from git_mirror.remote import strip_credentials


def find_executable(name: str) -> str:
    """Locate an executable on PATH."""
    path = shutil.which(name)
    if path is None:
        raise ExecutableNotFoundError(ERR_EXECUTABLE_NOT_FOUND.format(name=name))
    return path


def run_git(*args: str) -> subprocess.CompletedProcess[str]:
    """Run a git command, raising CalledProcessError on failure."""
    cmd = [find_executable(GIT_EXECUTABLE), *args]
    return subprocess.run(cmd, text=True, check=True)


def repo_exists(local_path: Path) -> bool:
    """Check if the path already holds a git checkout."""
    return (local_path / GIT_DIR).is_dir()


def clone_repo(
    repo: str, local_path: Path, dry_run: bool = False, file: IO[str] | None = None
) -> None:
    """Clone the repository into local_path, creating parent directories.

    Args:
        repo: Remote identifier passed to `git clone` unchanged.
        local_path: Destination directory.
        dry_run: Only print the command that would be run.
        file: Where progress is written, defaults to stdout.
    """
    shown = strip_credentials(repo)
    if dry_run:
        click.echo(f"Dry run: git clone {shown} {local_path}", file=file)
        return

    local_path.parent.mkdir(parents=True, exist_ok=True)
    run_git("clone", repo, str(local_path))
    click.secho(
        f"Repository cloned successfully to {local_path}", fg="green", file=file
    )


def fetch_repo(
    local_path: Path, dry_run: bool = False, file: IO[str] | None = None
) -> None:
    """Fetch all remotes of an existing checkout, pruning deleted branches."""
    if dry_run:
        click.echo(f"Dry run: git -C {local_path} fetch --all --prune", file=file)
        return

    run_git("-C", str(local_path), "fetch", "--all", "--prune")
    click.secho(f"Fetched repository at {local_path}", fg="green", file=file)

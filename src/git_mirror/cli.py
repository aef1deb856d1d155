import os
import subprocess

import click

from git_mirror.config import build_local_path, get_mirror_root
from git_mirror.constants import (
    CD_COMMAND_FMT,
    CI_ENV_VAR,
    ERR_BUILD_PATH,
    ERR_CLONE_FAILED,
    ERR_FETCH_FAILED,
    ERR_GIT_STATUS,
    MSG_CD_HINT,
    MSG_DRY_RUN_BANNER,
    MSG_OPEN_PROMPT,
    WARN_EDITOR_FAILED,
)
from git_mirror.editor import open_in_editor
from git_mirror.errors import GitMirrorError
from git_mirror.git import clone_repo, fetch_repo, repo_exists
from git_mirror.remote import strip_credentials


@click.command()
@click.argument("repo")
@click.option(
    "--root",
    "-r",
    default=None,
    help="Root directory where projects are stored "
    "(default: $GIT_MIRROR_ROOT or ~/Projects).",
)
@click.option(
    "--full-host",
    is_flag=True,
    help="Use the full host domain in the local path (github.com, not github).",
)
@click.option(
    "--print-cd",
    is_flag=True,
    help="Only print a shell-friendly cd command for the local path.",
)
@click.option("--dry-run", is_flag=True, help="Show commands without executing.")
@click.option(
    "--open-vs-code/--no-open-vs-code",
    "open_vs_code",
    default=None,
    help="Open (or do not open) the repository in VS Code without asking.",
)
@click.option("--no-prompt", is_flag=True, help="Disable interactive prompts.")
@click.version_option(package_name="git-mirror")
def main(
    repo: str,
    root: str | None = None,
    full_host: bool = False,
    print_cd: bool = False,
    dry_run: bool = False,
    open_vs_code: bool | None = None,
    no_prompt: bool = False,
) -> None:
    """Clone or fetch a git repository into a Projects directory.

    \b
    Examples:
        git-mirror git@github.com:user/repo.git
        git-mirror https://gitlab.com/group/sub/repo.git --full-host
        cd "$(git-mirror --print-cd github.com/user/repo)"
    """
    try:
        local = build_local_path(root or get_mirror_root(), repo, full_host)
    except GitMirrorError as exc:
        raise click.ClickException(ERR_BUILD_PATH.format(error=exc)) from exc

    if print_cd:
        click.echo(CD_COMMAND_FMT.format(path=local))
        return

    if dry_run:
        click.secho(MSG_DRY_RUN_BANNER, fg="black", bg="yellow", err=True)

    cloning = not repo_exists(local)
    try:
        if cloning:
            shown = click.style(strip_credentials(repo), fg="green")
            click.echo(
                f"Cloning repository: {shown} to {click.style(str(local), fg='green')}"
            )
            clone_repo(repo, local, dry_run=dry_run)
        else:
            fetch_repo(local, dry_run=dry_run)
    except (GitMirrorError, subprocess.CalledProcessError, OSError) as exc:
        error = (
            ERR_GIT_STATUS.format(status=exc.returncode)
            if isinstance(exc, subprocess.CalledProcessError)
            else exc
        )
        template = ERR_CLONE_FAILED if cloning else ERR_FETCH_FAILED
        raise click.ClickException(template.format(error=error)) from exc

    if _should_open_editor(open_vs_code, no_prompt):
        try:
            open_in_editor(local, dry_run=dry_run)
        except (GitMirrorError, OSError) as exc:
            click.secho(WARN_EDITOR_FAILED.format(error=exc), fg="yellow", err=True)

    click.secho(MSG_CD_HINT.format(path=local), fg="cyan")
    if cloning:
        # Bare path for shell aliases like `git-mirror ... && cd $_`
        click.echo(str(local))


def _should_open_editor(
    open_vs_code: bool | None, no_prompt: bool, default: bool = True
) -> bool:
    """Decide whether to open the editor; explicit flags win over prompting."""
    if open_vs_code is not None:
        return open_vs_code
    if CI_ENV_VAR in os.environ:
        return False
    if no_prompt:
        return default
    try:
        return click.confirm(MSG_OPEN_PROMPT, default=default)
    except click.Abort:
        # stdin closed or interrupted
        return default


if __name__ == "__main__":
    main()

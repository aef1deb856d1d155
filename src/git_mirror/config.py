import os
from pathlib import Path

from git_mirror.constants import (
    DEFAULT_MIRROR_ROOT,
    ERR_NO_HOME,
    HOME_PREFIX,
    PATH_SEPARATOR,
    ROOT_ENV_VAR,
)
from git_mirror.errors import HomeDirectoryUnavailableError
from git_mirror.remote import HostMode, classify_remote, host_label


def get_mirror_root() -> str:
    """Get the unexpanded root directory, defaulting to ~/Projects."""
    return os.environ.get(ROOT_ENV_VAR, DEFAULT_MIRROR_ROOT)


def get_home_dir() -> Path | None:
    """Get the current user's home directory, or None if it cannot be found."""
    try:
        return Path.home()
    except (RuntimeError, KeyError):
        return None


def expand_root(root: str) -> Path:
    """Expand a leading `~` in the root directory.

    Every leading `~` is replaced by the home directory (`~`, `~/x` and
    `~~/x` all start at home) and the separator after it is dropped. Roots
    without a leading `~` are used verbatim without looking up the home
    directory.

    Raises:
        HomeDirectoryUnavailableError: If expansion is needed and no home
            directory is available.
    """
    if not root.startswith(HOME_PREFIX):
        return Path(root)

    home = get_home_dir()
    if home is None:
        raise HomeDirectoryUnavailableError(ERR_NO_HOME)

    rest = root.lstrip(HOME_PREFIX).lstrip(PATH_SEPARATOR)
    return home / rest if rest else home


def build_local_path(root: str, repo: str, full_host: bool = False) -> Path:
    """Build the local checkout path for a remote repository.

    The result is `<root>/<host>/<owner>[/<group>...]/<repo>` where every
    path segment of the remote becomes its own path component. Nothing on
    disk is read or created.

    Args:
        root: Root directory, optionally starting with `~`.
        repo: Remote identifier (URL, scp-like or plain host/path).
        full_host: Use the full host domain (`github.com`) instead of the
            short label (`github`).

    Examples:
        ("~/Projects", "https://github.com/user/repo.git")
            -> ~/Projects/github/user/repo
        ("/tmp/work", "git@gitlab.com:org/sub/repo.git", full_host=True)
            -> /tmp/work/gitlab.com/org/sub/repo
    """
    local = expand_root(root)
    remote = classify_remote(repo)
    mode = HostMode.FULL if full_host else HostMode.SHORT
    local = local / host_label(remote, mode)
    for segment in remote.segments:
        local = local / segment
    return local

"""Exceptions raised by git-mirror.

Library modules raise these; only the CLI turns them into user-facing
failures.
"""


class GitMirrorError(Exception):
    """Base class for git-mirror errors."""


class InvalidRemoteError(GitMirrorError, ValueError):
    """The repository identifier matches none of the supported forms.

    The message never contains credentials embedded in the identifier.
    """


class HomeDirectoryUnavailableError(GitMirrorError, RuntimeError):
    """The root needs `~` expansion but no home directory can be determined."""


class ExecutableNotFoundError(GitMirrorError, RuntimeError):
    """A required executable (git, code) is not on PATH."""


class EditorError(GitMirrorError, RuntimeError):
    """The editor exited with a non-zero status."""

"""Constants for git-mirror - no magic strings/numbers allowed elsewhere."""

# Workspace root
DEFAULT_MIRROR_ROOT = "~/Projects"
ROOT_ENV_VAR = "GIT_MIRROR_ROOT"
HOME_PREFIX = "~"

# Remote identifier parsing
GIT_PLUS_PREFIX = "git+"
GIT_SUFFIX = ".git"
GIT_DIR = ".git"
HOST_LABEL_SEPARATOR = "."
PATH_SEPARATOR = "/"
SCP_USER_SEPARATOR = "@"
SCP_PATH_SEPARATOR = ":"
RESERVED_SEGMENTS = frozenset({".", ".."})
USERINFO_PATTERN = r"^(?P<scheme>[A-Za-z][A-Za-z0-9+.\-]*://)?[^/]*@"

# Executables
GIT_EXECUTABLE = "git"
EDITOR_EXECUTABLE = "code"
EDITOR_NAME = "VS Code"

# Environment
CI_ENV_VAR = "CI"

# Error messages
ERR_INVALID_REMOTE = "Invalid Git repository URL: {repo}"
ERR_NO_HOME = "Couldn't find home directory"
ERR_EXECUTABLE_NOT_FOUND = "`{name}` executable not found in PATH"
ERR_EDITOR_FAILED = "`{name}` failed with status: {status}"
ERR_BUILD_PATH = "Could not build local path: {error}"
ERR_CLONE_FAILED = "Could not clone repo: {error}"
ERR_FETCH_FAILED = "Could not fetch repo: {error}"
ERR_GIT_STATUS = "git exited with status {status}"
WARN_EDITOR_FAILED = "Warning: failed to open VS Code: {error}"

# User-facing messages
MSG_DRY_RUN_BANNER = "Dry run mode ... none of the commands will actually be run."
MSG_OPEN_PROMPT = "Open the repository in VS Code?"
MSG_CD_HINT = 'To move to the project\'s directory, please run: "cd {path}"'
CD_COMMAND_FMT = 'cd "{path}"'

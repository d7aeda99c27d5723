"""Shared constants used across the application."""

# Git Constants
# -------------

DEFAULT_GIT_BRANCH = "main"
"""Branch that synced resumes are pushed to."""

DEFAULT_GIT_REMOTE = "origin"
"""Remote that synced resumes are pushed to."""

DEFAULT_COMMIT_MESSAGE_TEMPLATE = "Update resume\n\nAuto-synced from {{ source_file }}"
"""Jinja2 template for the commit message. Rendered with `source_file`, `dest_file` and `git_branch`."""

# File Settings
# -------------

DEFAULT_LOG_FILE_RELATIVE_PATH = "scripts/resume-sync.log"
"""Default log file location, relative to the project directory."""

LOCK_FILE_SUFFIX = ".lock"
"""Suffix appended to the log file path to derive the default lock file."""

DEFAULT_LOCK_TIMEOUT = 600.0
"""Seconds a run waits for a concurrent run to release the lock."""

DIGEST_CHUNK_SIZE = 1024 * 1024
"""Bytes read per chunk when computing content digests."""

# Deployment Settings
# -------------------

DEFAULT_VERCEL_BIN = "vercel"
"""Vercel CLI executable."""

DEFAULT_NVM_DIR = "~/.nvm"
"""Where nvm lives when the Vercel CLI was installed through an nvm-managed npm."""

# Notification Settings
# ---------------------

NOTIFICATION_TITLE = "Resume Sync"
"""Title shown on desktop notifications."""

LOG_TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"
"""Timestamp format used for log file lines."""

COMMAND_NOT_FOUND_RETURNCODE = 127
"""Return code reported when an executable cannot be found, matching the shell convention."""

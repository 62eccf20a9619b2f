"""Data models and constants for gl-api."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Union

# ---------------------------------------------------------------------------
# Constants
# ---------------------------------------------------------------------------

ENV_URL = "GITLAB_API_V3_URL"
ENV_TOKEN = "GITLAB_API_V3_TOKEN"
DEFAULT_FORMAT = "yaml"
PER_PAGE = 100

# Retry configuration
DEFAULT_MAX_RETRIES = 3
RETRY_BACKOFF_FACTOR = 0.5  # seconds
RETRYABLE_STATUS_CODES = {429, 500, 502, 503, 504}

# GitLab API v3 visibility level constants
VISIBILITY_LEVELS = {
    "private": 0,
    "internal": 10,
    "public": 20,
}

# GitLab API v3 access level constants
ACCESS_LEVELS = {
    "guest": 10,
    "reporter": 20,
    "developer": 30,
    "master": 40,
    "owner": 50,
}

# Literal flags that set a reserved parameter to one of the constants above
VISIBILITY_LEVEL_FLAGS = {f"--visibility-level-{name}": value for name, value in VISIBILITY_LEVELS.items()}
ACCESS_LEVEL_FLAGS = {f"--access-level-{name}": value for name, value in ACCESS_LEVELS.items()}

ParamValue = Union[int, str]


# ---------------------------------------------------------------------------
# Data Classes
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class Invocation:
    """A parsed command line: top-level options plus the method call to make."""

    method: str = ""
    args: tuple[str, ...] = ()
    params: dict[str, ParamValue] = field(default_factory=dict)
    url: str | None = None
    token: str | None = None
    fetch_all: bool = False
    format: str = DEFAULT_FORMAT
    verbosity: int = 0
    help: bool = False


@dataclass(frozen=True)
class ApiMethod:
    """A remote operation: HTTP verb plus a path template with ``:name`` placeholders."""

    name: str
    verb: str
    path: str
    paginated: bool = False

    @property
    def placeholders(self) -> list[str]:
        return [part[1:] for part in self.path.split("/") if part.startswith(":")]

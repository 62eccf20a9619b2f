"""Command line parsing: top-level options, then generic method parameters."""

from __future__ import annotations

import argparse
import re
from typing import Sequence

from gl_api.errors import ArgumentError
from gl_api.models import ACCESS_LEVEL_FLAGS, DEFAULT_FORMAT, VISIBILITY_LEVEL_FLAGS, Invocation, ParamValue

# --[no-]key[=value]
GENERIC_FLAG_RE = re.compile(r"^--(?P<negated>no-)?(?P<key>[^=]+?)(?:=(?P<value>.*))?$", re.DOTALL)

EPILOG = """
Method parameters:
    --key=value     Pass key=value to the method (dashes in key become underscores)
    --key           Pass key=1
    --no-key        Pass key=0

    --visibility-level-(private|internal|public)
    --access-level-(guest|reporter|developer|master|owner)
                    Set visibility_level / access_level to the GitLab constant

Environment:
    GITLAB_API_V3_URL   - GitLab API v3 URL, used when --url is not given
    GITLAB_API_V3_TOKEN - Private token, used when --token is not given

Examples:
    # Show a single project
    gl-api project 42

    # Create a user
    gl-api create_user --email=jdoe@example.com --username=jdoe --name="J Doe" --password=s3cret --admin

    # List every project across all pages, as JSON
    gl-api projects --all --format=json

    # Add a developer to a project
    gl-api add_project_member 42 --user-id=7 --access-level-developer
"""


class _OptionParser(argparse.ArgumentParser):
    """ArgumentParser that raises instead of printing usage and exiting."""

    def error(self, message: str):
        raise ArgumentError(message)


def build_option_parser() -> argparse.ArgumentParser:
    parser = _OptionParser(
        prog="gl-api",
        usage="%(prog)s <method> [<arg> ...] [--<flag>[=<value>] ...]",
        description="Call any GitLab API v3 method by name and print the result.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=EPILOG,
        add_help=False,
        allow_abbrev=False,
    )
    parser.add_argument("--url", default=None, help="GitLab API v3 URL (default: from GITLAB_API_V3_URL env)")
    parser.add_argument("--token", default=None, help="Private token (default: from GITLAB_API_V3_TOKEN env)")
    parser.add_argument(
        "--all", action="store_true", dest="fetch_all", help="Fetch every page of a paginated method"
    )
    parser.add_argument("--format", default=DEFAULT_FORMAT, help=f"Output format (default: {DEFAULT_FORMAT})")
    parser.add_argument("--verbose", action="count", default=0, help="More logging (repeatable)")
    parser.add_argument("--quiet", action="count", default=0, help="Less logging (repeatable)")
    parser.add_argument("--help", action="store_true", help="Show this help and exit")
    return parser


def parse_params(tokens: Sequence[str]) -> tuple[list[str], dict[str, ParamValue]]:
    """Split leftover tokens into positional arguments and method parameters.

    Visibility and access level literals map onto their reserved keys; any other
    ``--[no-]key[=value]`` token becomes ``params[key]`` with dashes turned into
    underscores. Repeated keys keep the last value.
    """
    positional: list[str] = []
    params: dict[str, ParamValue] = {}

    for token in tokens:
        if token in VISIBILITY_LEVEL_FLAGS:
            params["visibility_level"] = VISIBILITY_LEVEL_FLAGS[token]
            continue
        if token in ACCESS_LEVEL_FLAGS:
            params["access_level"] = ACCESS_LEVEL_FLAGS[token]
            continue

        match = GENERIC_FLAG_RE.match(token)
        if match is None:
            positional.append(token)
            continue

        key = match.group("key").replace("-", "_")
        if match.group("value") is not None:
            params[key] = match.group("value")
        elif match.group("negated"):
            params[key] = 0
        else:
            params[key] = 1

    return positional, params


def parse_invocation(argv: Sequence[str]) -> Invocation:
    """Parse a raw argument list into an Invocation.

    Raises ArgumentError for malformed top-level flags. An empty method name is
    left for the caller to reject.
    """
    options, remainder = build_option_parser().parse_known_args(list(argv))
    positional, params = parse_params(remainder)

    method = positional[0] if positional else ""
    return Invocation(
        method=method,
        args=tuple(positional[1:]),
        params=params,
        url=options.url,
        token=options.token,
        fetch_all=options.fetch_all,
        format=options.format,
        verbosity=options.verbose - options.quiet,
        help=options.help,
    )

"""CLI entry point for gl-api."""

from __future__ import annotations

import logging
import os
import sys
from typing import Sequence

from gl_api.client import GitLabClient
from gl_api.dispatch import dispatch
from gl_api.errors import ArgumentError, GlApiError, MissingMethodError
from gl_api.formats import get_format
from gl_api.logging_utils import setup_logging
from gl_api.methods import get_method_registry
from gl_api.models import ENV_TOKEN, ENV_URL, Invocation
from gl_api.parser import build_option_parser, parse_invocation


def build_help() -> str:
    """Usage text followed by the list of callable methods."""
    lines = [build_option_parser().format_help().rstrip(), "", "Methods:"]
    registry = get_method_registry()
    for name in sorted(registry):
        api_method = registry[name]
        args = " ".join(f"<{placeholder}>" for placeholder in api_method.placeholders)
        suffix = "  (supports --all)" if api_method.paginated else ""
        lines.append(f"    {name} {args}".rstrip() + suffix)
    return "\n".join(lines) + "\n"


def run(invocation: Invocation) -> str | None:
    """Dispatch a parsed invocation and return the rendered output, or None when there is no result."""
    logger = logging.getLogger("gl-api")

    if not invocation.method:
        raise MissingMethodError("No method given. Run 'gl-api help' for usage.")

    # Resolve the format up front so a bad name never reaches the network
    output_format = get_format(invocation.format)

    url = invocation.url or os.environ.get(ENV_URL)
    token = invocation.token or os.environ.get(ENV_TOKEN)
    if not url:
        raise ArgumentError(f"No GitLab API URL: pass --url or set {ENV_URL}.")

    client = GitLabClient(url, token)
    result = dispatch(
        client,
        invocation.method,
        invocation.args,
        invocation.params,
        fetch_all=invocation.fetch_all,
    )

    if result is None:
        logger.info(f"{invocation.method} returned no result")
        return None
    return output_format.render(result)


def main(argv: Sequence[str] | None = None) -> int:
    argv = sys.argv[1:] if argv is None else list(argv)
    logger = setup_logging()

    try:
        invocation = parse_invocation(argv)
        logger = setup_logging(invocation.verbosity)

        if invocation.help or invocation.method == "help":
            sys.stdout.write(build_help())
            return 0

        output = run(invocation)
    except GlApiError as e:
        logger.critical(str(e), exc_info=logger.isEnabledFor(logging.DEBUG))
        return 1
    except KeyboardInterrupt:
        logger.info("Interrupted by user")
        return 130

    if output is not None:
        sys.stdout.write(output)
    return 0


if __name__ == "__main__":
    sys.exit(main())

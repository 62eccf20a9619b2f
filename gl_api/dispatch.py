"""Invoke a named API method on the client."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, Mapping, Sequence

import requests

from gl_api.errors import OperationError

if TYPE_CHECKING:
    from gl_api.client import GitLabClient

logger = logging.getLogger("gl-api")


def dispatch(
    client: GitLabClient,
    method: str,
    args: Sequence[str] = (),
    params: Mapping[str, Any] | None = None,
    fetch_all: bool = False,
) -> Any:
    """
    Call ``method`` on the client and return its result.

    With ``fetch_all`` the method goes through the client's paginator and every
    page is drained before returning. Otherwise the params mapping is passed as
    a trailing argument, and only when it is not empty. Any failure reported by
    the client surfaces as OperationError with the client's message, followed
    by the response body for HTTP errors.
    """
    try:
        if fetch_all:
            if params:
                logger.warning(f"Ignoring parameters with --all: {', '.join(sorted(params))}")
            logger.info(f"Fetching all pages of {method}")
            return client.paginator(method, *args).all()

        call_args: list[Any] = list(args)
        if params:
            call_args.append(dict(params))
        logger.info(f"Calling {method}")
        return client.invoke(method, *call_args)
    except requests.HTTPError as e:
        body = e.response.text.strip() if e.response is not None else ""
        raise OperationError(f"{e}: {body[:500]}" if body else str(e)) from e
    except requests.RequestException as e:
        raise OperationError(str(e)) from e

"""
gl-api: A command-line front end for the GitLab REST API v3.

Maps ``gl-api <method> [args...] [--key=value...]`` onto the same-named API
method, then prints the result as YAML (default), JSON or a Python literal.

Environment:
    GITLAB_API_V3_URL   - GitLab API v3 URL (required unless --url is given)
    GITLAB_API_V3_TOKEN - Private token (optional unless --token is given)
"""

from gl_api.cli import main

__version__ = "0.1.0"
__all__ = ["main", "__version__"]

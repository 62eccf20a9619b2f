"""End-to-end tests for the gl-api command line."""

import json
import sys
from pathlib import Path

import pytest
import responses
import yaml

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

# Constants
MOCK_API_URL = "https://gitlab.example.com/api/v3"

from gl_api.cli import build_help, main


class TestOutput:
    """Successful invocations write the rendered result to stdout only."""

    @responses.activate
    def test_default_format_is_yaml(self, api_env, capsys, sample_project):
        responses.add(responses.GET, f"{MOCK_API_URL}/projects/42", json=sample_project)

        assert main(["project", "42"]) == 0

        out, err = capsys.readouterr()
        assert out.startswith("---")
        assert yaml.safe_load(out) == sample_project
        assert err == ""

    @responses.activate
    def test_json_format(self, api_env, capsys, sample_project):
        responses.add(responses.GET, f"{MOCK_API_URL}/projects/42", json=sample_project)

        assert main(["project", "42", "--format=json"]) == 0

        assert json.loads(capsys.readouterr().out) == sample_project

    @responses.activate
    def test_python_format(self, api_env, capsys):
        responses.add(responses.GET, f"{MOCK_API_URL}/user", json={"id": 7, "is_admin": True})

        assert main(["current_user", "--format=python"]) == 0

        assert capsys.readouterr().out == "{'id': 7, 'is_admin': True}\n"

    @responses.activate
    def test_no_result_prints_nothing(self, api_env, capsys):
        responses.add(responses.DELETE, f"{MOCK_API_URL}/projects/42", status=204)

        assert main(["delete_project", "42"]) == 0

        assert capsys.readouterr().out == ""

    @responses.activate
    def test_empty_list_is_printed(self, api_env, capsys):
        responses.add(responses.GET, f"{MOCK_API_URL}/users", json=[])

        assert main(["users"]) == 0

        out = capsys.readouterr().out
        assert out != ""
        assert yaml.safe_load(out) == []

    @responses.activate
    def test_all_concatenates_pages(self, api_env, capsys):
        responses.add(responses.GET, f"{MOCK_API_URL}/projects", json=[{"id": 1}], headers={"X-Total-Pages": "2"})
        responses.add(responses.GET, f"{MOCK_API_URL}/projects", json=[{"id": 2}], headers={"X-Total-Pages": "2"})

        assert main(["projects", "--all", "--format=json"]) == 0

        assert json.loads(capsys.readouterr().out) == [{"id": 1}, {"id": 2}]
        assert len(responses.calls) == 2

    @responses.activate
    def test_params_reach_request_body(self, api_env, capsys):
        responses.add(responses.POST, f"{MOCK_API_URL}/projects", json={"id": 43}, status=201)

        assert main(["create_project", "--name=infra", "--no-wiki-enabled", "--visibility-level-internal"]) == 0

        body = json.loads(responses.calls[0].request.body)
        assert body == {"name": "infra", "wiki_enabled": 0, "visibility_level": 10}

    @responses.activate
    def test_verbose_logs_to_stderr(self, api_env, capsys):
        responses.add(responses.GET, f"{MOCK_API_URL}/users", json=[])

        assert main(["users", "--verbose", "--verbose"]) == 0

        out, err = capsys.readouterr()
        assert "[INFO   ] Calling users" in err
        assert "[DEBUG  ] GET" in err
        assert "Calling users" not in out


class TestConfiguration:
    """URL and token resolution."""

    @responses.activate
    def test_env_token_is_sent(self, api_env, capsys):
        responses.add(responses.GET, f"{MOCK_API_URL}/users", json=[])

        main(["users"])

        assert responses.calls[0].request.headers["PRIVATE-TOKEN"] == "env-token"

    @responses.activate
    def test_flags_beat_environment(self, api_env, capsys):
        responses.add(responses.GET, "https://other.example.com/api/v3/users", json=[])

        assert main(["users", "--url=https://other.example.com/api/v3", "--token=flag-token"]) == 0

        assert responses.calls[0].request.headers["PRIVATE-TOKEN"] == "flag-token"

    def test_missing_url(self, monkeypatch, capsys):
        monkeypatch.delenv("GITLAB_API_V3_URL", raising=False)

        assert main(["users"]) == 1

        out, err = capsys.readouterr()
        assert out == ""
        assert "GITLAB_API_V3_URL" in err


class TestErrors:
    """Every failure exits 1 with a message on stderr and nothing on stdout."""

    @responses.activate
    def test_unknown_format(self, api_env, capsys):
        assert main(["users", "--format=bogus"]) == 1

        out, err = capsys.readouterr()
        assert out == ""
        assert "[CRITICAL] Unknown format 'bogus'" in err
        assert len(responses.calls) == 0

    def test_missing_method(self, api_env, capsys):
        assert main([]) == 1

        out, err = capsys.readouterr()
        assert out == ""
        assert "No method given" in err

    def test_only_flags_is_missing_method(self, api_env, capsys):
        assert main(["--admin", "--format=json"]) == 1
        assert "No method given" in capsys.readouterr().err

    def test_malformed_top_level_flag(self, api_env, capsys):
        assert main(["users", "--format"]) == 1
        assert "--format" in capsys.readouterr().err

    def test_unknown_method(self, api_env, capsys):
        assert main(["frobnicate"]) == 1

        out, err = capsys.readouterr()
        assert out == ""
        assert "Unknown method: frobnicate" in err

    @responses.activate
    def test_http_error(self, api_env, capsys):
        responses.add(responses.GET, f"{MOCK_API_URL}/projects/404", status=404, json={"message": "404 Not Found"})

        assert main(["project", "404"]) == 1

        out, err = capsys.readouterr()
        assert out == ""
        assert "404 Client Error" in err

    @responses.activate
    def test_remote_reason_reaches_stderr(self, api_env, capsys):
        responses.add(
            responses.POST,
            f"{MOCK_API_URL}/users",
            status=400,
            json={"message": {"email": ["has already been taken"]}},
        )

        assert main(["create_user", "--email=a@b.com"]) == 1

        out, err = capsys.readouterr()
        assert out == ""
        assert "400 Client Error" in err
        assert "has already been taken" in err

    @responses.activate
    def test_all_on_single_resource(self, api_env, capsys):
        assert main(["project", "42", "--all"]) == 1
        assert "does not return a paginated list" in capsys.readouterr().err


class TestHelp:
    """help / --help print usage and the method list."""

    @pytest.mark.parametrize("argv", [["help"], ["--help"], ["users", "--help"]])
    def test_help(self, argv, monkeypatch, capsys):
        monkeypatch.delenv("GITLAB_API_V3_URL", raising=False)

        assert main(argv) == 0

        out = capsys.readouterr().out
        assert out.startswith("usage: gl-api <method>")
        assert "Methods:" in out

    def test_help_lists_methods_with_arguments(self):
        text = build_help()
        assert "    project <project_id>\n" in text
        assert "    projects  (supports --all)\n" in text
        assert "GITLAB_API_V3_TOKEN" in text

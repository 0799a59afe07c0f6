from unittest.mock import Mock, patch

import pytest

from github_client import FetchError, GithubClient, Repo
from server import (
    FETCH_ERROR_MESSAGE,
    _about_impl,
    _home_impl,
    create_app,
    run,
)
from config import Settings


class StubGithubClient(GithubClient):
    """Returns a fixed list of repositories, unsorted."""

    def __init__(self, repos):
        self.repos = repos
        self.requested = []

    def get_repos(self, username):
        self.requested.append(username)
        return list(self.repos)


class FailingGithubClient(GithubClient):
    def get_repos(self, username):
        raise FetchError("GitHub API error: 503 Service Unavailable")


@pytest.fixture
def stub_client():
    return StubGithubClient([
        Repo(name="TestRepo2", url="https://github.com/user/testrepo2",
             description="Test Description 2", stars=5),
        Repo(name="TestRepo1", url="https://github.com/user/testrepo1",
             description="Test Description 1", stars=10),
    ])


def test_home_lists_repos_by_stars(stub_client):
    app = create_app(stub_client, username="someuser")

    response = app.test_client().get("/")
    body = response.get_data(as_text=True)

    assert response.status_code == 200
    assert response.headers["Content-Type"] == "text/html; charset=utf-8"
    assert body.index("TestRepo1") < body.index("TestRepo2")
    assert stub_client.requested == ["someuser"]


def test_home_returns_500_when_fetch_fails():
    app = create_app(FailingGithubClient())

    response = app.test_client().get("/")

    assert response.status_code == 500
    assert response.headers["Content-Type"] == "text/plain; charset=utf-8"
    assert response.get_data(as_text=True) == FETCH_ERROR_MESSAGE
    assert "503" not in response.get_data(as_text=True)


def test_home_with_no_repos_renders_zero_cards():
    app = create_app(StubGithubClient([]))

    response = app.test_client().get("/")

    assert response.status_code == 200
    assert 'class="repo-card"' not in response.get_data(as_text=True)


@patch("github_client.requests.get")
def test_home_end_to_end_with_paginated_api(mock_get):
    first_page = Mock(status_code=200, reason="OK")
    first_page.json.return_value = [
        {"name": "TestRepo2", "html_url": "https://github.com/user/testrepo2",
         "description": "Test Description 2", "stargazers_count": 5},
        {"name": "TestRepo1", "html_url": "https://github.com/user/testrepo1",
         "description": "Test Description 1", "stargazers_count": 10},
    ]
    empty_page = Mock(status_code=200, reason="OK")
    empty_page.json.return_value = []
    mock_get.side_effect = [first_page, empty_page]

    response = create_app(username="someuser").test_client().get("/")
    body = response.get_data(as_text=True)

    assert response.status_code == 200
    assert response.headers["Content-Type"] == "text/html; charset=utf-8"
    assert body.index("TestRepo1") < body.index("TestRepo2")
    assert mock_get.call_count == 2


@patch("github_client.requests.get")
def test_home_end_to_end_upstream_error(mock_get):
    mock_get.return_value = Mock(status_code=403, reason="Forbidden", text="rate limited")

    response = create_app().test_client().get("/")

    assert response.status_code == 500
    assert response.get_data(as_text=True)


def test_about_always_succeeds():
    app = create_app(FailingGithubClient())

    response = app.test_client().get("/about")

    assert response.status_code == 200
    assert response.headers["Content-Type"] == "text/html; charset=utf-8"
    assert "About Aum Patel" in response.get_data(as_text=True)


def test_only_get_is_routed(stub_client):
    client = create_app(stub_client).test_client()

    assert client.post("/").status_code == 405
    assert client.post("/about").status_code == 405
    assert client.get("/missing").status_code == 404


def test_home_impl_ranks_before_rendering(stub_client):
    html = _home_impl(stub_client, "someuser")

    assert html.index("TestRepo1") < html.index("TestRepo2")


def test_home_impl_propagates_fetch_error():
    with pytest.raises(FetchError):
        _home_impl(FailingGithubClient(), "someuser")


def test_about_impl_contains_heading():
    assert "About Aum Patel" in _about_impl()


@patch("server.Flask.run")
def test_run_serves_with_settings(mock_run):
    settings = Settings(username="someuser", host="127.0.0.1", port=9000,
                        api_url="https://api.example.com", timeout=4.0)

    run(settings)

    mock_run.assert_called_once_with(host="127.0.0.1", port=9000, threaded=True)


@patch("github_client.requests.get")
def test_home_non_string_url_gives_plain_text_500(mock_get):
    bad_page = Mock(status_code=200, reason="OK")
    bad_page.json.return_value = [{"name": "a", "html_url": 5, "stargazers_count": 1}]
    empty_page = Mock(status_code=200, reason="OK")
    empty_page.json.return_value = []
    mock_get.side_effect = [bad_page, empty_page]

    response = create_app(username="someuser").test_client().get("/")

    assert response.status_code == 500
    assert response.headers["Content-Type"] == "text/plain; charset=utf-8"
    assert response.get_data(as_text=True) == FETCH_ERROR_MESSAGE


@patch.dict("os.environ", {"PORTFOLIO_USERNAME": "octocat", "GITHUB_TIMEOUT": "2.5"})
@patch("server.RealGithubClient")
def test_create_app_defaults_come_from_settings(mock_client_cls):
    mock_client = mock_client_cls.return_value
    mock_client.get_repos.return_value = []

    response = create_app().test_client().get("/")

    assert response.status_code == 200
    assert mock_client_cls.call_args.kwargs["timeout"] == 2.5
    mock_client.get_repos.assert_called_once_with("octocat")

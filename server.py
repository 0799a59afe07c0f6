"""
Flask server for the GitHub portfolio.
Serves the repository listing at '/' and the static about page at '/about'.
"""

from flask import Flask

from config import load_settings, logger
from github_client import FetchError, RealGithubClient
from ranking import rank_repos
from renderer import render_about, render_home

HTML_CONTENT_TYPE = "text/html; charset=utf-8"
TEXT_CONTENT_TYPE = "text/plain; charset=utf-8"
FETCH_ERROR_MESSAGE = "Unable to fetch GitHub repos"


# Core implementation functions (testable without the Flask app)
def _home_impl(client, username):
    """
    Fetch, rank and render the repositories of a user.

    Raises:
        FetchError: If the repository list could not be fetched.
    """
    repos = client.get_repos(username)
    return render_home(rank_repos(repos))


def _about_impl():
    return render_about()


def create_app(client=None, username=None):
    """
    Build the Flask application.

    Args:
        client: GithubClient used by the home page. Defaults to the real API
            client configured from load_settings().
        username: GitHub user whose repositories are listed. Defaults to the
            username from load_settings().
    """
    if client is None or username is None:
        settings = load_settings()
        if client is None:
            client = RealGithubClient(api_url=settings.api_url, timeout=settings.timeout)
        if username is None:
            username = settings.username

    app = Flask(__name__)

    @app.route("/", methods=["GET"])
    def home():
        try:
            body = _home_impl(client, username)
        except FetchError as e:
            logger.error(f"Error rendering home page for {username}: {e}")
            return FETCH_ERROR_MESSAGE, 500, {"Content-Type": TEXT_CONTENT_TYPE}
        return body, 200, {"Content-Type": HTML_CONTENT_TYPE}

    @app.route("/about", methods=["GET"])
    def about():
        return _about_impl(), 200, {"Content-Type": HTML_CONTENT_TYPE}

    return app


def run(settings=None):
    """Entry point for the portfolio server. Serves until the process is terminated."""
    if settings is None:
        settings = load_settings()
    client = RealGithubClient(api_url=settings.api_url, timeout=settings.timeout)
    app = create_app(client, settings.username)
    logger.info(f"Server is starting on {settings.host}:{settings.port}...")
    app.run(host=settings.host, port=settings.port, threaded=True)

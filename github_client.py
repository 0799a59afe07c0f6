"""
GitHub API client for fetching a user's public repositories.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass

import requests
from config import GITHUB_API_URL, REQUEST_TIMEOUT, logger

# Maximum allowed by the GitHub API
PER_PAGE = 100

HEADERS = {
    "Accept": "application/vnd.github.v3+json",
    "User-Agent": "github-portfolio-server",
}


class FetchError(Exception):
    """Raised when the repository list cannot be fetched or decoded."""


@dataclass(frozen=True)
class Repo:
    name: str
    url: str
    description: str = ""
    stars: int = 0

    @classmethod
    def from_api(cls, data):
        """Builds a Repo from one element of the GitHub repos response."""
        if not isinstance(data, dict):
            raise FetchError(f"Unexpected repository entry: {data!r}")

        fields = {}
        for field, key in (("name", "name"), ("url", "html_url"), ("description", "description")):
            value = data.get(key)
            if value is None:
                value = ""
            if not isinstance(value, str):
                raise FetchError(f"Field '{key}' must be a string, got {type(value).__name__}")
            fields[field] = value

        stars = data.get("stargazers_count")
        if stars is None:
            stars = 0
        # bool is an int subclass
        if isinstance(stars, bool) or not isinstance(stars, int) or stars < 0:
            raise FetchError(f"Field 'stargazers_count' must be a non-negative integer, got {stars!r}")

        return cls(stars=stars, **fields)


def raw_fetch_user_repos(username, api_url=GITHUB_API_URL, timeout=REQUEST_TIMEOUT):
    """
    Fetch all public repositories owned by a GitHub user.

    Pages are requested until the API returns an empty list. Any failure
    aborts the whole fetch; repositories from earlier pages are discarded.

    Args:
        username (str): The GitHub username.
        api_url (str): Base URL of the GitHub REST API.
        timeout (float): Seconds allowed for each page request.

    Returns:
        list: Repo records in the order the API returned them.

    Raises:
        FetchError: On network errors, non-200 responses or malformed JSON.
    """
    url = f"{api_url.rstrip('/')}/users/{username}/repos"
    all_repos = []
    page = 1

    while True:
        logger.info(f"Fetching repos for {username} - Page {page}")
        try:
            response = requests.get(
                url,
                params={"page": page, "per_page": PER_PAGE},
                headers=HEADERS,
                timeout=timeout,
            )
        except requests.RequestException as e:
            logger.error(f"Network error fetching repos for {username}: {e}")
            raise FetchError(f"Network error: {e}") from e

        if response.status_code != 200:
            status = f"{response.status_code} {response.reason or ''}".strip()
            logger.error(f"GitHub API Error: {status} - {response.text}")
            raise FetchError(f"GitHub API error: {status}")

        try:
            data = response.json()
        except ValueError as e:
            logger.error(f"Malformed JSON on page {page} for {username}: {e}")
            raise FetchError(f"Malformed JSON on page {page}") from e

        if not isinstance(data, list):
            raise FetchError(f"Expected a JSON array on page {page}, got {type(data).__name__}")

        if not data:
            break

        all_repos.extend(Repo.from_api(item) for item in data)
        page += 1

    logger.info(f"Fetched {len(all_repos)} repositories for {username}")
    return all_repos


class GithubClient(ABC):
    """Anything that can list a user's repositories."""

    @abstractmethod
    def get_repos(self, username):
        """Returns a list of Repo records, raising FetchError on failure."""


class RealGithubClient(GithubClient):
    """GithubClient backed by the GitHub REST API."""

    def __init__(self, api_url=GITHUB_API_URL, timeout=REQUEST_TIMEOUT):
        self.api_url = api_url
        self.timeout = timeout

    def get_repos(self, username):
        return raw_fetch_user_repos(username, api_url=self.api_url, timeout=self.timeout)

"""
HTML rendering for the portfolio pages.
All templates are rendered with autoescaping, so repository fields coming
from the GitHub API are escaped before they reach the page.
"""

from urllib.parse import urlparse

from jinja2 import DictLoader, Environment

from templates import CERTIFICATIONS, TEMPLATES

ALLOWED_URL_SCHEMES = ("http", "https")


def safe_url(url):
    """Returns the URL if it is an http(s) link, '#' otherwise."""
    if urlparse(url or "").scheme.lower() in ALLOWED_URL_SCHEMES:
        return url
    return "#"


env = Environment(loader=DictLoader(TEMPLATES), autoescape=True)
env.filters["safe_url"] = safe_url


def render_home(repos):
    """Render the project listing with one card per repository, in the given order."""
    return env.get_template("home.html").render(repos=repos)


def render_about():
    return env.get_template("about.html").render(certifications=CERTIFICATIONS)

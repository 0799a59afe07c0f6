import argparse

import server
from config import load_settings


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Serve a GitHub portfolio page.")
    parser.add_argument("--username", help="GitHub user whose repositories are listed")
    parser.add_argument("--host", help="Interface to listen on")
    parser.add_argument("--port", type=int, help="Port to listen on")
    parser.add_argument("--api-url", dest="api_url", help="Base URL of the GitHub REST API")
    parser.add_argument("--timeout", type=float, help="Seconds allowed for each GitHub API request")
    return parser.parse_args(argv)


def main(argv=None):
    args = parse_args(argv)
    settings = load_settings(**vars(args))
    server.run(settings)


if __name__ == "__main__":
    main()

"""
starred-repos - List a GitHub user's starred repositories.

Fetches the starred repositories of a user from the GitHub API, caches
the raw response on disk, and prints them sorted by stars or exports
them to JSON/TOML.

Quick Start:
    from starred_repos import CacheStore, GitHubClient, RepoService

    service = RepoService(CacheStore("cache"), GitHubClient(token="ghp_..."))
    for repo in service.get("octocat"):
        print(repo.name, repo.star_count)
"""

__version__ = "0.1.0"

from .domain import Repo, parse_repos
from .infra import CacheStore, GitHubClient
from .services import RepoService, export_json, export_toml, load_json, load_toml
from .config import load_config

__all__ = [
    "__version__",
    "Repo",
    "parse_repos",
    "CacheStore",
    "GitHubClient",
    "RepoService",
    "export_json",
    "export_toml",
    "load_json",
    "load_toml",
    "load_config",
]

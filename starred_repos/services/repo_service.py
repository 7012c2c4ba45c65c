"""
Repository service for starred-repos.

Decides between the response cache and the GitHub API, and turns the
raw body into Repo records.
"""

import logging
from typing import List

from ..domain.repo import Repo, parse_repos
from ..infra.cache_store import CacheStore
from ..infra.github_client import GitHubClient

logger = logging.getLogger(__name__)


class RepoService:
    """
    Cache-or-fetch access to a user's starred repositories.

    Example:
        service = RepoService(CacheStore("cache"), GitHubClient(token))
        for repo in service.get("octocat"):
            print(repo.name, repo.star_count)
    """

    def __init__(self, cache: CacheStore, client: GitHubClient):
        """
        Initialize RepoService.

        Args:
            cache: Response cache shared with the caller
            client: GitHub API client used on cache misses
        """
        self.cache = cache
        self.client = client

    def get(self, user: str) -> List[Repo]:
        """
        Get the starred repositories of a user.

        A cached response is used as-is. Otherwise the API is called and
        the raw body cached before decoding.

        Raises:
            MissingCredentialError, NetworkError, StatusError: From the client
            DeserializationError: If the body is not a valid repo list
        """
        cached = self.cache.read(user)
        if cached is not None:
            logger.info(f"Using cached response for {user}")
            return parse_repos(cached)

        logger.info(f"No cached response for {user}, querying GitHub")
        body = self.client.fetch(user)
        self.cache.write(user, body)
        return parse_repos(body)

    def clear_cache(self) -> bool:
        """Drop every cached response."""
        return self.cache.clear()

"""
Infrastructure layer for starred-repos.

Contains abstractions for external systems:
- GitHubClient: GitHub API access
- CacheStore: on-disk response cache

These provide clean interfaces that can be mocked for testing.
"""

from .github_client import GitHubClient
from .cache_store import CacheStore

__all__ = [
    'GitHubClient',
    'CacheStore',
]

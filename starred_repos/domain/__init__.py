"""
Domain objects for starred-repos.
"""

from .repo import Repo, parse_repos

__all__ = [
    'Repo',
    'parse_repos',
]

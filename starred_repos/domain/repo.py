"""
Repo domain object for starred-repos.

A Repo is one starred repository as returned by the GitHub REST API.
It is immutable and maps to and from the API's field names, so a cached
response body and an exported file decode the same way.
"""

import json
from dataclasses import dataclass
from typing import Any, Dict, List

from ..exit_codes import DeserializationError


@dataclass(frozen=True)
class Repo:
    """A starred repository."""
    name: str
    url: str
    description: str
    star_count: int

    @classmethod
    def from_api_response(cls, data: Dict[str, Any]) -> 'Repo':
        """
        Create from one element of the starred-repos API response.

        Args:
            data: Repository object with name, html_url, description
                  and stargazers_count

        Returns:
            Repo

        Raises:
            DeserializationError: If a required field is missing or mistyped
        """
        if not isinstance(data, dict):
            raise DeserializationError(f"Expected a repository object, got {type(data).__name__}")

        missing = [key for key in ('name', 'html_url', 'stargazers_count') if data.get(key) is None]
        if missing:
            raise DeserializationError(f"Repository object is missing {', '.join(missing)}")

        name = data['name']
        url = data['html_url']
        if not isinstance(name, str) or not isinstance(url, str):
            raise DeserializationError("Repository name and html_url must be strings")

        star_count = data['stargazers_count']
        # bool is an int subclass
        if isinstance(star_count, bool) or not isinstance(star_count, int) or star_count < 0:
            raise DeserializationError(
                f"Invalid stargazers_count for {name}: {star_count!r}"
            )

        # GitHub sends null for repos without a description
        description = data.get('description') or ''
        if not isinstance(description, str):
            raise DeserializationError(f"Invalid description for {name}")

        return cls(name=name, url=url, description=description, star_count=star_count)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to a dictionary using the API field names."""
        return {
            'name': self.name,
            'html_url': self.url,
            'description': self.description,
            'stargazers_count': self.star_count,
        }


def parse_repos(text: str) -> List[Repo]:
    """
    Parse a JSON array of repository objects.

    Args:
        text: Raw response body (or cached copy of one)

    Returns:
        Repos in the order they appear in the body

    Raises:
        DeserializationError: If the body is not a JSON array of repositories
    """
    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise DeserializationError(f"Invalid JSON: {e}") from e

    if not isinstance(data, list):
        raise DeserializationError(f"Expected a JSON array, got {type(data).__name__}")

    return [Repo.from_api_response(item) for item in data]

"""
GitHub API client infrastructure for starred-repos.

Fetches the raw starred-repositories listing for a user:
- One authenticated GET per call, no retries
- The access token is passed in explicitly, never read from the environment
- Non-success statuses and transport failures become CommandErrors
"""

import logging
from typing import Optional

import requests

from ..exit_codes import MissingCredentialError, NetworkError, StatusError

logger = logging.getLogger(__name__)

STARRED_API_URL = "https://api.github.com/users/{user}/starred"
DEFAULT_PER_PAGE = 10
DEFAULT_USER_AGENT = "starred-repos"
GITHUB_ACCEPT = "application/vnd.github+json"


class GitHubClient:
    """
    Client for the GitHub REST starred-repositories endpoint.

    Example:
        client = GitHubClient(token="ghp_...")
        body = client.fetch("octocat")
    """

    def __init__(
        self,
        token: Optional[str],
        api_url: str = STARRED_API_URL,
        per_page: int = DEFAULT_PER_PAGE,
        user_agent: str = DEFAULT_USER_AGENT,
        timeout: float = 30,
    ):
        """
        Initialize GitHubClient.

        Args:
            token: GitHub access token sent as a bearer credential
            api_url: Endpoint template with a {user} placeholder
            per_page: Page size requested from the API
            user_agent: User-Agent header value
            timeout: HTTP request timeout in seconds
        """
        self.token = token
        self.api_url = api_url
        self.per_page = per_page
        self.timeout = timeout
        self.session = requests.Session()
        self.session.headers.update({
            'User-Agent': user_agent,
            'Accept': GITHUB_ACCEPT,
        })

    def starred_url(self, user: str) -> str:
        """Endpoint URL for a user's starred repositories."""
        return f"{self.api_url.format(user=user)}?per_page={self.per_page}"

    def fetch(self, user: str) -> str:
        """
        Fetch the raw starred-repositories response for a user.

        Args:
            user: GitHub user name

        Returns:
            Response body text

        Raises:
            MissingCredentialError: If no token was configured
            NetworkError: If the request could not be completed
            StatusError: If GitHub answered with a non-success status
        """
        if not self.token:
            raise MissingCredentialError()

        url = self.starred_url(user)
        logger.debug(f"GET {url}")

        try:
            response = self.session.get(
                url,
                headers={'Authorization': f'Bearer {self.token}'},
                timeout=self.timeout,
            )
        except requests.RequestException as e:
            raise NetworkError(f"Could not connect to GitHub API: {e}") from e

        if not response.ok:
            raise StatusError(url, response.status_code)

        logger.info(f"Fetched starred repositories for {user}")
        return response.text

    def close(self) -> None:
        """Close the underlying HTTP session."""
        self.session.close()

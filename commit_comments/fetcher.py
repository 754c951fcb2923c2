"""
GitHub data fetching module.

This module performs the single GitHub REST API call that lists the most
recent commits of a repository. The response is handed back as-is: error
statuses are not raised and redirects are not followed.
"""

import logging

from .constants import GITHUB_API_URL, LOGGER_NAME
from .models import HttpOutcome, RepoReference

# External libs
try:
    import requests
except Exception as e:
    raise RuntimeError("requests is required. Install with: pip install requests") from e

logger = logging.getLogger(f"{LOGGER_NAME}.fetcher")


class CommitFetcher:
    """
    Fetch the commit list of a public repository from GitHub.

    Requests are unauthenticated, sent once and never retried or redirected;
    network errors raised by requests propagate to the caller.
    """

    @staticmethod
    def commits_path(repo: RepoReference) -> str:
        """
        API path listing the commits of a repository.

        Args:
            repo: Repository to list commits for

        Returns:
            Path relative to the API root, e.g. ``/repos/torvalds/linux/commits``
        """
        return f"/repos/{repo.author}/{repo.name}/commits"

    def build_endpoint(self, repo: RepoReference, limit: int) -> str:
        """Full URL of the commit list request for ``repo``."""
        return f"{GITHUB_API_URL}{self.commits_path(repo)}?per_page={limit}"

    def fetch(self, repo: RepoReference, limit: int) -> HttpOutcome:
        """
        Request up to ``limit`` of the most recent commits of ``repo``.

        Args:
            repo: Repository to list commits for
            limit: Page size sent as ``per_page``

        Returns:
            HttpOutcome holding the status code and the raw response body
        """
        endpoint = self.build_endpoint(repo, limit)
        logger.info("Fetching %s", endpoint)

        response = requests.get(endpoint, allow_redirects=False)

        logger.debug("GitHub responded with status %d for %s", response.status_code, repo.full_name)
        return HttpOutcome(status_code=response.status_code, body=response.text)

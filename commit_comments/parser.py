"""
Repository URL parsing module.

This module validates GitHub repository URLs and extracts the owner and
repository name from them.
"""

import re

from .constants import INVALID_URL_MESSAGE
from .models import RepoReference


class RepoUrlParser:
    """
    Parse ``http(s)://github.com/<author>/<repo>`` URLs into a RepoReference.

    Author and repository are restricted to ASCII word characters and the whole
    string must match: no trailing slash, path, query or ``www.`` prefix.
    """

    REPO_URL_RE = re.compile(r"^https?://github\.com/(?P<author>\w+)/(?P<repo>\w+)$", re.ASCII)

    @staticmethod
    def is_valid(url: str) -> bool:
        """Return True if ``url`` is a repository URL this tool accepts."""
        return RepoUrlParser.REPO_URL_RE.fullmatch(url) is not None

    @staticmethod
    def parse(url: str) -> RepoReference:
        """
        Extract the repository reference from a URL.

        Returns:
            RepoReference with the author and repository name

        Raises:
            ValueError: If the URL does not match the accepted shape
        """
        m = RepoUrlParser.REPO_URL_RE.fullmatch(url)
        if not m:
            raise ValueError(INVALID_URL_MESSAGE)
        return RepoReference(author=m.group("author"), name=m.group("repo"))

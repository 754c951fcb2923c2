"""
Configuration constants for commit-comments.
"""

# =============================================================================
# GitHub API
# =============================================================================
GITHUB_API_URL = "https://api.github.com"

# =============================================================================
# Fetch limit
# =============================================================================
MIN_LIMIT = 1
MAX_LIMIT = 50
DEFAULT_LIMIT = 10

# =============================================================================
# User-facing messages
# =============================================================================
INVALID_URL_MESSAGE = "Value must be valid github repository URL"
REPO_NOT_FOUND_MESSAGE = "Repo not found"
INTERNAL_SERVER_ERROR_MESSAGE = "Internal server error"
UNKNOWN_ERROR_MESSAGE = "Unknown error while retrieving. Http status code {code}"

# =============================================================================
# Logging
# =============================================================================
LOGGER_NAME = "commit-comments"

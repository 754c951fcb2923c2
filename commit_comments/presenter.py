"""
Output module.

Renders the commit listing for the terminal.
"""

from typing import List


class CommitPresenter:
    """Print a header line followed by one commit message per line."""

    def format(self, limit: int, messages: List[str]) -> str:
        """
        Build the text printed for a successful fetch.

        The header and the newline-joined messages are separate lines, so an
        empty listing still ends with a blank line.

        Args:
            limit: Number of commits that were requested
            messages: Commit messages in API order

        Returns:
            Header line and message block, without the final newline
        """
        return f"Last {limit} commits:\n" + "\n".join(messages)

    def show(self, limit: int, messages: List[str]) -> None:
        """Print the commit listing to stdout."""
        print(self.format(limit, messages))

    def show_error(self, message: str) -> None:
        """Print a recoverable API error as a single stdout line."""
        print(message)

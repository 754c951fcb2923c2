"""
commit-comments - print the most recent commit messages of a GitHub repository.
"""

from .models import CommitListing, HttpOutcome, RepoReference, StatusCheck
from .parser import RepoUrlParser
from .fetcher import CommitFetcher
from .interpreter import ResponseInterpreter
from .presenter import CommitPresenter
from .main import main

__all__ = [
    'CommitListing',
    'HttpOutcome',
    'RepoReference',
    'StatusCheck',
    'RepoUrlParser',
    'CommitFetcher',
    'ResponseInterpreter',
    'CommitPresenter',
    'main'
]

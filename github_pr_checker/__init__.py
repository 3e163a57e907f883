"""
GitHub PR Checker

Reports the open pull requests a GitHub user has authored across a
configured list of repositories.
"""

__version__ = "1.0.0"

"""
repo-credits: roll the credits for a git repository in the terminal.
"""

__version__ = "0.1.0"

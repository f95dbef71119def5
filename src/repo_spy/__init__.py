"""Repo Spy — GitHub repository statistics from the command line.

Fetches one repository's metadata, normalizes it into a display-ready
record, derives a health score and prints a formatted report.
"""

__version__ = "1.0.0"

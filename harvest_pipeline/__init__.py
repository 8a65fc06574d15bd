"""
Channel Comment Harvest
Collects a channel's videos and comments from the YouTube Data API and
exports them as CSV or ZIP.
"""

__version__ = "0.1.0"

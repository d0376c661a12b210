"""Aisum - AI news summaries and daily digests."""

__version__ = "0.1.0"

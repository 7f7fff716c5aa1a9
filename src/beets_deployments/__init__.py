"""Deployment tasks, pool migrations and operational scripts for Beethoven X."""

__version__ = "0.1.0"

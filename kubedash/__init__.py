"""Kubernetes resource summaries, age and unit helpers, and terminal key and tick events."""

__version__ = "0.1.0"
"""
general.
=======

Shared general-purpose modules used across the extraction pipeline.

Exports:
- utils: config loading and topic-gated debug logging.
"""

__all__: list[str] = []

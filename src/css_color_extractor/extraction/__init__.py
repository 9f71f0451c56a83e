# css_color_extractor/extraction/__init__.py

"""
extraction
==========

Does: Hold the pipeline packages (`color`, `css`, `general`) plus the shared
      value types and the orchestrator with the public entry points.
Used by: The package root (re-exports), the CLI, and tests.
"""

__all__: list[str] = []
__docformat__ = "google"

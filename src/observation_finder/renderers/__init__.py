"""Presentation helpers: pure data -> text.

- text.py - plain-text result listing used by the CLI
"""

from observation_finder.renderers.text import format_distance, render_observation, render_result

__all__ = ["format_distance", "render_observation", "render_result"]

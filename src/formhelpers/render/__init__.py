"""
Template rendering with the form helpers available.
"""

from .page import build_environment, load_context, render_template_file, render_to_file

__all__ = ["build_environment", "load_context", "render_template_file", "render_to_file"]

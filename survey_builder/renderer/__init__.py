"""Renderer HTML de l'aperçu."""
from .html import render_form, render_block

__all__ = ["render_form", "render_block"]

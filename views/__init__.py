"""Page renderers for the calculator app."""

from .calculator import render_calculator_page

__all__ = ["render_calculator_page"]

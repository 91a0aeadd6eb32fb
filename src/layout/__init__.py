"""
Font-size fitting for the inserted text.
"""

from .config import LayoutConfig
from .fitter import fit_text, instruction_overflows
from .measure import PymupdfTextMeasurer, TextMeasurer

__all__ = ["LayoutConfig", "PymupdfTextMeasurer", "TextMeasurer", "fit_text", "instruction_overflows"]

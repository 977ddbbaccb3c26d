"""Catalog generation engine: stylesheet text to token table to class catalog."""

from .colors import calculate_shade, color_to_rgb, mix_colors
from .generator import Catalog, generate_classes, generate_classes_with_details
from .parser import parse_meta_vars, parse_meta_vars_text, parse_utility_classes, parse_utility_classes_text
from .resolver import resolve_var

__all__ = [
    "Catalog",
    "calculate_shade",
    "color_to_rgb",
    "generate_classes",
    "generate_classes_with_details",
    "mix_colors",
    "parse_meta_vars",
    "parse_meta_vars_text",
    "parse_utility_classes",
    "parse_utility_classes_text",
    "resolve_var",
]

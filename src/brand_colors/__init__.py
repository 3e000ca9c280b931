"""Derive accessible brand color roles from palettes."""

from .analysis import ColorSample, analyze_colors
from .colors import hex_to_hsl, hsl_to_hex, is_valid_hex, relative_luminance
from .contrast import ContrastRequirement, check_contrast, contrast_ratio
from .enforcement import enforce_contrast, validate_mapping
from .mapping import BrandColorMapping, derive_brand_mapping, map_palette_to_brand
from .styles import PaletteStyle, StyleCache, classify_palette_style

__all__ = [
    "BrandColorMapping",
    "ColorSample",
    "ContrastRequirement",
    "PaletteStyle",
    "StyleCache",
    "analyze_colors",
    "check_contrast",
    "classify_palette_style",
    "contrast_ratio",
    "derive_brand_mapping",
    "enforce_contrast",
    "hex_to_hsl",
    "hsl_to_hex",
    "is_valid_hex",
    "map_palette_to_brand",
    "relative_luminance",
    "validate_mapping",
]

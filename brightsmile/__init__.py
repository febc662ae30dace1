"""Bright Smile Dental brochure site built with Reflex."""

__version__ = "0.1.0"

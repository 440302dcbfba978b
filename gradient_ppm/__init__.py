"""gradient_ppm

Small helper package that writes a red/green gradient as a plain-text (P3) PPM image.
"""
from .core import emit_gradient, render_image

__all__ = ["emit_gradient", "render_image"]

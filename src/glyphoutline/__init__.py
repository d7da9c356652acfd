"""glyphoutline - Print the raw vector outline of a font glyph.

glyphoutline is a CLI tool for font engineers that loads one character's glyph
from a TrueType/OpenType font without scaling or hinting and prints its path
as MoveTo/LineTo/QuadTo commands in font design units.

Example:
    $ glyphoutline Roboto-Regular.ttf A

This prints every contour of the glyph for "A" with its segments in outline
order.
"""

__version__ = "0.1.0"

__all__ = ["__version__"]

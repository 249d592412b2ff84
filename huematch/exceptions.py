"""
huematch Error Types

Every error raised by the color analysis services derives from
ColorAnalysisError and from ValueError, since all of them signal bad input.
"""


GENERIC_USER_MESSAGE = "Something went wrong while analyzing colors, please try again"


class ColorAnalysisError(Exception):
    """Base class for color analysis failures."""

    user_message: str = GENERIC_USER_MESSAGE


class DecodeError(ColorAnalysisError, ValueError):
    """Image bytes are empty, too large or not a decodable raster image."""

    user_message = "Could not read image, try another file"


class EmptyInputError(ColorAnalysisError, ValueError):
    """Palette extraction was handed no pixels."""


class InvalidPaletteError(ColorAnalysisError, ValueError):
    """A palette operation was handed an empty palette."""


class InvalidColorError(ColorAnalysisError, ValueError):
    """A color string is not a valid #RRGGBB hex value."""

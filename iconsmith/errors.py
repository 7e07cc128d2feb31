from __future__ import annotations


class IconsmithError(Exception):
    """Base class for errors raised by the icon pipeline."""


class FormatError(IconsmithError):
    """Input bytes are not a well-formed PNG stream."""


class UnsupportedFormatError(FormatError):
    """PNG is well formed but uses a layout we do not decode.

    Only 8-bit RGB or RGBA without interlacing is supported.
    """

    def __init__(self, bit_depth: int, color_type: int, interlace: int = 0) -> None:
        message = f"Unsupported PNG: bitDepth={bit_depth} colorType={color_type}"
        if interlace:
            message += f" interlace={interlace}"
        super().__init__(message)
        self.bit_depth = bit_depth
        self.color_type = color_type
        self.interlace = interlace

    def __reduce__(self):
        return (type(self), (self.bit_depth, self.color_type, self.interlace))


class StageError(IconsmithError):
    """Wraps the first failure of a pipeline run with the stage it happened in."""

    def __init__(self, stage: str, cause: BaseException) -> None:
        super().__init__(f"{stage} failed: {cause}")
        self.stage = stage
        self.cause = cause
        self.__cause__ = cause

    def __reduce__(self):
        return (type(self), (self.stage, self.cause))

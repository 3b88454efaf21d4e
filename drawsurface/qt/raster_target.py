# Qt Raster Target - QImage-backed pixel buffer
#
# Owns the QImage that Surface draws into, hands out the single
# Context2D bound to it, and exports its pixels as a data URL.

import logging

from PySide6.QtCore import QBuffer, QByteArray, QIODevice, Qt
from PySide6.QtGui import QImage

from drawsurface import utils_core as Utils
from drawsurface.qt.context2d import Context2D


# Browser canvas defaults, used when the config has no [Surface] size
DEFAULT_WIDTH = 300
DEFAULT_HEIGHT = 150

# MIME type -> Qt image writer format
EXPORT_FORMATS = {
    "image/png": "PNG",
    "image/jpeg": "JPEG",
    "image/bmp": "BMP",
}
LOSSY_FORMATS = ("JPEG",)
DEFAULT_MIME = "image/png"


def _blank_image(width, height):
    image = QImage(int(width), int(height),
                   QImage.Format.Format_ARGB32_Premultiplied)
    if not image.isNull():
        image.fill(Qt.GlobalColor.transparent)
    return image


class RasterTarget:
    """Fixed-size RGBA pixel buffer that can be drawn into and exported.

    Changing `width` or `height` allocates a new, fully transparent
    image and resets the bound context, like resizing an HTML canvas.
    """

    def __init__(self, width=None, height=None, image=None):
        if image is None:
            self._width = int(width or Utils.getInt("Surface", "width", DEFAULT_WIDTH))
            self._height = int(height or Utils.getInt("Surface", "height", DEFAULT_HEIGHT))
            image = _blank_image(self._width, self._height)
        else:
            self._width = image.width()
            self._height = image.height()
        self._image = image
        self._context = None
        self.antialias = Utils.getBool("Surface", "antialias", True)

    @property
    def image(self):
        return self._image

    @property
    def width(self):
        return self._width

    @width.setter
    def width(self, width):
        self._resize(width, self._height)

    @property
    def height(self):
        return self._height

    @height.setter
    def height(self, height):
        self._resize(self._width, height)

    def _resize(self, width, height):
        # A zero-area QImage is null and reports 0x0, so the size lives here
        self._width = int(width)
        self._height = int(height)
        self._image = _blank_image(self._width, self._height)
        if self._context is not None:
            self._context.reset()
        logging.debug("Raster target resized to %dx%d, contents cleared",
                      self._width, self._height)

    def get_context(self):
        """Return the drawing context bound to this target."""
        if self._context is None:
            self._context = Context2D(self)
        return self._context

    def to_image(self):
        """Detached copy of the current pixels."""
        return self._image.copy()

    def to_data_url(self, mime=None, quality=None):
        """Encode the pixels as a base64 data URL.

        Args:
            mime: "image/png", "image/jpeg" or "image/bmp".  Unknown
                types fall back to PNG.  None uses [Export] format.
            quality: 0..1 for lossy formats.  None uses
                [Export] quality; out of range uses the writer default.

        Returns:
            str: "data:<mime>;base64,<payload>", or "data:," when the
            image has no pixels.
        """
        if self._image.isNull():
            return "data:,"

        if mime is None:
            mime = Utils.getStr("Export", "format", DEFAULT_MIME)
        fmt = EXPORT_FORMATS.get(mime)
        if fmt is None:
            logging.debug("Unsupported export type %r, using %s", mime, DEFAULT_MIME)
            mime = DEFAULT_MIME
            fmt = EXPORT_FORMATS[mime]

        level = -1
        if fmt in LOSSY_FORMATS:
            if quality is None:
                quality = Utils.getFloat("Export", "quality", -1.0)
            if 0.0 <= quality <= 1.0:
                level = int(round(quality * 100))

        data = QByteArray()
        buf = QBuffer(data)
        buf.open(QIODevice.OpenModeFlag.WriteOnly)
        self._image.save(buf, fmt, level)
        buf.close()
        return f"data:{mime};base64," + bytes(data.toBase64()).decode("ascii")

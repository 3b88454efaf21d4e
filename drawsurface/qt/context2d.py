# Qt 2D Drawing Context - canvas-style state machine over QPainter
#
# Keeps the style/transform state, the save/restore stack and the
# current path in Python, and opens a QPainter on the target image
# only for the duration of each paint call.  Nothing stays active on
# the image between calls, so the target can be resized or exported
# at any time.

import logging
import math
from contextlib import contextmanager

from PySide6.QtCore import QPointF, QRectF, Qt
from PySide6.QtGui import (
    QBrush, QColor, QPainter, QPainterPath, QPen, QPixmap, QTransform,
)

from drawsurface.PixelMath import TAU


LINE_CAPS = {
    "butt": Qt.PenCapStyle.FlatCap,
    "round": Qt.PenCapStyle.RoundCap,
    "square": Qt.PenCapStyle.SquareCap,
}

DEFAULT_COLOR = "#000000"


def _to_color(value):
    """Return a valid QColor for `value`, or None if it does not parse."""
    color = QColor(value)
    return color if color.isValid() else None


class _DrawState:
    """One entry of the save/restore stack."""

    __slots__ = ("transform", "fill_style", "stroke_style",
                 "line_width", "line_cap", "global_alpha")

    def __init__(self):
        self.transform = QTransform()
        self.fill_style = QColor(DEFAULT_COLOR)
        self.stroke_style = QColor(DEFAULT_COLOR)
        self.line_width = 1.0
        self.line_cap = "butt"
        self.global_alpha = 1.0

    def copy(self):
        state = _DrawState()
        state.transform = QTransform(self.transform)
        state.fill_style = QColor(self.fill_style)
        state.stroke_style = QColor(self.stroke_style)
        state.line_width = self.line_width
        state.line_cap = self.line_cap
        state.global_alpha = self.global_alpha
        return state


class Context2D:
    """Drawing context bound to one RasterTarget.

    Mirrors the browser 2D canvas context: assignments of invalid
    style values are ignored, restore() on an empty stack does
    nothing, and path coordinates are interpreted with the transform
    current at fill/stroke time.
    """

    def __init__(self, target):
        self._target = target
        self._stack = []
        self._state = _DrawState()
        self._path = QPainterPath()

    def reset(self):
        """Drop the state stack, styles and current path."""
        self._stack = []
        self._state = _DrawState()
        self._path = QPainterPath()

    # ------------------------------------------------------------------
    # Style properties
    # ------------------------------------------------------------------
    @property
    def fill_style(self):
        return QColor(self._state.fill_style)

    @fill_style.setter
    def fill_style(self, value):
        color = _to_color(value)
        if color is None:
            logging.debug("Ignoring invalid fill style %r", value)
            return
        self._state.fill_style = color

    @property
    def stroke_style(self):
        return QColor(self._state.stroke_style)

    @stroke_style.setter
    def stroke_style(self, value):
        color = _to_color(value)
        if color is None:
            logging.debug("Ignoring invalid stroke style %r", value)
            return
        self._state.stroke_style = color

    @property
    def line_width(self):
        return self._state.line_width

    @line_width.setter
    def line_width(self, value):
        try:
            value = float(value)
        except (TypeError, ValueError):
            logging.debug("Ignoring non-numeric line width %r", value)
            return
        if not math.isfinite(value) or value <= 0:
            logging.debug("Ignoring invalid line width %r", value)
            return
        self._state.line_width = value

    @property
    def line_cap(self):
        return self._state.line_cap

    @line_cap.setter
    def line_cap(self, value):
        if value not in LINE_CAPS:
            logging.debug("Ignoring unknown line cap %r", value)
            return
        self._state.line_cap = value

    @property
    def global_alpha(self):
        return self._state.global_alpha

    @global_alpha.setter
    def global_alpha(self, value):
        try:
            value = float(value)
        except (TypeError, ValueError):
            logging.debug("Ignoring non-numeric global alpha %r", value)
            return
        if not math.isfinite(value) or not 0.0 <= value <= 1.0:
            logging.debug("Ignoring out of range global alpha %r", value)
            return
        self._state.global_alpha = value

    # ------------------------------------------------------------------
    # Transform stack
    # ------------------------------------------------------------------
    @property
    def transform(self):
        """Copy of the current transform."""
        return QTransform(self._state.transform)

    @property
    def save_depth(self):
        """Number of states currently pushed by save()."""
        return len(self._stack)

    def save(self):
        self._stack.append(self._state.copy())

    def restore(self):
        if self._stack:
            self._state = self._stack.pop()

    def translate(self, x, y):
        self._state.transform.translate(x, y)

    def rotate(self, angle):
        """Rotate clockwise by `angle` radians."""
        self._state.transform.rotateRadians(angle)

    def scale(self, x, y):
        self._state.transform.scale(x, y)

    def reset_transform(self):
        self._state.transform = QTransform()

    # ------------------------------------------------------------------
    # Path construction
    # ------------------------------------------------------------------
    def begin_path(self):
        self._path = QPainterPath()

    def move_to(self, x, y):
        self._path.moveTo(x, y)

    def line_to(self, x, y):
        if self._path.elementCount() == 0:
            self._path.moveTo(x, y)
        else:
            self._path.lineTo(x, y)

    def close_path(self):
        self._path.closeSubpath()

    def arc(self, x, y, radius, start_angle, end_angle, anticlockwise=False):
        """Add a circular arc centered on (x, y).

        Angles are in radians measured clockwise from the positive x
        axis.  A sweep of a full turn or more draws a whole circle.
        The start of the arc is joined to the current point when a
        subpath is open.
        """
        sweep = end_angle - start_angle
        if not anticlockwise:
            if sweep >= TAU:
                sweep = TAU
            elif sweep < 0:
                sweep = sweep % TAU
        else:
            if sweep <= -TAU:
                sweep = -TAU
            elif sweep > 0:
                sweep = sweep % TAU - TAU

        start = QPointF(x + radius * math.cos(start_angle),
                        y + radius * math.sin(start_angle))
        if self._path.elementCount() == 0:
            self._path.moveTo(start)
        # Qt measures angles counter-clockwise in degrees
        rect = QRectF(x - radius, y - radius, 2 * radius, 2 * radius)
        self._path.arcTo(rect, -math.degrees(start_angle), -math.degrees(sweep))

    @property
    def path(self):
        """Copy of the current path."""
        return QPainterPath(self._path)

    # ------------------------------------------------------------------
    # Painting
    # ------------------------------------------------------------------
    @contextmanager
    def _painter(self):
        painter = QPainter(self._target.image)
        try:
            if self._target.antialias:
                painter.setRenderHint(QPainter.RenderHint.Antialiasing)
                painter.setRenderHint(QPainter.RenderHint.SmoothPixmapTransform)
            painter.setTransform(self._state.transform)
            painter.setOpacity(self._state.global_alpha)
            yield painter
        finally:
            painter.end()

    def _paintable(self):
        return not self._target.image.isNull()

    def fill(self):
        if not self._paintable() or self._path.isEmpty():
            return
        with self._painter() as painter:
            painter.fillPath(self._path, QBrush(self._state.fill_style))

    def stroke(self):
        if not self._paintable() or self._path.isEmpty():
            return
        pen = QPen(self._state.stroke_style)
        pen.setWidthF(self._state.line_width)
        pen.setCapStyle(LINE_CAPS[self._state.line_cap])
        pen.setJoinStyle(Qt.PenJoinStyle.MiterJoin)
        with self._painter() as painter:
            painter.strokePath(self._path, pen)

    def draw_image(self, image, x, y, width=None, height=None):
        """Blit `image` with its top-left corner at (x, y).

        Args:
            image: QImage or QPixmap.
            x, y: Destination in user space.
            width, height: Destination size.  When omitted the image
                is drawn at its natural size.
        """
        if not self._paintable():
            return
        if isinstance(image, QPixmap):
            image = image.toImage()
        with self._painter() as painter:
            if width is None or height is None:
                painter.drawImage(QPointF(x, y), image)
            else:
                painter.drawImage(QRectF(x, y, width, height), image)

    def clear_rect(self, x, y, width, height):
        """Set the rectangle to transparent black, ignoring global alpha."""
        if not self._paintable():
            return
        with self._painter() as painter:
            painter.setOpacity(1.0)
            painter.setCompositionMode(
                QPainter.CompositionMode.CompositionMode_Clear)
            painter.fillRect(QRectF(x, y, width, height),
                             Qt.GlobalColor.transparent)

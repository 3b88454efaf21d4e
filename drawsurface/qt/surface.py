# Qt Surface - scale-aware drawing on a raster target
#
# Wraps one RasterTarget and its Context2D.  Image blits are snapped
# to whole pixels with PixelMath.round_half_up; circles and lines are
# drawn at the exact coordinates given.  The *_scaled variants take
# logical coordinates and multiply them by `scale` first.

from contextlib import contextmanager

from PySide6.QtGui import QImage

from drawsurface import PixelMath
from drawsurface.qt.raster_target import RasterTarget


class Surface:
    """Drawing surface bound to a single raster target.

    Args:
        width: Initial width in pixels.  0 or None keeps the target's
            current width.
        height: Initial height in pixels, same rule as `width`.
        target: Existing RasterTarget (or QImage) to draw into.  A new
            RasterTarget is created when omitted.
    """

    def __init__(self, width=None, height=None, target=None):
        if target is None:
            target = RasterTarget()
        elif isinstance(target, QImage):
            target = RasterTarget(image=target)
        self._target = target
        self._context = target.get_context()
        self.scale = 1.0

        if width:
            self.set_width(width)
        if height:
            self.set_height(height)

    @property
    def target(self):
        return self._target

    @property
    def context(self):
        return self._context

    @property
    def width(self):
        return self._target.width

    @property
    def height(self):
        return self._target.height

    # ------------------------------------------------------------------
    # Configuration
    # ------------------------------------------------------------------
    def set_width(self, width):
        """Resize horizontally.  Clears every pixel and the context state."""
        self._target.width = width

    def set_height(self, height):
        """Resize vertically.  Clears every pixel and the context state."""
        self._target.height = height

    def set_scale(self, scale):
        self.scale = scale

    def set_dimension(self, width, height, scale=None):
        """Set both dimensions, and the scale when one is given.

        Unlike the constructor, 0 is applied as a real size here.
        """
        self._target.width = width
        self._target.height = height

        if scale is not None:
            self.set_scale(scale)

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------
    def clear(self):
        self._context.clear_rect(0, 0, self._target.width, self._target.height)

    def save(self):
        self._context.save()

    def restore(self):
        self._context.restore()

    def reverse(self):
        """Mirror all following draws horizontally.

        Pushes the context state and never pops it: the caller must
        call restore() once the mirrored drawing is done.  Prefer
        mirrored() when the drawing fits in one block.
        """
        self._context.save()
        self._context.translate(self._target.width, 0)
        self._context.scale(-1, 1)

    @contextmanager
    def mirrored(self):
        """reverse() on entry, restore() on exit."""
        self.reverse()
        try:
            yield self
        finally:
            self.restore()

    @contextmanager
    def _global_alpha(self, alpha):
        """Override the context opacity for one draw call."""
        if alpha is None:
            yield
            return
        previous = self._context.global_alpha
        self._context.global_alpha = alpha
        try:
            yield
        finally:
            self._context.global_alpha = previous

    # ------------------------------------------------------------------
    # Images
    # ------------------------------------------------------------------
    def draw_image(self, image, position):
        """Blit at natural size with the top-left snapped to a pixel."""
        self._context.draw_image(image, self.round(position[0]), self.round(position[1]))

    def draw_image_scaled(self, image, position, width, height, angle=None):
        """draw_image_sized() with position and size multiplied by scale."""
        self.draw_image_sized(
            image,
            PixelMath.scale_point(position, self.scale),
            width * self.scale,
            height * self.scale,
            angle,
        )

    def draw_image_sized(self, image, position, width, height, angle=None):
        """Blit stretched to width x height, optionally rotated.

        Args:
            image: QImage or QPixmap.
            position: (x, y) of the top-left corner, snapped to pixels.
            width, height: Destination size.
            angle: Rotation in radians about the destination center.
                0 or None draws without touching the transform.
        """
        x = self.round(position[0])
        y = self.round(position[1])

        if not angle:
            self._context.draw_image(image, x, y, width, height)
            return

        center_x, center_y = PixelMath.rotation_center(x, y, width, height)
        x, y = PixelMath.centered_origin(width, height)

        self._context.save()
        try:
            self._context.translate(center_x, center_y)
            self._context.rotate(angle)
            self._context.draw_image(image, x, y, width, height)
        finally:
            self._context.restore()

    # ------------------------------------------------------------------
    # Shapes
    # ------------------------------------------------------------------
    def draw_circle(self, position, radius, fill=None, stroke=None, alpha=None):
        """Fill and/or outline a circle centered on position.

        Args:
            position: (x, y) center, not snapped.
            radius: Circle radius.
            fill: Fill color, or None for no fill.
            stroke: Outline color drawn 1px wide, or None.
            alpha: Opacity for this call only.
        """
        with self._global_alpha(alpha):
            self._context.begin_path()
            self._context.arc(position[0], position[1], radius, 0, PixelMath.TAU, False)

            if fill is not None:
                self._context.fill_style = fill
                self._context.fill()

            if stroke is not None:
                self._context.line_width = 1
                self._context.stroke_style = stroke
                self._context.stroke()

    def draw_line(self, points, width=None, color=None, alpha=None):
        """Stroke one connected path through `points` with round caps.

        Fewer than two points draws nothing.  A None color keeps the
        context's current stroke style.
        """
        if len(points) < 2:
            return

        with self._global_alpha(alpha):
            if color is not None:
                self._context.stroke_style = color

            self._context.line_width = 1 if width is None else width
            self._context.line_cap = "round"
            self._context.begin_path()
            self._context.move_to(points[0][0], points[0][1])

            for point in points[1:]:
                self._context.line_to(point[0], point[1])

            self._context.stroke()

    def draw_line_scaled(self, points, width, color=None, alpha=None):
        """draw_line() in logical coordinates.

        `points` is scaled in place: every item is replaced by a new
        (x, y) tuple, so the caller's list holds pixel coordinates
        afterwards.
        """
        PixelMath.scale_points(points, self.scale)
        self.draw_line(points, width * self.scale, color, alpha)

    # ------------------------------------------------------------------
    # Utilities
    # ------------------------------------------------------------------
    def to_string(self, mime=None, quality=None):
        """Target pixels as a data URL (PNG unless configured otherwise)."""
        return self._target.to_data_url(mime, quality)

    def __str__(self):
        return self.to_string()

    @staticmethod
    def round(value):
        return PixelMath.round_half_up(value)

    @staticmethod
    def round_float(value, precision=PixelMath.DEFAULT_PRECISION):
        return PixelMath.round_float(value, precision)

from drawsurface.qt.context2d import Context2D
from drawsurface.qt.raster_target import RasterTarget
from drawsurface.qt.surface import Surface

__all__ = [
    "Context2D",
    "RasterTarget",
    "Surface",
]

"""Scale-aware 2D drawing surface on top of Qt raster images."""

from drawsurface import utils_core as Utils

Utils.loadConfiguration()

__version__ = Utils.__version__

# Configuration helpers and package metadata
#
# Holds the single module-level ConfigParser shared by the raster
# target and the export code.  Qt code imports this directly
# (``from drawsurface import utils_core as Utils``).  Values are read
# from the system ini shipped with the package, then overridden by
# the user ini in the home directory.

__all__ = [
    # Metadata
    "__version__", "__prg__", "__title__",
    # Paths
    "prgpath", "iniSystem", "iniUser",
    # Globals
    "config",
    # Functions
    "loadConfiguration", "addSection",
    "getStr", "getInt", "getFloat", "getBool",
    "setBool", "setStr", "setInt", "setFloat",
]

import configparser
import logging
import os
import sys

__version__ = "0.3.0"
__prg__ = "drawsurface"

__platform_fingerprint__ = "({} py{}.{}.{})".format(
    sys.platform,
    sys.version_info.major,
    sys.version_info.minor,
    sys.version_info.micro,
)
__title__ = f"{__prg__} {__version__} {__platform_fingerprint__}"

prgpath = os.path.abspath(os.path.dirname(__file__))
iniSystem = os.path.join(prgpath, f"{__prg__}.ini")
iniUser = os.path.expanduser(f"~/.{__prg__}")

config = configparser.ConfigParser(interpolation=None)


# -----------------------------------------------------------------------------
# Load configuration
# -----------------------------------------------------------------------------
def loadConfiguration(systemOnly=False):
    if systemOnly:
        read = config.read(iniSystem)
    else:
        read = config.read([iniSystem, iniUser])
    logging.debug("Configuration loaded from %s", ", ".join(read) or "<none>")
    return read


# -----------------------------------------------------------------------------
# add section if it doesn't exist
# -----------------------------------------------------------------------------
def addSection(section):
    if not config.has_section(section):
        config.add_section(section)


# -----------------------------------------------------------------------------
def getStr(section, name, default=""):
    try:
        return config.get(section, name)
    except Exception:
        return default


# -----------------------------------------------------------------------------
def getInt(section, name, default=0):
    try:
        return int(config.get(section, name))
    except Exception:
        return default


# -----------------------------------------------------------------------------
def getFloat(section, name, default=0.0):
    try:
        return float(config.get(section, name))
    except Exception:
        return default


# -----------------------------------------------------------------------------
def getBool(section, name, default=False):
    try:
        return bool(int(config.get(section, name)))
    except Exception:
        return default


# -----------------------------------------------------------------------------
def setBool(section, name, value):
    config.set(section, name, str(int(value)))


# -----------------------------------------------------------------------------
def setStr(section, name, value):
    config.set(section, name, str(value))


setInt = setStr
setFloat = setStr

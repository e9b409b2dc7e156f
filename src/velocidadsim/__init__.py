"""VelocidadSim: interactive uniform-motion speed calculator."""
from importlib.metadata import version, PackageNotFoundError

try:
    __version__ = version("velocidadsim")
except PackageNotFoundError:
    __version__ = "0.0.0-dev"

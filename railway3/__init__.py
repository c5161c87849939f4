"""Railway map generation, layout for drawing, and a Tk window that shows the map."""

__version__ = "0.1.0"
__all__ = ["__version__"]
"""Read KiCad PCB board files: s-expressions, general counts, layers, lines and a viewer window."""

__version__ = "0.1.0"
__all__ = ["cli", "general", "layer", "primitive", "renderer", "sexpr"]
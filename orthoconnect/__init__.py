"""orthoconnect — right-angle connector routing for diagram renderers."""

__version__ = "0.1.0"

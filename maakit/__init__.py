"""General-purpose utilities: strings, observers, files, processes, Windows arguments, images and JSON."""

__version__ = "0.1.0"
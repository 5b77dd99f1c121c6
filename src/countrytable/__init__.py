"""Terminal table of the world's countries with search, sort and infinite scroll."""

__version__ = "0.1.0"

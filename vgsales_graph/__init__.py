"""Video game similarity graph: games linked by shared genre or publisher."""

__version__ = "0.1.0"

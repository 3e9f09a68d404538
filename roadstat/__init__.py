"""roadstat: structural statistics for undirected edge-list graphs such as road networks."""

__version__ = "0.1.0"

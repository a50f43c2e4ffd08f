"""Convert PostgreSQL node tree dumps into Graphviz pictures."""

__version__ = "0.2"

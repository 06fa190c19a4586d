"""socialtrack — closest-connection queries over a social network graph."""

__version__ = "0.1.0"

"""node-finder - project root, dependency and specifier resolution for Node-style trees."""

__version__ = "0.1.0"

"""Input-text rewrite plugins, connection-cost plugins, plugin loading and decimal string numbers."""

__version__ = "0.1.0"
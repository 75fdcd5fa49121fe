"""Binary search and red-black trees, an integer queue, letter filters,
simple statistics and other small utilities."""

__version__ = "0.1.0"
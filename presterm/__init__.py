"""Terminal presentation building blocks: styles, layout, geometry, terminals and image printers."""

__version__ = "0.1.0"
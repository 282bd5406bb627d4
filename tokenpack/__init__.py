"""TokenKit internals: design-token tree diffing and report rendering."""

__version__ = "0.1.0"

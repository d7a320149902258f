"""helis - git blame on hover for any LSP-capable editor."""

__version__ = "0.1.0"

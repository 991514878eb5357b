"""Family-wide --help rendering: gradient FIGlet banner, aligned flag tables, plain and JSON modes."""

__version__ = "0.3.1"

__all__ = ["ansi", "banner", "figlet", "modes", "render", "spec"]
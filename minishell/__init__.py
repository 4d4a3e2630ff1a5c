"""Shell building blocks: syntax checks, word splitting, expansion, environment and built-ins."""

__version__ = "0.1.0"
__all__ = ["__version__"]
"""specguard: compiles natural-language quality specifications into executable rules."""

__version__ = "0.1.0"

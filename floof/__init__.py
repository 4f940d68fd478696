"""Play cat sounds from a registry by name or at random."""

__version__ = "0.1.0"
__all__ = ["registry", "vfs", "context", "meow"]
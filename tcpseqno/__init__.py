"""32-bit wrapping TCP sequence numbers and their 64-bit absolute counterparts."""

__version__ = "0.1.0"
__all__ = ["wrapping"]
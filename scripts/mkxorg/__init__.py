"""Generate xorg.conf files from a compact option string."""

__all__ = [
    "logging",
    "xorg",
]

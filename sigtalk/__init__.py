"""Text messaging between processes over SIGUSR1 and SIGUSR2, with a small printf and C-style string helpers."""

__version__ = "0.1.0"
__all__ = ["ctext", "printf", "protocol", "client", "server"]
"""slugcast - podcast slug agent backed by Cloudflare D1 and Workers AI."""

__version__ = "0.1.0"

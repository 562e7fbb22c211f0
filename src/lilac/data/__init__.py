"""Data files shipped with Lilac (bundled sample document)."""

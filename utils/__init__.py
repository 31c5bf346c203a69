"""Console and plotting helpers for the key generator CLI."""

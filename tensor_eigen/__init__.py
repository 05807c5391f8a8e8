"""Solana addresses, Anchor discriminators and error codes, Raydium pool layouts and fee shards."""

__version__ = "0.1.0"
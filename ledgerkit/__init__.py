"""Building blocks for a small blockchain: blocks, consensus, pools, state, networking and cryptography helpers."""

__version__ = "0.1.0"
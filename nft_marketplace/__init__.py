"""Deployment and test harness for the SmartPy NFT marketplace."""

__version__ = "1.0.0"

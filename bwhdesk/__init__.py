"""Console dashboard, power control and saved-server list for VPS accounts."""

__version__ = "0.1.0"
__all__ = ["__version__"]
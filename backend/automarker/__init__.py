"""FEthink prioritisation prompting automarker."""

__version__ = "0.1.0"

"""ratetier: balance-tiered interest rate resolver."""

__version__ = "0.1.0"

"""SMART WALLET

User-account subsystem of a digital-wallet application. It registers users,
provisions their default subscription and first wallet, and manages their role,
status, and profile details.
"""

__all__ = ["__version__"]
__version__ = "0.1.0"

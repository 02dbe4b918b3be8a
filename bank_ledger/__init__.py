"""
Bank Ledger

An in-process banking ledger: users, integer-unit monetary accounts,
deposit/withdraw/transfer with non-negative balance guarantees over a
pluggable persistence layer.
"""

__version__ = "1.0.0"

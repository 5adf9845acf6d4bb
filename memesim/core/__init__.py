"""
Core domain: price engine, portfolio ledger and transaction log.
"""

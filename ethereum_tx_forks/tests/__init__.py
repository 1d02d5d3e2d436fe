"""
Tests for the `ethereum_tx_forks` package.
"""

"""
Tests for the `ethereum_tx_crypto` package.
"""

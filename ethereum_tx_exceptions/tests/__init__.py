"""
Tests for the `ethereum_tx_exceptions` package.
"""

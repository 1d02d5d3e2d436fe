"""
Tests for the `ethereum_tx_base_types` package.
"""

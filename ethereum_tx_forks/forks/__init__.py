"""Listing of all the Ethereum forks."""

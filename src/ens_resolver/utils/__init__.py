"""Shared ABI, byte and name helpers."""

"""Shared domain-level helpers."""

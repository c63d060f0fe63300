"""Shared helpers for optverify."""

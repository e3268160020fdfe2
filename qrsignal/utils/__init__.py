"""Helpers for hostnames and URLs."""

"""Thin requests-based client for the Soora API."""

"""Operational scripts for Stakeguard."""

"""Utility helpers for the token info tool."""

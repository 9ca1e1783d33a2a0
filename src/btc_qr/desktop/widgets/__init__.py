"""Reusable Qt widgets for the desktop application."""

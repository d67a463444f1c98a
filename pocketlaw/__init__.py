"""Pocketlaw access control: roles, permissions, gates and navigation."""

__version__ = "0.1.0"

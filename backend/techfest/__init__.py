"""Techfest registration and ticketing backend."""

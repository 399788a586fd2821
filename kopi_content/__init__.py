"""Sehati Kopi content data-access layer and HTTP API."""

"""Test fixtures for GetHash."""

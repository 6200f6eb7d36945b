"""Entries feature: schema, storage, search and routes."""

"""Heathen Index: a searchable knowledge base of Norse mythology."""

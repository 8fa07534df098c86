"""Donut log validation: rule catalog, validation engine and agent introspection."""

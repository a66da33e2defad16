"""Dealership management REST backend."""

"""Shared test fixtures: data factories and test mixins."""

"""Bundled JSON Schemas for persisted save data."""

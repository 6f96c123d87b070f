"""Stateless URL helpers."""

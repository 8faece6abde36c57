"""Utility helpers for todopad."""

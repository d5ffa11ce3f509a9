"""Utility helpers for buildingify."""

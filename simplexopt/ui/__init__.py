"""Графіки процесу мінімізації (matplotlib)."""

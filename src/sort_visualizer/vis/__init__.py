"""Solara UI: sidebar controls, metric cards and a matplotlib canvas."""

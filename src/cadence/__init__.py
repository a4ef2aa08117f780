"""Cadence - recurring tasks and habits."""

"""Shared helpers for :mod:`currapi`."""

"""Constant tables shared across the installer, lister and validator."""

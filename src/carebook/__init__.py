"""Carebook: patient and caregiver records with appointment search."""

__version__ = "0.1.0"

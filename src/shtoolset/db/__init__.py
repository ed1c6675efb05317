"""Scoperta e caricamento degli script dal filesystem."""

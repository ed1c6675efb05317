"""Modelli dati del toolset."""

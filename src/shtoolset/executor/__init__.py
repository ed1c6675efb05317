"""Esecuzione sequenziale degli script selezionati."""

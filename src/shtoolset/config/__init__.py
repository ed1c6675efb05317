"""Configurazione e risoluzione della cartella degli script."""

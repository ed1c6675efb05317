"""Menu interattivo basato su Rich."""

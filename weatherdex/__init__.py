"""Weather-to-Pokémon lookup service."""

__version__ = "0.1.0"

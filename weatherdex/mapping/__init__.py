"""Weather code to Pokémon type mapping."""

"""Map WMO weather codes (as reported by Open-Meteo) to Pokémon types."""

import random

from weatherdex.models.category import PokemonType

CLEAR_SKY_TYPES = (PokemonType.FIRE, PokemonType.ELECTRIC, PokemonType.FLYING)
OVERCAST_TYPES = (PokemonType.NORMAL, PokemonType.GRASS)


def candidate_types(code: int) -> tuple[PokemonType, ...]:
    """All types a weather code may map to."""
    if 0 <= code <= 3:
        return CLEAR_SKY_TYPES
    if 51 <= code <= 67:
        return (PokemonType.WATER,)
    if 71 <= code <= 75:
        return (PokemonType.ICE,)
    if 45 <= code <= 48:
        return (PokemonType.GHOST,)
    return OVERCAST_TYPES


def map_weather_code(code: int, rng: random.Random | None = None) -> PokemonType:
    """Return the Pokémon type for a weather code.

    Clear to partly cloudy skies (0-3) and the catch-all branch pick at random
    between several equally valid types. Every integer maps to some type.
    """
    types = candidate_types(code)
    if len(types) == 1:
        return types[0]
    return (rng or random).choice(types)

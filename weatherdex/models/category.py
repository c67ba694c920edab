"""Pokémon types used as weather categories."""

from enum import StrEnum


class PokemonType(StrEnum):
    FIRE = "fire"
    ELECTRIC = "electric"
    FLYING = "flying"
    WATER = "water"
    ICE = "ice"
    GHOST = "ghost"
    NORMAL = "normal"
    GRASS = "grass"


DEFAULT_TYPE = PokemonType.NORMAL

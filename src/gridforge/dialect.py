"""Target dialects and their lexical conventions."""

from dataclasses import dataclass
from enum import Enum


class Dialect(str, Enum):
    """Target UI frameworks."""

    BASALT = "basalt"     # fluent method chains
    PIXELUI = "pixelui"   # table constructors
    PRIMEUI = "primeui"   # positional calls


class EmissionStrategy(str, Enum):
    """How a dialect expresses a widget declaration."""

    FLUENT_CHAIN = "fluent_chain"
    TABLE_CONSTRUCTOR = "table_constructor"
    POSITIONAL_CALL = "positional_call"


@dataclass(frozen=True)
class DialectProfile:
    """Lexical settings the literal emitter and generators share."""

    dialect: Dialect
    strategy: EmissionStrategy
    module: str
    quote: str = '"'
    null_keyword: str = "nil"
    palette: str = "colors"


PROFILES: dict[Dialect, DialectProfile] = {
    Dialect.BASALT: DialectProfile(Dialect.BASALT, EmissionStrategy.FLUENT_CHAIN, module="basalt"),
    Dialect.PIXELUI: DialectProfile(Dialect.PIXELUI, EmissionStrategy.TABLE_CONSTRUCTOR, module="pixelui", quote="'"),
    Dialect.PRIMEUI: DialectProfile(Dialect.PRIMEUI, EmissionStrategy.POSITIONAL_CALL, module="PrimeUI"),
}


def profile_for(dialect: Dialect | str) -> DialectProfile:
    """Look up the profile for a dialect (or its string value)."""
    return PROFILES[Dialect(dialect)]

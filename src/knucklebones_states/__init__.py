"""Knucklebones state-space enumeration package."""

from .types import DIE_VALUES, Die, Hand, HandError, HandPair, Player
from .hands import HAND_COUNT, generate_hands, overlaps
from .pairs import HAND_PAIR_COUNT, HandPairTable, UnknownHandPairError, generate_hand_pairs, reverse_pair
from .states import (
    State,
    StateClass,
    StateCounts,
    canonical_triple_count,
    classify,
    closed_form_counts,
    count_states,
    count_states_exhaustive,
    count_states_parallel,
    iter_canonical_triples,
)
from .config import EnumerationConfig, preset_enumeration, run_enumeration

__all__ = [
    "DIE_VALUES",
    "Die",
    "EnumerationConfig",
    "HAND_COUNT",
    "HAND_PAIR_COUNT",
    "Hand",
    "HandError",
    "HandPair",
    "HandPairTable",
    "Player",
    "State",
    "StateClass",
    "StateCounts",
    "UnknownHandPairError",
    "canonical_triple_count",
    "classify",
    "closed_form_counts",
    "count_states",
    "count_states_exhaustive",
    "count_states_parallel",
    "generate_hand_pairs",
    "generate_hands",
    "iter_canonical_triples",
    "overlaps",
    "preset_enumeration",
    "reverse_pair",
    "run_enumeration",
]

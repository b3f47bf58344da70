import pytest

from knucklebones_states.hands import generate_hands
from knucklebones_states.pairs import (
    HAND_PAIR_COUNT,
    HandPairTable,
    UnknownHandPairError,
    generate_hand_pairs,
    reverse_pair,
)
from knucklebones_states.types import DIE_VALUES, Die, Hand


def _shares_face(hand_1, hand_2) -> bool:
    return bool(set(hand_1.dice()) & set(hand_2.dice()))


def test_hand_pair_count_regression():
    pairs = generate_hand_pairs(generate_hands())
    assert len(pairs) == HAND_PAIR_COUNT == 3067


def test_pair_count_matches_independent_count():
    hands = generate_hands()
    expected = sum(1 for h1 in hands for h2 in hands if not _shares_face(h1, h2))
    assert len(generate_hand_pairs(hands)) == expected


def test_pairs_never_share_faces_and_reverse_is_a_pair():
    pairs = generate_hand_pairs(generate_hands())
    pair_set = set(pairs)
    assert len(pair_set) == len(pairs)
    for pair in pairs:
        assert not any(pair[0].has(d) and pair[1].has(d) for d in DIE_VALUES)
        assert reverse_pair(pair) in pair_set


def test_only_empty_hand_pairs_with_itself():
    pairs = generate_hand_pairs(generate_hands())
    self_pairs = [pair for pair in pairs if pair[0] == pair[1]]
    assert self_pairs == [(Hand.empty(), Hand.empty())]


def test_table_round_trip():
    table = HandPairTable.build()
    assert len(table) == HAND_PAIR_COUNT
    for ix, pair in enumerate(table):
        assert table.get_by_index(ix) == pair
        assert table.get_by_hand(pair) == ix
    assert table.get_by_index(0) == (Hand.empty(), Hand.empty())


def test_table_unknown_lookups():
    table = HandPairTable.build()
    overlapping = (Hand.one(Die.TWO), Hand.two(Die.TWO, Die.THREE))
    assert overlapping not in table
    with pytest.raises(UnknownHandPairError):
        table.get_by_hand(overlapping)
    with pytest.raises(KeyError):
        table.get_by_index(len(table))
    with pytest.raises(UnknownHandPairError):
        table.get_by_index(-1)


def test_table_rejects_duplicates():
    pair = (Hand.empty(), Hand.one(Die.ONE))
    with pytest.raises(ValueError):
        HandPairTable([pair, pair])


def test_table_from_custom_hands():
    hands = [Hand.empty(), Hand.one(Die.ONE), Hand.one(Die.TWO)]
    table = HandPairTable.build(hands)
    # Every ordered pair except (1)|(1) and (2)|(2).
    assert len(table) == 7

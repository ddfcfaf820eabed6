import logging
from collections import Counter
from dataclasses import FrozenInstanceError
from types import MappingProxyType

import pytest

from vomc.chain import ChainModel, generate, train
from vomc.utils.rng import seeded_rng


def _reference_pairs(states, max_order: int) -> Counter:
    pairs: Counter = Counter()
    for order in range(max_order):
        for start in range(len(states) - order):
            key = tuple(states[start : start + order])
            pairs[(key, states[start + order])] += 1
    return pairs


def test_two_order_table_for_aab() -> None:
    model = train(2, "aab")
    assert dict(model.table) == {
        (): ("a", "a", "b"),
        ("a",): ("a", "b"),
    }
    assert model.max_order == 2


def test_every_window_successor_pair_recorded_with_multiplicity() -> None:
    states = "the cat sat on the mat and the cat ran".split()
    model = train(4, states)

    observed: Counter = Counter()
    for window, successors in model.table.items():
        for s in successors:
            observed[(window, s)] += 1

    assert observed == _reference_pairs(states, 4)


def test_no_window_reaches_max_order() -> None:
    model = train(3, [1, 2, 3, 1, 2, 4, 1, 2, 3])
    assert model.table
    assert max(len(w) for w in model.table) == 2
    assert all(len(w) <= model.max_order - 1 for w in model.table)


def test_successors_keep_order_of_appearance() -> None:
    model = train(2, "abacad")
    assert model.successors("a") == ("b", "c", "d")
    assert model.successors(()) == tuple("abacad")


def test_empty_input_gives_empty_table() -> None:
    model = train(3, [])
    assert len(model) == 0
    assert dict(model.table) == {}


def test_short_input_only_fills_reachable_orders() -> None:
    model = train(5, "ab")
    assert dict(model.table) == {(): ("a", "b"), ("a",): ("b",)}


def test_zero_max_order_is_legal_and_empty() -> None:
    model = train(0, "abc")
    assert model.max_order == 0
    assert len(model) == 0


def test_negative_max_order_is_rejected() -> None:
    with pytest.raises(ValueError, match="max_order must be >= 0"):
        train(-1, "abc")


def test_non_integer_max_order_is_rejected() -> None:
    with pytest.raises(TypeError):
        train(2.5, "abc")


def test_unhashable_states_are_rejected() -> None:
    with pytest.raises(TypeError):
        train(2, [[1], [2]])


def test_accepts_any_iterable_once() -> None:
    model = train(2, iter([1, 2, 1, 3]))
    assert model.successors((1,)) == (2, 3)


def test_classmethod_matches_function() -> None:
    states = "mississippi"
    assert dict(ChainModel.train(3, states).table) == dict(train(3, states).table)


def test_model_is_read_only() -> None:
    model = train(2, "aab")
    with pytest.raises(FrozenInstanceError):
        model.max_order = 5
    with pytest.raises(TypeError):
        model.table[("z",)] = ("q",)


def test_lookup_helpers() -> None:
    model = train(3, "abcab")
    assert ("a", "b") in model
    assert ("b", "a") not in model
    assert model.successors(("q",)) == ()
    assert sorted(model.windows(order=0)) == [()]
    assert sorted(model.windows(order=2)) == [("a", "b"), ("b", "c"), ("c", "a")]
    assert len(list(model.windows())) == len(model)


def test_training_summary_is_logged(caplog) -> None:
    with caplog.at_level(logging.DEBUG, logger="vomc.chain.model"):
        train(2, "aab")
    assert "Trained chain | max_order=2 states=3 windows=2" in caplog.text


def test_constructor_copies_caller_table() -> None:
    backing = {(): ("a",)}
    model = ChainModel(max_order=1, table=MappingProxyType(backing))
    backing[("x",)] = ("q",)
    assert list(model.table) == [()]
    assert generate(model, "x", rng=seeded_rng(0)) == "a"


def test_constructor_normalises_windows_and_successors() -> None:
    model = ChainModel(max_order=2, table={(): ["a", "b"], ("a",): ["b"]})
    assert model.table[()] == ("a", "b")
    assert isinstance(model.table[("a",)], tuple)


def test_constructor_rejects_windows_reaching_max_order() -> None:
    with pytest.raises(ValueError, match="max_order=1 allows at most 0"):
        ChainModel(max_order=1, table={(): ("a",), ("x", "y"): ("q",)})
    with pytest.raises(ValueError, match="max_order=0"):
        ChainModel(max_order=0, table={(): ("a",)})


def test_fallback_steps_are_logged(caplog) -> None:
    model = train(2, "aab")
    with caplog.at_level(logging.DEBUG, logger="vomc.chain.model"):
        model.match("z", 1)
    assert "No successors for window of length 1; falling back" in caplog.text

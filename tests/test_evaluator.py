from __future__ import annotations

import itertools
import random

import pytest

from forestquiz.core.models import Point
from forestquiz.dynamic.evaluator import evaluate, evaluate_forest, majority_vote, routes_left
from forestquiz.dynamic.generator import generate_forest, generate_point


def test_evaluate_routes_on_the_split_feature(make_tree):
    tree = make_tree(feature="x2", threshold=0.65, left=1, right=0)
    assert evaluate(tree, Point(x1=0.99, x2=0.1)) == 1
    assert evaluate(tree, Point(x1=0.0, x2=0.9)) == 0


def test_value_equal_to_threshold_routes_left(make_tree):
    tree = make_tree(feature="x1", threshold=0.35, left=1, right=0)
    on_boundary = Point(x1=0.35, x2=0.5)
    assert routes_left(tree, on_boundary)
    assert evaluate(tree, on_boundary) == tree.left_class


def test_evaluate_is_deterministic():
    rng = random.Random(17)
    forest = generate_forest(rng, 15)
    point = generate_point(rng)
    first = [evaluate(tree, point) for tree in forest]
    for _ in range(5):
        assert [evaluate(tree, point) for tree in forest] == first


@pytest.mark.parametrize("n", [3, 5, 7])
def test_majority_matches_strict_half_rule_exhaustively(n):
    for votes in itertools.product((0, 1), repeat=n):
        expected = 1 if sum(votes) > n / 2 else 0
        assert majority_vote(votes) == expected


@pytest.mark.parametrize("n", [9, 11, 13, 15])
def test_majority_rule_on_sampled_large_forests(n):
    rng = random.Random(n)
    for _ in range(200):
        votes = [rng.randint(0, 1) for _ in range(n)]
        assert majority_vote(votes) == (1 if sum(votes) > n / 2 else 0)


def test_even_tie_keeps_literal_rule():
    # 2 * count(1) > len is false on an exact tie.
    assert majority_vote([1, 0]) == 0
    assert majority_vote([1, 1, 0, 0]) == 0
    assert majority_vote([]) == 0


def test_scenario_all_trees_agree_on_red(make_tree):
    forest = [make_tree(i, feature="x1", threshold=0.5, left=0, right=1) for i in range(5)]
    votes, majority = evaluate_forest(forest, Point(x1=0.3, x2=0.8))
    assert votes == (0, 0, 0, 0, 0)
    assert majority == 0


def test_evaluate_forest_keeps_tree_order(make_tree, point):
    forest = [
        make_tree(0, left=1, right=0),
        make_tree(1, left=1, right=0),
        make_tree(2, left=0, right=1),
    ]
    votes, majority = evaluate_forest(forest, point)
    assert votes == (1, 1, 0)
    assert majority == 1


def test_point_value_rejects_unknown_feature():
    with pytest.raises(KeyError):
        Point(x1=0.1, x2=0.2).value("x3")

from __future__ import annotations

from forestquiz.core import formatting
from forestquiz.core.models import GuessResult, Point, Tree


def test_class_labels_follow_red_blue_convention():
    assert formatting.class_label(0) == "Red"
    assert formatting.class_label(1) == "Blue"
    assert formatting.class_label(7) == "?"


def test_tree_descriptions_are_one_based_and_two_decimals():
    tree = Tree(id=0, feature="x2", threshold=0.2, left_class=1, right_class=0)
    assert formatting.tree_title(tree) == "Tree 1"
    assert formatting.split_label(tree) == "x2 ≤ 0.20"
    assert formatting.format_point(Point(x1=0.5, x2=0.07)) == "Test point: x1 = 0.50, x2 = 0.07"


def test_reveal_lines():
    result = GuessResult(is_correct=False, guess=1, majority=0, votes=(0, 1, 0, 0, 1))
    assert formatting.majority_line(result) == "Forest majority: Red (Red: 3, Blue: 2)"
    assert formatting.feedback_text(result) == "Incorrect. Forest predicts Red."
    assert formatting.vote_chip(1, 1) == "T2 vote: Blue"

    won = GuessResult(is_correct=True, guess=0, majority=0, votes=(0, 0, 1))
    assert formatting.feedback_text(won).startswith("Correct!")

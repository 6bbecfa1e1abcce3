from __future__ import annotations

import pytest

from forestquiz.core.errors import InvalidArgument
from forestquiz.features.session import GuessPayload, RoundPayload, SessionConfig, SessionManager


def test_session_manager_basic_flow():
    manager = SessionManager()
    sid = manager.create_session(SessionConfig(trees=5, seed=1234))

    first = manager.get_round(sid)
    assert isinstance(first, RoundPayload)
    data = first.to_dict()
    assert data["round_no"] == 1
    assert data["tree_count"] == 5
    assert data["votes_hidden"] is True
    assert "reveal" not in data
    assert len(data["trees"]) == 5
    for tree in data["trees"]:
        assert {"id", "feature", "threshold", "split", "left_label", "right_label"}.issubset(tree)
        assert "vote" not in tree, "votes must stay hidden before a guess"
    assert data["point_text"].startswith("Test point: x1 = ")

    result = manager.guess(sid, 0)
    assert isinstance(result, GuessPayload)
    payload = result.to_dict()
    assert payload["majority_label"] in ("Red", "Blue")
    assert payload["red_votes"] + payload["blue_votes"] == 5
    assert payload["summary_line"].startswith("Forest majority: ")

    revealed = manager.get_round(sid).to_dict()
    assert revealed["votes_hidden"] is False
    assert [tree["vote"] for tree in revealed["trees"]] == payload["votes"]
    assert revealed["reveal"]["correct"] == payload["correct"]

    summary = manager.summary(sid).to_dict()
    assert summary["rounds"] == 1
    assert summary["guesses"] == 1
    assert summary["correct"] == (1 if payload["correct"] else 0)


def test_repeat_guess_returns_first_result_and_counts_once():
    manager = SessionManager()
    sid = manager.create_session(SessionConfig(trees=3, seed=9))
    first = manager.guess(sid, 1)
    second = manager.guess(sid, 0)
    assert second.guess == first.guess == 1
    assert second.correct == first.correct
    assert manager.summary(sid).guesses == 1


def test_new_round_normalizes_and_resets_reveal():
    manager = SessionManager()
    sid = manager.create_session(SessionConfig(trees=7, seed=5))
    manager.guess(sid, 0)

    payload = manager.new_round(sid, 4)
    assert payload.tree_count == 5
    assert payload.votes_hidden is True
    assert payload.round_no == 2

    # Falls back to the session's configured count.
    assert manager.new_round(sid).tree_count == 7


def test_create_session_normalizes_config_and_is_seeded():
    manager = SessionManager()
    a = manager.create_session(SessionConfig(trees=20, seed=77))
    b = manager.create_session(SessionConfig(trees=20, seed=77))
    assert manager._sessions[a].config.trees == 15
    assert manager.get_round(a).to_dict()["trees"] == manager.get_round(b).to_dict()["trees"]


def test_unknown_session_raises_key_error():
    manager = SessionManager()
    with pytest.raises(KeyError):
        manager.get_round("missing")
    with pytest.raises(KeyError):
        manager.guess("missing", 0)


def test_invalid_guess_propagates():
    manager = SessionManager()
    sid = manager.create_session(SessionConfig(seed=3))
    with pytest.raises(InvalidArgument):
        manager.guess(sid, 3)
    assert manager.summary(sid).guesses == 0

"""
Unit Tests for Search Module

Tests for minimax search with alpha-beta pruning.
"""

import logging

import pytest

from qirkat_engine.board import BLACK, WHITE, Move, Position
from qirkat_engine.config import SearchConfig
from qirkat_engine.evaluation import INFINITY, WIN_VALUE, Evaluator, MaterialEvaluator
from qirkat_engine.search import best_move, find_best_move, minimax, order_moves

GAME1 = ["c2-c3", "c4-c2", "c1-c3", "a3-c1", "c3-a3", "c5-c4", "a3-c5-c3"]


def full_minimax(position, depth, evaluator):
    """Reference minimax without pruning."""
    if depth == 0 or position.is_terminal():
        return evaluator.evaluate(position)
    scores = []
    for move in position.legal_moves():
        position.apply(move)
        scores.append(full_minimax(position, depth - 1, evaluator))
        position.undo()
    return max(scores) if position.side_to_move is WHITE else min(scores)


def game1_position():
    position = Position()
    for notation in GAME1:
        position.apply(Move.parse(notation))
    return position


class TestFindBestMove:
    """Tests for find_best_move()."""

    @pytest.fixture
    def evaluator(self):
        """Create evaluator for testing."""
        return MaterialEvaluator()

    def test_winning_capture(self, evaluator):
        position = Position.from_layout("w---- b---- ----- ----- -----", WHITE)

        move, score, nodes, pv = find_best_move(position, depth=1, evaluator=evaluator)

        assert move == Move.parse("a1-a3")
        assert score == WIN_VALUE
        assert nodes > 0, "Should search at least one node"
        assert pv == [move]

    def test_winning_capture_deeper(self, evaluator):
        position = Position.from_layout("w---- b---- ----- ----- -----", WHITE)

        move, score, _, _ = find_best_move(position, depth=3, evaluator=evaluator)

        assert move == Move.parse("a1-a3")
        assert score == WIN_VALUE

    def test_black_wins(self, evaluator):
        position = Position.from_layout("----- ----- ----- ----w ----b", BLACK)

        move, score, _, _ = find_best_move(position, depth=2, evaluator=evaluator)

        assert move == Move.parse("e5-e3")
        assert score == -WIN_VALUE

    def test_prefers_longest_chain(self, evaluator):
        position = Position.from_layout("----- ----b wb-b- b-b-b -----", WHITE)

        move, score, _, _ = find_best_move(position, depth=1, evaluator=evaluator)

        assert str(move) in ("a3-c3-e3-e5", "a3-c3-e3-e1")
        assert score == -2

    def test_forced_move(self, evaluator):
        position = Position.from_layout("ww-ww ww-ww bbwww bb-bb bbbbb", BLACK)

        move, _, _, _ = find_best_move(position, depth=3, evaluator=evaluator)

        assert move == Move.parse("a3-c1")

    def test_move_is_legal(self, evaluator):
        position = Position()

        move, _, _, _ = find_best_move(position, depth=3, evaluator=evaluator)

        assert move in position.legal_moves()
        assert position.is_legal(move)

    def test_position_restored(self, evaluator):
        position = game1_position()
        layout = position.to_layout()
        side = position.side_to_move
        moves = position.legal_moves()

        find_best_move(position, depth=4, evaluator=evaluator)

        assert position.to_layout() == layout
        assert position.side_to_move is side
        assert position.history_depth == len(GAME1)
        assert position.legal_moves() == moves

    def test_deterministic(self, evaluator):
        position = Position()

        first = find_best_move(position, depth=3, evaluator=evaluator)
        second = find_best_move(position, depth=3, evaluator=evaluator)

        assert first[0] == second[0], "Search should be deterministic"
        assert first[1] == second[1]
        assert first[2] == second[2]

    def test_depth_increases_nodes(self, evaluator):
        position = Position()

        _, _, nodes_d2, _ = find_best_move(position, depth=2, evaluator=evaluator)
        _, _, nodes_d4, _ = find_best_move(position, depth=4, evaluator=evaluator)

        assert nodes_d4 > nodes_d2, "Deeper search should explore more nodes"

    def test_terminal_position_raises(self, evaluator):
        position = Position.from_layout("-" * 25, WHITE)

        with pytest.raises(ValueError, match="No legal moves"):
            find_best_move(position, depth=2, evaluator=evaluator)

    def test_zero_depth_raises(self, evaluator):
        with pytest.raises(ValueError):
            find_best_move(Position(), depth=0, evaluator=evaluator)

    def test_default_evaluator(self):
        position = Position.from_layout("w---- b---- ----- ----- -----", WHITE)

        move, score, _, _ = find_best_move(position, depth=2)

        assert move == Move.parse("a1-a3")
        assert score == WIN_VALUE


class TestAlphaBeta:
    """Pruning never changes the minimax value."""

    @pytest.fixture
    def evaluator(self):
        return MaterialEvaluator()

    @pytest.mark.parametrize("depth", [1, 2, 3])
    def test_initial_position(self, evaluator, depth):
        position = Position()

        _, score, _, _ = find_best_move(position, depth=depth, evaluator=evaluator)

        assert score == full_minimax(position, depth, evaluator)

    @pytest.mark.parametrize("depth", [1, 2, 3])
    def test_midgame(self, evaluator, depth):
        position = game1_position()

        move, score, _, _ = find_best_move(position, depth=depth, evaluator=evaluator)

        assert score == full_minimax(position, depth, evaluator)
        position.apply(move)
        assert full_minimax(position, depth - 1, evaluator) == score

    def test_ordering_does_not_change_value(self, evaluator):
        position = game1_position()

        _, ordered, _, _ = find_best_move(
            position, depth=3, evaluator=evaluator, config=SearchConfig(order_moves=True)
        )
        _, unordered, _, _ = find_best_move(
            position, depth=3, evaluator=evaluator, config=SearchConfig(order_moves=False)
        )

        assert ordered == unordered

    def test_minimax_node_count(self, evaluator):
        position = Position()
        nodes = [0]

        value = minimax(position, 2, -INFINITY, INFINITY, 1, evaluator, nodes)

        assert value == full_minimax(position, 2, evaluator)
        assert nodes[0] > 1
        assert position == Position()


class TestMoveOrdering:
    """Tests for order_moves()."""

    def test_longest_first(self):
        moves = [Move.parse("a3-a5"), Move.parse("a3-c3-e3-e5"), Move.parse("a3-c3-c5")]

        ordered = order_moves(moves)

        assert [len(m) for m in ordered] == [3, 2, 1]

    def test_stable(self):
        moves = [Move.parse("c2-c3"), Move.parse("b2-c3"), Move.parse("d2-c3")]

        assert order_moves(moves) == moves


class TestBestMove:
    """Tests for the automated player's entry point."""

    def test_default_depth(self, monkeypatch):
        monkeypatch.delenv("QIRKAT_SEARCH_DEPTH", raising=False)
        position = Position.from_layout("----- wb-b- ----- ----- -----", WHITE)

        assert best_move(position) == Move.parse("a2-c2-e2")

    def test_depth_from_environment(self, monkeypatch, caplog):
        monkeypatch.setenv("QIRKAT_SEARCH_DEPTH", "1")
        position = Position.from_layout("----- wb-b- ----- ----- -----", WHITE)

        with caplog.at_level(logging.INFO, logger="qirkat_engine.search.minimax"):
            move = best_move(position)

        assert move == Move.parse("a2-c2-e2")
        assert "Depth: 1," in caplog.text

    def test_explicit_depth_beats_environment(self, monkeypatch, caplog):
        monkeypatch.setenv("QIRKAT_SEARCH_DEPTH", "1")
        position = Position.from_layout("----- wb-b- ----- ----- -----", WHITE)

        with caplog.at_level(logging.INFO, logger="qirkat_engine.search.minimax"):
            best_move(position, max_depth=2)

        assert "Depth: 2," in caplog.text

    def test_custom_evaluator(self):
        class PreferBlack(Evaluator):
            def evaluate(self, position):
                return -self.material(position)

        position = Position.from_layout("----- wb-b- b-b-- ----- -----", WHITE)

        move = best_move(position, max_depth=1, evaluator=PreferBlack())

        assert move == Move.parse("a2-a4"), "Capturing the least is best for this evaluator"

    def test_terminal_raises(self):
        with pytest.raises(ValueError):
            best_move(Position.from_layout("bww-- ----- ----- ----- -----", BLACK), max_depth=2)


class TestLogging:
    """Search reports through the logging module."""

    def test_summary_logged(self, caplog):
        position = Position()

        with caplog.at_level(logging.INFO, logger="qirkat_engine.search.minimax"):
            find_best_move(position, depth=1)

        assert "Best move" in caplog.text

    def test_root_moves_logged(self, caplog):
        position = Position()
        config = SearchConfig(log_root_moves=True)

        with caplog.at_level(logging.DEBUG, logger="qirkat_engine.search.minimax"):
            find_best_move(position, depth=1, config=config)

        assert caplog.text.count("Move: ") == 4

    def root_order(self, caplog, config):
        position = Position.from_layout("----- ----b wb-b- b-b-b -----", WHITE)

        with caplog.at_level(logging.DEBUG, logger="qirkat_engine.search.minimax"):
            find_best_move(position, depth=1, config=config)

        return [
            r.getMessage().split(",")[0][len("Move: "):]
            for r in caplog.records
            if r.getMessage().startswith("Move: ")
        ]

    def test_root_moves_longest_chain_first(self, caplog):
        searched = self.root_order(caplog, SearchConfig(log_root_moves=True))

        assert [len(Move.parse(m)) for m in searched] == [3, 3, 2, 1]
        assert searched[-1] == "a3-a5"

    def test_root_moves_unordered(self, caplog):
        position = Position.from_layout("----- ----b wb-b- b-b-b -----", WHITE)
        config = SearchConfig(log_root_moves=True, order_moves=False)

        searched = self.root_order(caplog, config)

        assert searched == [str(m) for m in position.legal_moves()]

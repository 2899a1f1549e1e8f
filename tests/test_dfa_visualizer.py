from src.automaton.word_dfa import WordDFA
from src.automaton.comment_dfa import CommentDFA
from src.config.dfa_config import dfa_config
from src.utils.dfa_visualizer import DFAVisualizer


def test_word_graph_edges():
    source = DFAVisualizer(WordDFA("ab")).build_graph().source
    assert "start -> 0" in source
    assert "0 -> 1" in source
    assert "1 -> 2" in source
    assert "doublecircle" in source
    assert "trap" not in source


def test_comment_graph_has_dashed_rule_edges():
    source = DFAVisualizer(CommentDFA()).build_graph().source
    assert "5 -> 6" in source
    assert "7 -> 3" in source
    assert "7 -> 6" in source
    assert "dashed" in source


def test_parallel_edges_are_merged():
    visualizer = DFAVisualizer(CommentDFA())
    merged = visualizer._merge_edges([(0, 'a', 1), (0, '\n', 1), (1, 'b', 2)])
    assert merged == [(0, 1, 'a, \\n'), (1, 2, 'b')]


def test_trap_node_when_enabled():
    dfa_config.enable_trap_state()
    source = DFAVisualizer(WordDFA("a")).build_graph().source
    assert "trap" in source
    assert "-1 -> -1" in source


def test_trap_node_has_implicit_edges():
    dfa_config.enable_trap_state()
    source = DFAVisualizer(WordDFA("ab")).build_graph().source
    assert "0 -> -1" in source
    assert "1 -> -1" in source
    assert "2 -> -1" in source
    assert "dotted" in source


def test_trap_edges_skip_total_states():
    edges = dict(DFAVisualizer(CommentDFA())._trap_edges())
    assert set(edges) == {
        CommentDFA.START,
        CommentDFA.SLASH,
        CommentDFA.CLOSED,
        CommentDFA.PAREN,
    }
    assert edges[CommentDFA.START] == 'Σ∖{(,/,{}'
    assert edges[CommentDFA.CLOSED] == 'Σ'


def test_no_trap_edges_by_default():
    source = DFAVisualizer(WordDFA("ab")).build_graph().source
    assert "-> -1" not in source

from rich.console import Console

from src.automaton.word_dfa import WordDFA
from src.automaton.comment_dfa import CommentDFA
from src.utils.output_formatter import OutputFormatter, display_symbol


def make_formatter():
    console = Console(record=True, width=120, color_system=None)
    return OutputFormatter(console), console


def test_display_symbol():
    assert display_symbol('\n') == '\\n'
    assert display_symbol(' ') == '␣'
    assert display_symbol('a') == 'a'


def test_print_automaton():
    formatter, console = make_formatter()
    formatter.print_automaton(WordDFA("foo"))
    text = console.export_text()
    assert "WordDFA" in text
    assert "'foo'" in text
    assert "[3]" in text


def test_print_transition_table_includes_rules():
    formatter, console = make_formatter()
    formatter.print_transition_table(CommentDFA())
    text = console.export_text()
    assert "转移表" in text
    assert "规则" in text
    assert "\\n" in text


def test_print_trace_accepted():
    formatter, console = make_formatter()
    dfa = WordDFA("ab")
    steps = dfa.trace("ab")
    formatter.print_trace(dfa, steps, dfa.is_accepting())
    text = console.export_text()
    assert "✓" in text


def test_print_trace_rejected_shows_trap():
    formatter, console = make_formatter()
    dfa = WordDFA("ab")
    steps = dfa.trace("ax")
    formatter.print_trace(dfa, steps, dfa.is_accepting())
    text = console.export_text()
    assert "trap" in text
    assert "✗" in text


def test_messages():
    formatter, console = make_formatter()
    formatter.print_error("boom")
    formatter.print_success("done")
    formatter.print_info("note")
    text = console.export_text()
    assert "boom" in text
    assert "done" in text
    assert "note" in text

"""
Tests for unrecognized input: error position, context and the raw driver
remainder.
"""

import sys
import os
project_root = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
sys.path.insert(0, project_root)

from hdl_lexer.lexer import lex, tokenize, LexerError
from hdl_lexer.tokens import TokenType as T


def test_unrecognized_character_raises():
    """Test: A character that starts no word and no symbol is an error"""
    try:
        lex("assign y = a ~ b;")
        assert False, "Expected LexerError"
    except LexerError as e:
        assert e.pos == 13
        assert (e.line, e.col) == (1, 14)
        assert "'~'" in str(e)
        print("✓ test_unrecognized_character_raises")


def test_error_keeps_tokens_before_failure():
    """Test: Tokens scanned before the failure are attached to the error"""
    try:
        lex("wire a; $display")
        assert False, "Expected LexerError"
    except LexerError as e:
        assert [t.type for t in e.tokens] == [T.WIRE, T.IDENT, T.SEMICOLON]
        print("✓ test_error_keeps_tokens_before_failure")


def test_error_shows_line_context():
    """Test: Error message includes filename, source line and caret"""
    source = "module m;\n  wire a # 1;\nendmodule"
    try:
        lex(source, filename="m.v")
        assert False, "Expected LexerError"
    except LexerError as e:
        msg = str(e)
        assert (e.line, e.col) == (2, 10)
        assert e.filename == "m.v"
        assert "m.v:L2:10" in msg
        assert "  wire a # 1;" in msg
        assert msg.splitlines()[-1] == "    " + " " * 9 + "^"
        print("✓ test_error_shows_line_context")


def test_error_caret_under_tab_indented_line():
    """Test: Caret padding keeps the line's tabs so it lines up"""
    source = "module m;\n\twire a # 1;\nendmodule"
    try:
        lex(source)
        assert False, "Expected LexerError"
    except LexerError as e:
        assert (e.line, e.col) == (2, 9)
        assert str(e).splitlines()[-1] == "    \t" + " " * 7 + "^"
        print("✓ test_error_caret_under_tab_indented_line")


def test_lone_bang_is_unrecognized():
    """Test: ! is only valid as part of !="""
    try:
        lex("if (!rst)")
        assert False, "Expected LexerError"
    except LexerError as e:
        assert e.col == 5
        print("✓ test_lone_bang_is_unrecognized")


def test_error_after_whitespace_points_at_character():
    """Test: The error position skips the whitespace before the bad character"""
    try:
        lex("a   \n\t  ?")
        assert False, "Expected LexerError"
    except LexerError as e:
        assert e.pos == 8
        assert (e.line, e.col) == (2, 4)
        print("✓ test_error_after_whitespace_points_at_character")


def test_tokenize_returns_remainder():
    """Test: Raw driver stops at unrecognized input and returns the rest"""
    tokens, rest = tokenize("reg r; `define W 8")
    assert [t.type for t in tokens] == [T.REG, T.IDENT, T.SEMICOLON]
    assert rest == "`define W 8"
    print("✓ test_tokenize_returns_remainder")


def test_tokenize_blank_input_remainder():
    """Test: Whitespace-only input is left as the remainder"""
    tokens, rest = tokenize("  \n ")
    assert tokens == []
    assert rest == "  \n "
    assert lex("  \n ") == []
    print("✓ test_tokenize_blank_input_remainder")


def run_all():
    """Run all error tests"""
    tests = [
        test_unrecognized_character_raises,
        test_error_keeps_tokens_before_failure,
        test_error_shows_line_context,
        test_error_caret_under_tab_indented_line,
        test_lone_bang_is_unrecognized,
        test_error_after_whitespace_points_at_character,
        test_tokenize_returns_remainder,
        test_tokenize_blank_input_remainder,
    ]

    passed = 0
    failed = 0

    for test in tests:
        try:
            test()
            passed += 1
        except Exception as e:
            print(f"✗ {test.__name__}: {e}")
            failed += 1
            import traceback
            traceback.print_exc()

    print(f"\n{'='*50}")
    print(f"Error Tests: {passed} passed, {failed} failed, {passed+failed} total")

    if failed:
        sys.exit(1)


if __name__ == "__main__":
    print("Running error tests...\n")
    run_all()

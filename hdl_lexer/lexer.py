"""
Hand-written lexer for the Verilog-like module subset.

Handles:
  - Keywords, identifiers and number literals, all scanned as one "word"
    (alphanumerics, '_' and the tick ') and classified afterwards, so
    sized literals such as 8'hff stay a single token
  - Single and two-character operators, longest spelling first
  - Whitespace between tokens (space, tab, CR, LF)

Comments and compiler directives are not recognized.
"""

from typing import Optional

from hdl_lexer.tokens import (
    Token, TokenType, KEYWORDS, SYMBOLS,
    WORD_EXTRA_CHARS, NUMBER_CHARS, WHITESPACE,
)


# Longest spellings first so "<=" is never split into "<" "=".
_SYMBOLS_LONGEST_FIRST = sorted(SYMBOLS.items(), key=lambda item: -len(item[0]))


class LexerError(Exception):
    """No word or symbol can be scanned at ``pos``."""

    def __init__(self, msg: str, source: str, pos: int, line: int, col: int,
                 filename: str = "<input>", tokens: Optional[list[Token]] = None):
        context = _source_context(source, line, col)
        super().__init__(f"Lexer error at {filename}:L{line}:{col}: {msg}\n{context}")
        self.pos = pos
        self.line = line
        self.col = col
        self.filename = filename
        self.tokens = tokens or []


def _source_context(source: str, line: int, col: int) -> str:
    """The offending source line with a caret under ``col``."""
    lines = source.split("\n")
    text = lines[line - 1].rstrip("\r") if line - 1 < len(lines) else ""
    # Keep tabs in the padding so the caret lines up with the source
    pad = "".join(ch if ch == "\t" else " " for ch in text[:col - 1])
    return f"    {text}\n    {pad}^"


def is_word_char(ch: str) -> bool:
    return ch.isalnum() or ch in WORD_EXTRA_CHARS


def classify_word(word: str) -> TokenType:
    """Keyword if the whole word is one, else NUMBER or IDENT by character set.

    Any word built only from hex digits, the radix letters b/h/d/o and
    the tick is a number, so 8'hff, 4'b1010 and 42 are numbers, but so
    is an identifier like ``deadbeef``. Literals containing x/z digits
    or '_' separators come out as identifiers.
    """
    tt = KEYWORDS.get(word)
    if tt is not None:
        return tt
    if all(ch in NUMBER_CHARS for ch in word):
        return TokenType.NUMBER
    return TokenType.IDENT


class Lexer:
    def __init__(self, source: str, filename: str = "<input>"):
        self.source = source
        self.filename = filename
        self.pos = 0
        self.line = 1
        self.col = 1
        self.tokens: list[Token] = []

    def _peek(self, offset=0) -> str:
        p = self.pos + offset
        if p < len(self.source):
            return self.source[p]
        return "\0"

    def _advance(self) -> str:
        ch = self.source[self.pos]
        self.pos += 1
        if ch == "\n":
            self.line += 1
            self.col = 1
        else:
            self.col += 1
        return ch

    def _at_end(self) -> bool:
        return self.pos >= len(self.source)

    def _mark(self) -> tuple[int, int, int]:
        return (self.pos, self.line, self.col)

    def _reset(self, mark: tuple[int, int, int]):
        self.pos, self.line, self.col = mark

    def _skip_whitespace(self):
        while not self._at_end() and self._peek() in WHITESPACE:
            self._advance()

    def _make_token(self, tt: TokenType, start: int, line: int, col: int) -> Token:
        return Token(tt, self.source, start, self.pos, line, col)

    def _read_word(self):
        """Scan a maximal word and classify it. None if no word starts here."""
        if self._at_end() or not is_word_char(self._peek()):
            return None
        start, line, col = self._mark()
        while not self._at_end() and is_word_char(self._peek()):
            self._advance()
        tt = classify_word(self.source[start:self.pos])
        return self._make_token(tt, start, line, col)

    def _read_symbol(self):
        """Match a punctuation/operator spelling. None if nothing matches."""
        start, line, col = self._mark()
        for spelling, tt in _SYMBOLS_LONGEST_FIRST:
            if self.source.startswith(spelling, start):
                for _ in spelling:
                    self._advance()
                return self._make_token(tt, start, line, col)
        return None

    def _read_token(self):
        # Words first, so keywords and identifiers are never cut into symbols
        tok = self._read_word()
        if tok is None:
            tok = self._read_symbol()
        return tok

    def tokenize(self) -> tuple[list[Token], str]:
        """Scan tokens until none can be read.

        Returns the tokens and the unconsumed remainder of the source.
        The remainder starts where the failed attempt began, before any
        whitespace it skipped; it is empty when the whole input lexed.
        """
        self.tokens = []

        while True:
            mark = self._mark()
            self._skip_whitespace()
            tok = self._read_token()
            if tok is None:
                self._reset(mark)
                break
            self._skip_whitespace()
            self.tokens.append(tok)

        return self.tokens, self.source[self.pos:]


def tokenize(source: str) -> tuple[list[Token], str]:
    """Lex as far as possible: returns (tokens, remaining text)."""
    return Lexer(source).tokenize()


def lex(source: str, filename: str = "<input>") -> list[Token]:
    """Lex the whole source, raising LexerError on unrecognized input."""
    lexer = Lexer(source, filename)
    tokens, _ = lexer.tokenize()

    lexer._skip_whitespace()
    if not lexer._at_end():
        raise LexerError(
            f"Unrecognized input: {lexer._peek()!r}",
            source, lexer.pos, lexer.line, lexer.col,
            filename=filename, tokens=tokens,
        )
    return tokens

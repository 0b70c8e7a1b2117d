"""
Token types for the Verilog-like module subset.

Tokens do not copy their text: each one records a half-open span
(start, end) into the source buffer it was lexed from, and ``value``
slices the buffer on demand.
"""

from enum import Enum, auto
from dataclasses import dataclass, field


class TokenType(Enum):
    # Literals
    NUMBER = auto()         # 7, 8'hff, 4'b1010, 'h1A
    IDENT = auto()          # data_in

    # Keywords
    MODULE = auto()
    ENDMODULE = auto()
    INPUT = auto()
    OUTPUT = auto()
    REG = auto()
    WIRE = auto()
    BEGIN = auto()
    END = auto()
    IF = auto()
    ELSE = auto()
    ALWAYS = auto()
    POSEDGE = auto()
    NEGEDGE = auto()
    ASSIGN = auto()

    # Operators
    PLUS = auto()           # +
    MINUS = auto()          # -
    STAR = auto()           # *
    SLASH = auto()          # /
    PERCENT = auto()        # %
    AMP = auto()            # &
    PIPE = auto()           # |
    CARET = auto()          # ^
    LSHIFT = auto()         # <<
    RSHIFT = auto()         # >>

    LAND = auto()           # &&
    LOR = auto()            # ||

    EQ = auto()             # ==
    NEQ = auto()            # !=
    LT = auto()             # <
    LE = auto()             # =<  (not <=, which is NONBLOCK_ASSIGN)
    GT = auto()             # >
    GE = auto()             # =>

    NONBLOCK_ASSIGN = auto()  # <=
    ASSIGN_OP = auto()      # = (blocking assignment)

    # Delimiters
    COLON = auto()          # :
    AT = auto()             # @
    LPAREN = auto()         # (
    RPAREN = auto()         # )
    LBRACKET = auto()       # [
    RBRACKET = auto()       # ]
    SEMICOLON = auto()      # ;
    COMMA = auto()          # ,


@dataclass(frozen=True, eq=False)
class Token:
    type: TokenType
    source: str = field(repr=False)
    start: int
    end: int
    line: int
    col: int

    @property
    def value(self) -> str:
        """The matched text, sliced from the source buffer."""
        return self.source[self.start:self.end]

    @property
    def is_keyword(self) -> bool:
        return self.type in KEYWORD_TYPES

    @property
    def is_literal(self) -> bool:
        return self.type in (TokenType.IDENT, TokenType.NUMBER)

    def _key(self):
        return (self.type, self.value, self.start, self.end, self.line, self.col)

    def __eq__(self, other):
        if not isinstance(other, Token):
            return NotImplemented
        return self._key() == other._key()

    def __hash__(self):
        return hash(self._key())

    def __repr__(self):
        return f"Token({self.type.name}, {self.value!r}, L{self.line}:{self.col})"


# Keyword lookup table
KEYWORDS: dict[str, TokenType] = {
    "module": TokenType.MODULE,
    "endmodule": TokenType.ENDMODULE,
    "input": TokenType.INPUT,
    "output": TokenType.OUTPUT,
    "reg": TokenType.REG,
    "wire": TokenType.WIRE,
    "begin": TokenType.BEGIN,
    "end": TokenType.END,
    "if": TokenType.IF,
    "else": TokenType.ELSE,
    "always": TokenType.ALWAYS,
    "posedge": TokenType.POSEDGE,
    "negedge": TokenType.NEGEDGE,
    "assign": TokenType.ASSIGN,
}

KEYWORD_TYPES = frozenset(KEYWORDS.values())


# Punctuation and operator spellings. Order here is irrelevant: the lexer
# always tries longer spellings first.
SYMBOLS: dict[str, TokenType] = {
    "==": TokenType.EQ,
    "!=": TokenType.NEQ,
    "=<": TokenType.LE,
    "=>": TokenType.GE,
    "&&": TokenType.LAND,
    "||": TokenType.LOR,
    "<<": TokenType.LSHIFT,
    ">>": TokenType.RSHIFT,
    "<=": TokenType.NONBLOCK_ASSIGN,
    ",": TokenType.COMMA,
    ";": TokenType.SEMICOLON,
    ":": TokenType.COLON,
    "@": TokenType.AT,
    "(": TokenType.LPAREN,
    ")": TokenType.RPAREN,
    "[": TokenType.LBRACKET,
    "]": TokenType.RBRACKET,
    "+": TokenType.PLUS,
    "-": TokenType.MINUS,
    "*": TokenType.STAR,
    "/": TokenType.SLASH,
    "%": TokenType.PERCENT,
    "&": TokenType.AMP,
    "|": TokenType.PIPE,
    "^": TokenType.CARET,
    "<": TokenType.LT,
    ">": TokenType.GT,
    "=": TokenType.ASSIGN_OP,
}


# Characters that may appear in a word (identifier, keyword or number)
WORD_EXTRA_CHARS = "_'"

# A word made only of these is classified as a number
NUMBER_CHARS = frozenset("0123456789abcdefABCDEF" "bhdo'")

WHITESPACE = " \t\r\n"

"""
Syntax tree data model for the module parser.

Only the shape is defined here; nothing builds these nodes yet. A parser
will consume the token list from ``hdl_lexer.lexer.lex`` and hang each
token on a node.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Optional

from hdl_lexer.tokens import Token


@dataclass
class Node:
    """One token plus its children (None for a leaf)."""
    token: Token
    children: Optional[list[Node]] = None


@dataclass
class Ast:
    root: Node

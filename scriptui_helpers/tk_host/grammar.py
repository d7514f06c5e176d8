"""Parser for the resource-string grammar.

Accepted grammar (the subset this package emits)::

    resource := TYPE '{' members '}'
    members  := [ member { ',' member } [ ',' ] ]
    member   := NAME ':' ( TYPE '{' members '}' | value )
    value    := STRING | NUMBER | 'true' | 'false' | IDENT | '[' [ value { ',' value } ] ']'

Errors report positions the way script hosts do: 1-based line and 0-based
character offset within that line.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Iterator, List, Optional

from ..errors import ScriptUIHelperError

_PUNCT = "{}[]:,"


class ResourceParseError(ScriptUIHelperError):
    def __init__(self, reason: str, line: int, offset: int):
        self.reason = reason
        self.line = line
        self.offset = offset
        self.description = f"Error in line {line}, at character offset {offset}, {reason}"
        super().__init__(self.description)


@dataclass
class Token:
    kind: str  # punct, string, number, ident, eof
    value: Any
    line: int
    offset: int


@dataclass
class ResourceNode:
    type: str
    name: Optional[str] = None
    props: Dict[str, Any] = field(default_factory=dict)
    children: List["ResourceNode"] = field(default_factory=list)
    line: int = 1
    offset: int = 0

    def walk(self) -> Iterator["ResourceNode"]:
        yield self
        for child in self.children:
            yield from child.walk()

    def find(self, name: str) -> Optional["ResourceNode"]:
        for node in self.walk():
            if node.name == name:
                return node
        return None


_ESCAPES = {"n": "\n", "t": "\t", "r": "\r", "\\": "\\", "'": "'", '"': '"'}


def tokenize(text: str) -> List[Token]:
    tokens: List[Token] = []
    i = 0
    line = 1
    line_start = 0
    n = len(text)

    while i < n:
        ch = text[i]
        if ch == "\n":
            i += 1
            line += 1
            line_start = i
            continue
        if ch.isspace():
            i += 1
            continue

        col = i - line_start
        if ch in _PUNCT:
            tokens.append(Token("punct", ch, line, col))
            i += 1
        elif ch in "'\"":
            quote = ch
            i += 1
            buf: List[str] = []
            while True:
                if i >= n or text[i] == "\n":
                    raise ResourceParseError("unterminated string", line, col)
                c = text[i]
                if c == "\\" and i + 1 < n:
                    buf.append(_ESCAPES.get(text[i + 1], text[i + 1]))
                    i += 2
                    continue
                if c == quote:
                    i += 1
                    break
                buf.append(c)
                i += 1
            tokens.append(Token("string", "".join(buf), line, col))
        elif ch.isdigit() or (ch in "-." and i + 1 < n and (text[i + 1].isdigit() or text[i + 1] == ".")):
            j = i + 1
            while j < n and (text[j].isdigit() or text[j] == "."):
                j += 1
            raw = text[i:j]
            try:
                value: Any = float(raw) if "." in raw else int(raw)
            except ValueError:
                raise ResourceParseError(f"bad number {raw!r}", line, col) from None
            tokens.append(Token("number", value, line, col))
            i = j
        elif ch.isalpha() or ch in "_$":
            j = i + 1
            while j < n and (text[j].isalnum() or text[j] in "_$"):
                j += 1
            tokens.append(Token("ident", text[i:j], line, col))
            i = j
        else:
            raise ResourceParseError(f"unexpected character {ch!r}", line, col)

    tokens.append(Token("eof", None, line, i - line_start))
    return tokens


class _Parser:
    def __init__(self, tokens: List[Token]):
        self.tokens = tokens
        self.pos = 0

    def peek(self, ahead: int = 0) -> Token:
        return self.tokens[min(self.pos + ahead, len(self.tokens) - 1)]

    def next(self) -> Token:
        tok = self.peek()
        self.pos += 1
        return tok

    def fail(self, tok: Token, expected: str) -> ResourceParseError:
        got = "end of input" if tok.kind == "eof" else repr(tok.value)
        return ResourceParseError(f"expected {expected}, got {got}", tok.line, tok.offset)

    def expect_punct(self, ch: str) -> Token:
        tok = self.next()
        if tok.kind != "punct" or tok.value != ch:
            raise self.fail(tok, repr(ch))
        return tok

    def expect_ident(self, what: str) -> Token:
        tok = self.next()
        if tok.kind != "ident":
            raise self.fail(tok, what)
        return tok

    def is_punct(self, tok: Token, ch: str) -> bool:
        return tok.kind == "punct" and tok.value == ch

    def parse_resource(self) -> ResourceNode:
        type_tok = self.expect_ident("element type")
        node = self.parse_element(type_tok, name=None)
        tok = self.peek()
        if tok.kind != "eof":
            raise self.fail(tok, "end of input")
        return node

    def parse_element(self, type_tok: Token, name: Optional[str]) -> ResourceNode:
        node = ResourceNode(type=type_tok.value, name=name, line=type_tok.line, offset=type_tok.offset)
        self.expect_punct("{")
        while not self.is_punct(self.peek(), "}"):
            self.parse_member(node)
            tok = self.peek()
            if self.is_punct(tok, ","):
                self.next()
            elif not self.is_punct(tok, "}"):
                raise self.fail(tok, "',' or '}'")
        self.expect_punct("}")
        return node

    def parse_member(self, parent: ResourceNode) -> None:
        name_tok = self.expect_ident("property or element name")
        self.expect_punct(":")
        tok = self.peek()
        if tok.kind == "ident" and self.is_punct(self.peek(1), "{"):
            self.next()
            parent.children.append(self.parse_element(tok, name=name_tok.value))
        else:
            parent.props[name_tok.value] = self.parse_value()

    def parse_value(self) -> Any:
        tok = self.next()
        if tok.kind in ("string", "number"):
            return tok.value
        if tok.kind == "ident":
            if tok.value == "true":
                return True
            if tok.value == "false":
                return False
            return tok.value
        if self.is_punct(tok, "["):
            items: List[Any] = []
            while not self.is_punct(self.peek(), "]"):
                items.append(self.parse_value())
                if self.is_punct(self.peek(), ","):
                    self.next()
                elif not self.is_punct(self.peek(), "]"):
                    raise self.fail(self.peek(), "',' or ']'")
            self.next()
            return items
        raise self.fail(tok, "value")


def parse_resource(text: str) -> ResourceNode:
    """Parse a resource string into a :class:`ResourceNode` tree."""
    return _Parser(tokenize(text or "")).parse_resource()


__all__ = ["ResourceNode", "ResourceParseError", "Token", "parse_resource", "tokenize"]

"""
Generic document tree built from the token stream.

The tree mirrors the input nesting exactly; no reordering, deduplication or
validation beyond structural well-formedness happens here. Cardinality and
type checks are left to the binder.
"""

import logging
from collections import deque
from dataclasses import dataclass
from typing import Deque, Iterable, Iterator, List, Tuple, Union

from .errors import MalformedLine, UnexpectedCloseTag, UnexpectedEndOfInput
from .tags import ContainerTag, ValueTag
from .tokens import ContainerClose, ContainerOpen, RawText, TextBlock, Token, Value

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ContainerNode:
    tag: ContainerTag
    children: Tuple["GenericNode", ...]


@dataclass(frozen=True)
class ValueNode:
    tag: ValueTag
    value: str


@dataclass(frozen=True)
class TextNode:
    text: str


@dataclass(frozen=True)
class EmptyNode:
    """Returned when the token stream is already exhausted."""


GenericNode = Union[ContainerNode, ValueNode, TextNode, EmptyNode]


def parse_node(tokens: Deque[Token]) -> GenericNode:
    """
    Consume one node from the front of `tokens`.

    Args:
        tokens: Remaining token stream; consumed in place.

    Returns:
        The parsed node, or EmptyNode when no tokens are left.

    Raises:
        UnexpectedEndOfInput: A container is never closed.
        UnexpectedCloseTag: A close tag where a node is expected, or a close
            tag that does not match the innermost open container.
        MalformedLine: A continuation line with no value line before it.
    """
    if not tokens:
        return EmptyNode()

    token = tokens.popleft()

    if isinstance(token, ContainerOpen):
        return _parse_container(token.tag, tokens)

    if isinstance(token, ContainerClose):
        raise UnexpectedCloseTag(token.tag)

    if isinstance(token, Value):
        parts = [token.raw] if token.raw else []
        while tokens and isinstance(tokens[0], RawText):
            parts.append(tokens.popleft().raw)
        return ValueNode(token.tag, ' '.join(parts))

    if isinstance(token, TextBlock):
        return TextNode(token.raw)

    raise MalformedLine(token.raw, "continuation line without a preceding value")


def build_forest(tokens: Iterable[Token]) -> List[GenericNode]:
    """Parse top-level nodes until the token stream is exhausted."""
    queue = deque(tokens)
    nodes = []
    while queue:
        nodes.append(parse_node(queue))
    return nodes


def flatten(node: GenericNode) -> Iterator[Token]:
    """
    Re-serialise a tree into the token sequence it was built from.

    Continuation lines come back merged into their value token.
    """
    if isinstance(node, ContainerNode):
        yield ContainerOpen(node.tag)
        for child in node.children:
            yield from flatten(child)
        yield ContainerClose(node.tag)
    elif isinstance(node, ValueNode):
        yield Value(node.tag, node.value)
    elif isinstance(node, TextNode):
        yield TextBlock(node.text)


def _parse_container(tag: ContainerTag, tokens: Deque[Token]) -> ContainerNode:
    children = []
    while tokens:
        head = tokens[0]
        if isinstance(head, ContainerClose):
            if head.tag is not tag:
                raise UnexpectedCloseTag(head.tag, expected=tag)
            tokens.popleft()
            return ContainerNode(tag, tuple(children))
        children.append(parse_node(tokens))

    raise UnexpectedEndOfInput(tag)

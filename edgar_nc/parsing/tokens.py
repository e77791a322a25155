"""
Lexer for EDGAR `.nc` submission archives.

Turns the raw archive into a flat token stream. The format is line oriented:

    <SUBMISSION>                open tag      -> ContainerOpen
    <ACCESSION-NUMBER>0000-1    value tag     -> Value
    <DELETION>                  presence flag -> Value with empty data
    </SUBMISSION>               close tag     -> ContainerClose

The body of a <TEXT> block is captured verbatim up to a line that is exactly
</TEXT>, because attachments (uuencoded PDFs, nested markup) contain
tag-like strings that must not be tokenized.
"""

import logging
from dataclasses import dataclass
from typing import Iterable, Iterator, List, Optional, Tuple, Union

from .errors import InvalidContainerTag, MalformedLine, UnexpectedEndOfInput
from .tags import ContainerTag, ValueTag

logger = logging.getLogger(__name__)

_TEXT_CLOSE = "</TEXT>"


# ---------------------------------------------------------------------------
# Tokens
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class ContainerOpen:
    tag: ContainerTag


@dataclass(frozen=True)
class ContainerClose:
    tag: ContainerTag


@dataclass(frozen=True)
class Value:
    tag: ValueTag
    raw: str


@dataclass(frozen=True)
class TextBlock:
    """Verbatim body of a <TEXT> block, line endings included."""
    raw: str


@dataclass(frozen=True)
class RawText:
    """A bare line continuing the preceding value line."""
    raw: str


Token = Union[ContainerOpen, ContainerClose, Value, TextBlock, RawText]


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

def tokenize(source: Union[str, Iterable[str]], allow_continuation: bool = True) -> List[Token]:
    """
    Tokenize a complete submission.

    Args:
        source: Full archive text, or any iterable of lines (e.g. an open file).
        allow_continuation: Accept bare lines directly after a value line as
            RawText continuations. When False every bare line is malformed.

    Returns:
        Ordered list of tokens.

    Raises:
        MalformedLine: A line without the <...> shape.
        InvalidContainerTag / InvalidValueTag: Unknown tag name.
        UnexpectedEndOfInput: A <TEXT> block that is never closed.

    Example:
        >>> tokenize("<SUBMISSION>\\n<TYPE>10-K\\n</SUBMISSION>\\n")
        [ContainerOpen(tag=<ContainerTag.SUBMISSION: 'SUBMISSION'>), ...]
    """
    tokens = list(iter_tokens(source, allow_continuation=allow_continuation))
    logger.debug("Tokenized submission into %d tokens", len(tokens))
    return tokens


def iter_tokens(
    source: Union[str, Iterable[str]],
    allow_continuation: bool = True,
) -> Iterator[Token]:
    """Lazily yield tokens from `source`; see tokenize() for semantics."""
    if isinstance(source, str):
        source = source.splitlines(keepends=True)

    lines = enumerate(source, 1)
    previous: Optional[Token] = None

    for line_number, raw_line in lines:
        line = raw_line.strip()
        if not line:
            continue

        if not line.startswith('<'):
            if allow_continuation and isinstance(previous, (Value, RawText)):
                previous = RawText(line)
                yield previous
                continue
            raise MalformedLine(line, "expected line to start with '<'", line_number)

        closing, name, value = parse_line(line, line_number)

        if name == ContainerTag.TEXT.value and not closing:
            if value:
                raise MalformedLine(line, "<TEXT> must be alone on its line", line_number)
            previous = TextBlock(_capture_text(lines))
        else:
            previous = _classify(closing, name, value, line, line_number)
        yield previous


def parse_line(line: str, line_number: Optional[int] = None) -> Tuple[bool, str, str]:
    """
    Split a stripped line into (closing, tag name, value).

    Raises:
        MalformedLine: No '<' prefix, no '>', or a close tag with trailing data.
    """
    if not line.startswith('<'):
        raise MalformedLine(line, "expected line to start with '<'", line_number)

    end_idx = line.find('>')
    if end_idx == -1:
        raise MalformedLine(line, "line does not contain '>'", line_number)

    value = line[end_idx + 1:]
    if line.startswith('</'):
        if value:
            raise MalformedLine(line, "unexpected value after closing tag", line_number)
        return True, line[2:end_idx], value

    return False, line[1:end_idx], value


# ---------------------------------------------------------------------------
# Private helpers
# ---------------------------------------------------------------------------

def _classify(closing: bool, name: str, value: str, line: str, line_number: int) -> Token:
    """Resolve a tag name against the container, then the value vocabulary."""
    container = ContainerTag.lookup(name)
    if container is not None:
        if value:
            raise MalformedLine(line, f"container tag <{name}> carries a value", line_number)
        return ContainerClose(container) if closing else ContainerOpen(container)

    if closing:
        raise InvalidContainerTag(name)

    if not value and ValueTag.lookup(name) is None:
        # A bare <NAME> that is neither a container nor a flag
        raise InvalidContainerTag(name)

    return Value(ValueTag.parse(name), value)


def _capture_text(lines: Iterator[Tuple[int, str]]) -> str:
    """Collect raw lines up to the </TEXT> marker, keeping them verbatim."""
    body = []
    for _, raw_line in lines:
        if raw_line.rstrip('\r\n') == _TEXT_CLOSE:
            return ''.join(body)
        body.append(raw_line)
    raise UnexpectedEndOfInput(ContainerTag.TEXT)

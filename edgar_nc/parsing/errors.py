"""
Exception hierarchy for `.nc` submission parsing.

Every stage fails fast: the first error is raised to the caller and no
partial result is returned. All errors derive from ParseError, so callers
that process batches can skip a bad archive with a single except clause.
"""

from typing import Optional


class ParseError(ValueError):
    """Base class for all lexing, tree-building and binding errors."""


# ---------------------------------------------------------------------------
# Vocabulary / lexer errors
# ---------------------------------------------------------------------------

class InvalidContainerTag(ParseError):
    """A container tag name that is not part of the container vocabulary."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Invalid container tag: <{name}>")


class InvalidValueTag(ParseError):
    """A value tag name that is not part of the value vocabulary."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Invalid value tag: <{name}>")


class MalformedLine(ParseError):
    """A line that does not have the required <...> shape."""

    def __init__(self, line: str, reason: str, line_number: Optional[int] = None):
        self.line = line
        self.reason = reason
        self.line_number = line_number
        location = f"line {line_number}: " if line_number is not None else ""
        super().__init__(f"Malformed {location}{reason}: {line[:80]!r}")


# ---------------------------------------------------------------------------
# Tree builder errors
# ---------------------------------------------------------------------------

class UnexpectedEndOfInput(ParseError):
    """Input ended while a container (or TEXT block) was still open."""

    def __init__(self, tag):
        self.tag = tag
        super().__init__(f"Unexpected end of input inside <{tag.value}>")


class UnexpectedCloseTag(ParseError):
    """A close tag where a node was expected, or one not matching the open container."""

    def __init__(self, tag, expected=None):
        self.tag = tag
        self.expected = expected
        if expected is None:
            message = f"Unexpected close tag </{tag.value}>"
        else:
            message = f"Unexpected close tag </{tag.value}>, expected </{expected.value}>"
        super().__init__(message)


class UnexpectedRootTag(ParseError):
    """The document root is not a single <SUBMISSION> container."""


# ---------------------------------------------------------------------------
# Binder errors
# ---------------------------------------------------------------------------

class CardinalityViolation(ParseError):
    """A single-valued field was assigned twice, or a mandatory field is missing."""

    def __init__(self, entity: str, field: str, reason: str):
        self.entity = entity
        self.field = field
        self.reason = reason
        super().__init__(f"{entity}.{field}: {reason}")


class UnrecognizedChild(ParseError):
    """A child node whose tag is not legal for the enclosing entity."""

    def __init__(self, entity: str, child: str):
        self.entity = entity
        self.child = child
        super().__init__(f"{entity} does not accept child {child}")


class InvalidFieldValue(ParseError):
    """A leaf value that could not be converted to its declared type."""

    def __init__(self, value: str, expected: str, field: Optional[str] = None):
        self.value = value
        self.expected = expected
        self.field = field
        prefix = f"{field}: " if field else ""
        super().__init__(f"{prefix}expected {expected}, got {value!r}")


class DocumentCountMismatch(ParseError):
    """PUBLIC-DOCUMENT-COUNT disagrees with the number of parsed documents."""

    def __init__(self, declared: int, parsed: int):
        self.declared = declared
        self.parsed = parsed
        super().__init__(
            f"Submission declares {declared} public documents but contains {parsed}"
        )


# ---------------------------------------------------------------------------
# Document body errors
# ---------------------------------------------------------------------------

class MalformedDocumentBody(ParseError):
    """A body opened with a wrapper marker but is missing its closing marker."""


class BinaryDecodeFailure(ParseError):
    """A uuencoded payload could not be decoded."""

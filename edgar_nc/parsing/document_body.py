"""
Decoding of <TEXT> payloads attached to documents.

A payload is first classified by its outer wrapper:

    <XML> ... </XML>     -> DataType.XML
    <PDF> ... </PDF>     -> DataType.PDF
    <XBRL> ... </XBRL>   -> DataType.XBRL
    anything else        -> DataType.PLAINTEXT

The unwrapped content is then either a uuencoded attachment (starting with
`begin 644 <filename>`), decoded into raw bytes, or plain text kept verbatim.
"""

import binascii
import logging
import re
from typing import List, Tuple

from .errors import BinaryDecodeFailure, MalformedDocumentBody
from .models import BinaryBody, DataType, DocumentBody, TextBody, TypedData

logger = logging.getLogger(__name__)

UUENCODE_MARKER = "begin 644"

_WRAPPERS: List[Tuple[str, str, DataType]] = [
    ('<XML>',  '</XML>',  DataType.XML),
    ('<PDF>',  '</PDF>',  DataType.PDF),
    ('<XBRL>', '</XBRL>', DataType.XBRL),
]

_UU_HEADER_PAT = re.compile(r'^begin\s+[0-7]{3,4}\s+(.+?)\s*$')
_UU_END = 'end'


def decode_typed_data(text: str) -> TypedData:
    """
    Classify and decode the raw content of a <TEXT> block.

    Args:
        text: Verbatim <TEXT> body as captured by the lexer.

    Returns:
        TypedData with the wrapper classification and decoded body.

    Raises:
        MalformedDocumentBody: A wrapper marker without its closing marker.
        BinaryDecodeFailure: An invalid uuencoded attachment.
    """
    text = text.strip()

    for open_marker, close_marker, data_type in _WRAPPERS:
        if text.startswith(open_marker):
            if not text.endswith(close_marker):
                raise MalformedDocumentBody(
                    f"Body starts with {open_marker} but does not end with {close_marker}"
                )
            inner = text[len(open_marker):len(text) - len(close_marker)]
            logger.debug("Document body wrapped as %s", data_type.name)
            return TypedData(data_type=data_type, body=decode_body(inner))

    return TypedData(data_type=DataType.PLAINTEXT, body=decode_body(text))


def decode_body(text: str) -> DocumentBody:
    """Decode a uuencoded attachment, or keep the content verbatim as text."""
    if text.lstrip().startswith(UUENCODE_MARKER):
        filename, data = uudecode(text)
        logger.debug("Decoded uuencoded attachment %s (%d bytes)", filename, len(data))
        return BinaryBody(filename=filename, data=data)
    return TextBody(text=text)


def uudecode(text: str) -> Tuple[str, bytes]:
    """
    Decode a uuencoded payload.

    Args:
        text: Payload starting with a `begin <mode> <filename>` line and
            terminated by an `end` line.

    Returns:
        (filename, decoded bytes)

    Raises:
        BinaryDecodeFailure: Missing header or `end` line, or an undecodable line.

    Example:
        >>> uudecode("begin 644 cat.txt\\n#0V%T\\n`\\nend\\n")
        ('cat.txt', b'Cat')
    """
    lines = text.lstrip().splitlines()
    if not lines:
        raise BinaryDecodeFailure("Empty uuencoded payload")

    header = _UU_HEADER_PAT.match(lines[0])
    if not header:
        raise BinaryDecodeFailure(f"Missing uuencode header: {lines[0][:60]!r}")
    filename = header.group(1)

    chunks = []
    for line_number, line in enumerate(lines[1:], 2):
        if line.strip() == _UU_END:
            return filename, b''.join(chunks)
        if not line.strip():
            continue
        chunks.append(_decode_line(line, filename, line_number))

    raise BinaryDecodeFailure(f"Uuencoded payload {filename} has no 'end' line")


def _decode_line(line: str, filename: str, line_number: int) -> bytes:
    try:
        return binascii.a2b_uu(line)
    except (binascii.Error, ValueError):
        pass

    # Some encoders pad lines past their declared length; decode only the
    # characters the length byte accounts for, as the stdlib uu module did.
    nbytes = (((ord(line[0]) - 32) & 63) * 4 + 5) // 3
    try:
        return binascii.a2b_uu(line[:nbytes])
    except (binascii.Error, ValueError) as exc:
        raise BinaryDecodeFailure(
            f"Invalid uuencoded data in {filename} at line {line_number}: {exc}"
        ) from exc

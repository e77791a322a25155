"""
Pydantic models for documents attached to a submission.

Each <DOCUMENT> carries metadata (type, sequence, filename) and an optional
<TEXT> payload. The payload is classified by its outer wrapper and, when it
holds a uuencoded attachment, decoded to raw bytes.
"""

from enum import Enum
from typing import Annotated, Literal, Optional, Union

from pydantic import ConfigDict, Field

from .company import Record


class DataType(Enum):
    """Outer wrapper of a document payload."""
    PLAINTEXT = "Plain Text"
    XML = "XML"
    PDF = "PDF"
    XBRL = "XBRL"


class TextBody(Record):
    """Payload kept verbatim as text."""

    kind: Literal["text"] = "text"
    text: str

    def __len__(self) -> int:
        return len(self.text)

    def __str__(self) -> str:
        return f"Text data with {len(self.text)} characters"


class BinaryBody(Record):
    """Payload decoded from a uuencoded attachment."""
    model_config = ConfigDict(frozen=True, extra='forbid', ser_json_bytes='base64')

    kind: Literal["binary"] = "binary"
    filename: str
    data: bytes

    def __len__(self) -> int:
        return len(self.data)

    def __str__(self) -> str:
        return f"Binary file {self.filename} with {len(self.data)} bytes"


DocumentBody = Annotated[Union[TextBody, BinaryBody], Field(discriminator="kind")]


class TypedData(Record):
    """A classified document payload."""

    data_type: DataType
    body: DocumentBody

    def to_bytes(self, encoding: str = "latin-1") -> bytes:
        """Raw bytes of the payload; text bodies are encoded with `encoding`."""
        if isinstance(self.body, BinaryBody):
            return self.body.data
        return self.body.text.encode(encoding)


class Document(Record):
    """One <DOCUMENT> attached to a submission."""

    doc_type: str
    sequence: int
    filename: Optional[str] = None
    description: Optional[str] = None
    flawed: bool = False
    body: Optional[TypedData] = None

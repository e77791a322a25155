"""Parsing modules for EDGAR `.nc` submission archives

Pipeline Flow:
    1. Lex     → tokenize() → List[Token]
    2. Build   → build_forest() → GenericNode tree
    3. Bind    → bind_submission() → Submission
    4. Decode  → decode_typed_data() → TypedData (per <TEXT> block)

Quick Start:
    >>> from edgar_nc.parsing import parse_submission_file
    >>> submission = parse_submission_file("data/0000950123-21-000001.nc")
    >>> print(f"{submission.filing_type} filed {submission.filing_date}")
    >>> print(f"Documents: {len(submission)}")
"""

from .parser import SubmissionParser, parse_submission, parse_submission_file
from .tags import ContainerTag, ValueTag
from .tokens import tokenize
from .tree import build_forest, flatten
from .binder import bind_submission
from .document_body import decode_typed_data, uudecode
from .errors import (
    ParseError,
    InvalidContainerTag,
    InvalidValueTag,
    MalformedLine,
    UnexpectedEndOfInput,
    UnexpectedCloseTag,
    UnexpectedRootTag,
    CardinalityViolation,
    UnrecognizedChild,
    InvalidFieldValue,
    DocumentCountMismatch,
    MalformedDocumentBody,
    BinaryDecodeFailure,
)
from .models import Submission, Company, Document, TypedData, DataType

__all__ = [
    # Entry points
    'SubmissionParser',
    'parse_submission',
    'parse_submission_file',
    # Stages
    'tokenize',
    'build_forest',
    'flatten',
    'bind_submission',
    'decode_typed_data',
    'uudecode',
    # Vocabulary
    'ContainerTag',
    'ValueTag',
    # Errors
    'ParseError',
    'InvalidContainerTag',
    'InvalidValueTag',
    'MalformedLine',
    'UnexpectedEndOfInput',
    'UnexpectedCloseTag',
    'UnexpectedRootTag',
    'CardinalityViolation',
    'UnrecognizedChild',
    'InvalidFieldValue',
    'DocumentCountMismatch',
    'MalformedDocumentBody',
    'BinaryDecodeFailure',
    # Models
    'Submission',
    'Company',
    'Document',
    'TypedData',
    'DataType',
]

"""
Entry point for parsing one `.nc` submission archive.

Pipeline (strictly one way, single pass per stage):
    raw text -> tokenize() -> build_forest() -> bind_submission() -> Submission

Usage:
    >>> from edgar_nc.parsing import parse_submission_file
    >>> submission = parse_submission_file("data/0000950123-21-000001.nc")
    >>> submission.filing_type, len(submission.documents)
    ('10-K', 12)
"""

import logging
from pathlib import Path
from typing import Iterable, Optional, Union

from edgar_nc.config import ParserConfig, settings

from .binder import bind_submission
from .errors import UnexpectedRootTag
from .models import Submission
from .tags import ContainerTag
from .tokens import tokenize
from .tree import ContainerNode, build_forest

logger = logging.getLogger(__name__)


class SubmissionParser:
    """
    Parser for EDGAR `.nc` submission archives.

    Attributes:
        config: Parser settings (encoding, continuation lines)

    Example:
        >>> parser = SubmissionParser()
        >>> submission = parser.parse(text)
        >>> submission.accession_number
        '0000950123-21-000001'
    """

    def __init__(self, config: Optional[ParserConfig] = None):
        self.config = config or settings.parser

    def parse(self, source: Union[str, Iterable[str]]) -> Submission:
        """
        Parse one submission.

        Args:
            source: Full archive text or an iterable of its lines

        Returns:
            The typed Submission record

        Raises:
            ParseError: Any lexing, structural or binding error (first one wins)
        """
        tokens = tokenize(source, allow_continuation=self.config.allow_continuation_lines)
        roots = build_forest(tokens)

        if len(roots) != 1:
            raise UnexpectedRootTag(
                f"Expected a single <SUBMISSION> root, found {len(roots)} top-level nodes"
            )
        root = roots[0]
        if not isinstance(root, ContainerNode) or root.tag is not ContainerTag.SUBMISSION:
            raise UnexpectedRootTag(f"Expected <SUBMISSION> at the root, found {root!r:.80}")

        return bind_submission(root.children)

    def parse_file(self, file_path: Union[str, Path]) -> Submission:
        """
        Read and parse one archive file.

        Raises:
            FileNotFoundError: If the path does not exist
            ParseError: If the archive is malformed
        """
        file_path = Path(file_path)
        if not file_path.exists():
            raise FileNotFoundError(f"Submission archive not found: {file_path}")

        logger.debug("Parsing %s", file_path.name)
        with open(file_path, 'r', encoding=self.config.input_encoding, newline='') as f:
            return self.parse(f)


def parse_submission(source: Union[str, Iterable[str]]) -> Submission:
    """Parse one submission with the default settings."""
    return SubmissionParser().parse(source)


def parse_submission_file(file_path: Union[str, Path]) -> Submission:
    """Read and parse one archive file with the default settings."""
    return SubmissionParser().parse_file(file_path)

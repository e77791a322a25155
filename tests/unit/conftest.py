"""
Lightweight fixtures for unit tests - NO real data dependencies.
All fixtures build synthetic `.nc` archives in memory.
"""

from typing import Callable, List, Optional

import pytest

from edgar_nc.parsing.tokens import tokenize
from edgar_nc.parsing.tree import build_forest


ACCESSION_NUMBER = "0000950123-21-000001"

FILER_BLOCK = """\
<FILER>
<COMPANY-DATA>
<CONFORMED-NAME>ACME CORP
<CIK>0000123456
<ASSIGNED-SIC>3577
<IRS-NUMBER>123456789
<STATE-OF-INCORPORATION>DE
<FISCAL-YEAR-END>1231
</COMPANY-DATA>
<FILING-VALUES>
<FORM-TYPE>10-K
<ACT>34
<FILE-NUMBER>001-12345
<FILM-NUMBER>21700001
</FILING-VALUES>
<BUSINESS-ADDRESS>
<STREET1>1 MAIN ST
<CITY>SPRINGFIELD
<STATE>IL
<ZIP>62701
<PHONE>2175550100
</BUSINESS-ADDRESS>
<FORMER-COMPANY>
<FORMER-CONFORMED-NAME>ACME HOLDINGS INC
<DATE-CHANGED>20050615
</FORMER-COMPANY>
</FILER>
"""


def _document_block(doc: dict, sequence: int) -> str:
    lines = [
        "<DOCUMENT>",
        f"<TYPE>{doc.get('type', '10-K')}",
        f"<SEQUENCE>{doc.get('sequence', sequence)}",
        f"<FILENAME>{doc.get('filename', 'form10k.htm')}",
    ]
    if "description" in doc:
        lines.append(f"<DESCRIPTION>{doc['description']}")
    lines.append("<TEXT>")
    lines.append(doc.get("text", "<html>annual report</html>"))
    lines.append("</TEXT>")
    lines.append("</DOCUMENT>")
    return "\n".join(lines)


def build_submission(
    header_extra: str = "",
    documents: Optional[List[dict]] = None,
    document_count: Optional[int] = None,
    include_count: bool = True,
    include_filer: bool = True,
) -> str:
    """
    Build a minimal synthetic submission archive as text.

    Args:
        header_extra: Additional lines injected after the fixed header values.
        documents: List of dicts with keys: type, sequence, filename,
            description, text. Defaults to a single 10-K document.
        document_count: Declared PUBLIC-DOCUMENT-COUNT (defaults to len(documents)).
        include_count: Emit the PUBLIC-DOCUMENT-COUNT line at all.
        include_filer: Emit the ACME CORP <FILER> block.
    """
    if documents is None:
        documents = [{}]
    count = len(documents) if document_count is None else document_count

    lines = [
        "<SUBMISSION>",
        f"<ACCESSION-NUMBER>{ACCESSION_NUMBER}",
        "<TYPE>10-K",
    ]
    if include_count:
        lines.append(f"<PUBLIC-DOCUMENT-COUNT>{count}")
    lines.append("<FILING-DATE>20210301")
    if header_extra:
        lines.append(header_extra.rstrip("\n"))
    if include_filer:
        lines.append(FILER_BLOCK.rstrip("\n"))
    for idx, doc in enumerate(documents, 1):
        lines.append(_document_block(doc, idx))
    lines.append("</SUBMISSION>")
    return "\n".join(lines) + "\n"


# =============================================================================
# Archive Fixtures
# =============================================================================

@pytest.fixture
def make_submission() -> Callable[..., str]:
    """Factory for synthetic submission archives; see build_submission()."""
    return build_submission


@pytest.fixture
def minimal_submission_text() -> str:
    """One filer, one 10-K document."""
    return build_submission()


# =============================================================================
# Tree Fixtures
# =============================================================================

@pytest.fixture
def node_children() -> Callable[[str], tuple]:
    """Tokenize a single container snippet and return its children."""
    def _children(text: str) -> tuple:
        (root,) = build_forest(tokenize(text))
        return root.children
    return _children

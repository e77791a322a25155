"""
Pydantic model for the root of a parsed `.nc` archive.

A Submission describes one filing event: its header values, the companies
involved in each role, the attached documents and, for fund filings, the
series/class contract data. A submission may hold a complete nested
submission as its confirming copy.
"""

from datetime import date, datetime
from typing import List, Optional

from pydantic import Field

from .company import Company, Record
from .document import Document
from .series import SeriesAndClassesContractsData


class Submission(Record):
    """
    Root record of the typed model.

    Attributes:
        accession_number: Unique filing identifier, e.g. "0000950123-21-000001"
        filing_type: Form type of the submission (<TYPE>), e.g. "10-K"
        filing_date: Date the filing was accepted
        public_document_count: Declared number of <DOCUMENT> children
        documents: Attached documents in input order
        confirming_copy: Nested submission carried in <CONFIRMING-COPY>
        paper: True when the header was wrapped in a <PAPER> block
    """

    accession_number: str
    filing_type: str
    filing_date: date
    public_document_count: Optional[int] = None
    items: List[str] = Field(default_factory=list)
    group_members: List[str] = Field(default_factory=list)

    # Dates
    date_of_filing_date_change: Optional[date] = None
    effectiveness_date: Optional[date] = None
    period: Optional[date] = None
    action_date: Optional[date] = None
    received_date: Optional[date] = None
    period_start: Optional[date] = None
    public_rel_date: Optional[date] = None
    timestamp: Optional[datetime] = None

    # Companies by role
    filers: List[Company] = Field(default_factory=list)
    reporting_owners: List[Company] = Field(default_factory=list)
    subject_companies: List[Company] = Field(default_factory=list)
    filed_for: List[Company] = Field(default_factory=list)
    filed_by: List[Company] = Field(default_factory=list)
    issuer: Optional[Company] = None
    depositor: Optional[Company] = None
    securitizer: Optional[Company] = None

    documents: List[Document] = Field(default_factory=list)
    series_and_classes_contracts_data: Optional[SeriesAndClassesContractsData] = None

    # Registration statement flags
    is_filer_a_new_registrant: Optional[bool] = None
    is_filer_a_well_known_seasoned_issuer: Optional[bool] = None
    filed_pursuant_to_general_instruction_a2: Optional[bool] = None
    is_fund_24f2_eligible: Optional[bool] = None
    registered_entity: Optional[bool] = None

    # Asset-backed securities
    abs_rule: Optional[str] = None
    abs_asset_class: Optional[str] = None
    no_quarterly_activity: Optional[bool] = None
    no_annual_activity: Optional[bool] = None
    depositor_cik: Optional[str] = None
    sponsor_cik: Optional[str] = None
    securitizer_cik: Optional[str] = None
    issuing_entity_cik: Optional[str] = None
    issuing_entity_name: Optional[str] = None
    securitizer_file_number: Optional[str] = None
    depositor_file_number: Optional[str] = None

    # Miscellaneous header values
    reference_462b: Optional[str] = None
    references_429: Optional[str] = None
    ma_i_individual: Optional[str] = None
    category: Optional[str] = None
    public_reference_acc: Optional[str] = None
    sros: Optional[str] = None
    previous_accession_number: Optional[str] = None

    # Presence flags
    private_to_public: bool = False
    deletion: bool = False
    correction: bool = False
    paper: bool = False

    confirming_copy: Optional["Submission"] = None

    def __len__(self) -> int:
        """Return number of attached documents"""
        return len(self.documents)

    def get_document(self, sequence: int) -> Optional[Document]:
        """Find a document by its sequence number."""
        for document in self.documents:
            if document.sequence == sequence:
                return document
        return None


Submission.model_rebuild()

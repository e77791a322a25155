"""
Closed tag vocabularies of the EDGAR `.nc` submission format.

Container tags introduce nested entities (<FILER> ... </FILER>); value tags
carry a single scalar on the same line (<CIK>0000123456). A name outside
both vocabularies is a hard error.

Usage:
    >>> from edgar_nc.parsing.tags import ContainerTag, ValueTag
    >>> ContainerTag.parse("FILER")
    <ContainerTag.FILER: 'FILER'>
    >>> ValueTag.parse("CIK").value
    'CIK'
"""

from enum import Enum
from typing import Optional

from .errors import InvalidContainerTag, InvalidValueTag


class ContainerTag(Enum):
    """Tags whose content is a list of child nodes."""

    SUBMISSION = "SUBMISSION"
    PAPER = "PAPER"
    CONFIRMING_COPY = "CONFIRMING-COPY"

    # Filer entities
    FILER = "FILER"
    REPORTING_OWNER = "REPORTING-OWNER"
    ISSUER = "ISSUER"
    SUBJECT_COMPANY = "SUBJECT-COMPANY"
    FILED_BY = "FILED-BY"
    FILED_FOR = "FILED-FOR"
    DEPOSITOR = "DEPOSITOR"
    SECURITIZER = "SECURITIZER"

    # Company sub-blocks
    COMPANY_DATA = "COMPANY-DATA"
    OWNER_DATA = "OWNER-DATA"
    FILING_VALUES = "FILING-VALUES"
    BUSINESS_ADDRESS = "BUSINESS-ADDRESS"
    MAIL_ADDRESS = "MAIL-ADDRESS"
    FORMER_COMPANY = "FORMER-COMPANY"
    FORMER_NAME = "FORMER-NAME"

    # Documents; TEXT is captured verbatim by the lexer
    DOCUMENT = "DOCUMENT"
    TEXT = "TEXT"

    # Fund series / class contracts
    SERIES_AND_CLASSES_CONTRACTS_DATA = "SERIES-AND-CLASSES-CONTRACTS-DATA"
    EXISTING_SERIES_AND_CLASSES_CONTRACTS = "EXISTING-SERIES-AND-CLASSES-CONTRACTS"
    MERGER_SERIES_AND_CLASSES_CONTRACTS = "MERGER-SERIES-AND-CLASSES-CONTRACTS"
    NEW_SERIES_AND_CLASSES_CONTRACTS = "NEW-SERIES-AND-CLASSES-CONTRACTS"
    MERGER = "MERGER"
    ACQUIRING_DATA = "ACQUIRING-DATA"
    TARGET_DATA = "TARGET-DATA"
    SERIES = "SERIES"
    NEW_SERIES = "NEW-SERIES"
    NEW_CLASSES_CONTRACTS = "NEW-CLASSES-CONTRACTS"
    CLASS_CONTRACT = "CLASS-CONTRACT"

    @classmethod
    def lookup(cls, name: str) -> Optional["ContainerTag"]:
        """Return the tag for `name`, or None when it is not a container tag."""
        return _CONTAINER_BY_NAME.get(name)

    @classmethod
    def parse(cls, name: str) -> "ContainerTag":
        """Return the tag for `name`, raising InvalidContainerTag on no match."""
        tag = cls.lookup(name)
        if tag is None:
            raise InvalidContainerTag(name)
        return tag


class ValueTag(Enum):
    """Tags whose content is a single scalar on the tag's line."""

    # Submission header
    ACCESSION_NUMBER = "ACCESSION-NUMBER"
    TYPE = "TYPE"
    PUBLIC_DOCUMENT_COUNT = "PUBLIC-DOCUMENT-COUNT"
    ITEMS = "ITEMS"
    FILING_DATE = "FILING-DATE"
    DATE_OF_FILING_DATE_CHANGE = "DATE-OF-FILING-DATE-CHANGE"
    EFFECTIVENESS_DATE = "EFFECTIVENESS-DATE"
    PERIOD = "PERIOD"
    GROUP_MEMBERS = "GROUP-MEMBERS"
    REFERENCE_462B = "REFERENCE-462B"
    REFERENCES_429 = "REFERENCES-429"
    IS_FILER_A_NEW_REGISTRANT = "IS-FILER-A-NEW-REGISTRANT"
    IS_FILER_A_WELL_KNOWN_SEASONED_ISSUER = "IS-FILER-A-WELL-KNOWN-SEASONED-ISSUER"
    FILED_PURSUANT_TO_GENERAL_INSTRUCTION_A2 = "FILED-PURSUANT-TO-GENERAL-INSTRUCTION-A2"
    IS_FUND_24F2_ELIGIBLE = "IS-FUND-24F2-ELIGIBLE"
    ACTION_DATE = "ACTION-DATE"
    RECEIVED_DATE = "RECEIVED-DATE"
    MA_I_INDIVIDUAL = "MA-I_INDIVIDUAL"
    ABS_RULE = "ABS-RULE"
    PERIOD_START = "PERIOD-START"
    NO_QUARTERLY_ACTIVITY = "NO-QUARTERLY-ACTIVITY"
    NO_ANNUAL_ACTIVITY = "NO-ANNUAL-ACTIVITY"
    ABS_ASSET_CLASS = "ABS-ASSET-CLASS"
    DEPOSITOR_CIK = "DEPOSITOR-CIK"
    SPONSOR_CIK = "SPONSOR-CIK"
    CATEGORY = "CATEGORY"
    REGISTERED_ENTITY = "REGISTERED-ENTITY"
    SECURITIZER_CIK = "SECURITIZER-CIK"
    ISSUING_ENTITY_CIK = "ISSUING-ENTITY-CIK"
    ISSUING_ENTITY_NAME = "ISSUING-ENTITY-NAME"
    SECURITIZER_FILE_NUMBER = "SECURITIZER-FILE-NUMBER"
    DEPOSITOR_FILE_NUMBER = "DEPOSITOR-FILE-NUMBER"
    TIMESTAMP = "TIMESTAMP"
    PRIVATE_TO_PUBLIC = "PRIVATE-TO-PUBLIC"
    PUBLIC_REFERENCE_ACC = "PUBLIC-REFERENCE-ACC"
    PUBLIC_REL_DATE = "PUBLIC-REL-DATE"
    DELETION = "DELETION"
    CORRECTION = "CORRECTION"
    SROS = "SROS"
    PREVIOUS_ACCESSION_NUMBER = "PREVIOUS-ACCESSION-NUMBER"

    # Filing values
    FORM_TYPE = "FORM-TYPE"
    ACT = "ACT"
    FILE_NUMBER = "FILE-NUMBER"
    FILM_NUMBER = "FILM-NUMBER"

    # Company / owner data
    CONFORMED_NAME = "CONFORMED-NAME"
    CIK = "CIK"
    IRS_NUMBER = "IRS-NUMBER"
    STATE_OF_INCORPORATION = "STATE-OF-INCORPORATION"
    FISCAL_YEAR_END = "FISCAL-YEAR-END"
    ASSIGNED_SIC = "ASSIGNED-SIC"
    RELATIONSHIP = "RELATIONSHIP"

    # Addresses
    STREET1 = "STREET1"
    STREET2 = "STREET2"
    CITY = "CITY"
    STATE = "STATE"
    ZIP = "ZIP"
    PHONE = "PHONE"

    # Former names
    FORMER_CONFORMED_NAME = "FORMER-CONFORMED-NAME"
    DATE_CHANGED = "DATE-CHANGED"

    # Documents
    SEQUENCE = "SEQUENCE"
    FILENAME = "FILENAME"
    DESCRIPTION = "DESCRIPTION"
    FLAWED = "FLAWED"

    # Series / class contracts
    OWNER_CIK = "OWNER-CIK"
    SERIES_ID = "SERIES-ID"
    SERIES_NAME = "SERIES-NAME"
    CLASS_CONTRACT_ID = "CLASS-CONTRACT-ID"
    CLASS_CONTRACT_NAME = "CLASS-CONTRACT-NAME"
    CLASS_CONTRACT_TICKER_SYMBOL = "CLASS-CONTRACT-TICKER-SYMBOL"

    @classmethod
    def lookup(cls, name: str) -> Optional["ValueTag"]:
        """Return the tag for `name`, or None when it is not a value tag."""
        return _VALUE_BY_NAME.get(name)

    @classmethod
    def parse(cls, name: str) -> "ValueTag":
        """Return the tag for `name`, raising InvalidValueTag on no match."""
        tag = cls.lookup(name)
        if tag is None:
            raise InvalidValueTag(name)
        return tag


_CONTAINER_BY_NAME = {tag.value: tag for tag in ContainerTag}
_VALUE_BY_NAME = {tag.value: tag for tag in ValueTag}

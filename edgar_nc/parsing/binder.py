"""
Schema binder: generic tree -> typed Submission model.

One decoder per entity. Each decoder takes the ordered children of its
container node and scans them once through a FieldAccumulator driven by the
entity's field table, so the legal children and their cardinality are
declared in one place:

    _ADDRESS_FIELDS = {ValueTag.CITY: optional("city"), ...}

Nested containers are bound by passing the child decoder as the slot
converter, which makes the recursion follow the shape of the tree.
"""

import logging
from typing import Iterable, Iterator, Sequence

from .document_body import decode_typed_data
from .errors import DocumentCountMismatch
from .fields import FieldTable, flag, many, one, optional, scan_fields
from .models import (
    AcquiringData,
    Address,
    ClassContract,
    Company,
    CompanyData,
    Document,
    FilingValues,
    FormerCompany,
    Merger,
    MergerSeriesAndClassesContracts,
    NewSeriesAndClassesContracts,
    Series,
    SeriesAndClassesContracts,
    SeriesAndClassesContractsData,
    Submission,
    TargetData,
)
from .tags import ContainerTag, ValueTag
from .tree import ContainerNode, GenericNode
from .values import (
    parse_bool,
    parse_date,
    parse_int,
    parse_month_day,
    parse_timestamp,
)

logger = logging.getLogger(__name__)

Children = Sequence[GenericNode]


# ===========================
# Company entities
# ===========================

_FILING_VALUES_FIELDS: FieldTable = {
    ValueTag.FORM_TYPE: one("form_type"),
    ValueTag.ACT: optional("act"),
    ValueTag.FILE_NUMBER: optional("file_number"),
    ValueTag.FILM_NUMBER: optional("film_number"),
}

_COMPANY_DATA_FIELDS: FieldTable = {
    ValueTag.CONFORMED_NAME: one("conformed_name"),
    ValueTag.CIK: one("cik"),
    ValueTag.IRS_NUMBER: optional("irs_number"),
    ValueTag.STATE_OF_INCORPORATION: optional("state_of_incorporation"),
    ValueTag.FISCAL_YEAR_END: optional("fiscal_year_end", parse_month_day),
    ValueTag.ASSIGNED_SIC: optional("assigned_sic"),
    ValueTag.RELATIONSHIP: optional("relationship"),
}

_ADDRESS_FIELDS: FieldTable = {
    ValueTag.STREET1: optional("street1"),
    ValueTag.STREET2: optional("street2"),
    ValueTag.CITY: optional("city"),
    ValueTag.STATE: optional("state"),
    ValueTag.ZIP: optional("zip"),
    ValueTag.PHONE: optional("phone"),
}

_FORMER_COMPANY_FIELDS: FieldTable = {
    ValueTag.FORMER_CONFORMED_NAME: one("former_conformed_name"),
    ValueTag.DATE_CHANGED: one("date_changed", parse_date),
}


def bind_filing_values(children: Children) -> FilingValues:
    return FilingValues(**scan_fields("FilingValues", _FILING_VALUES_FIELDS, children))


def bind_company_data(children: Children) -> CompanyData:
    return CompanyData(**scan_fields("CompanyData", _COMPANY_DATA_FIELDS, children))


def bind_address(children: Children) -> Address:
    return Address(**scan_fields("Address", _ADDRESS_FIELDS, children))


def bind_former_company(children: Children) -> FormerCompany:
    return FormerCompany(**scan_fields("FormerCompany", _FORMER_COMPANY_FIELDS, children))


_COMPANY_FIELDS: FieldTable = {
    ContainerTag.COMPANY_DATA: optional("company_data", bind_company_data),
    ContainerTag.OWNER_DATA: optional("owner_data", bind_company_data),
    ContainerTag.FILING_VALUES: many("filing_values", bind_filing_values),
    ContainerTag.BUSINESS_ADDRESS: optional("business_address", bind_address),
    ContainerTag.MAIL_ADDRESS: optional("mail_address", bind_address),
    ContainerTag.FORMER_NAME: many("former_names", bind_former_company),
    ContainerTag.FORMER_COMPANY: many("former_companies", bind_former_company),
}


def bind_company(children: Children) -> Company:
    """Bind a filer-like container (FILER, REPORTING-OWNER, ISSUER, ...)."""
    return Company(**scan_fields("Company", _COMPANY_FIELDS, children))


# ===========================
# Documents
# ===========================

_DOCUMENT_FIELDS: FieldTable = {
    ValueTag.TYPE: one("doc_type"),
    ValueTag.SEQUENCE: one("sequence", parse_int),
    ValueTag.FILENAME: optional("filename"),
    ValueTag.DESCRIPTION: optional("description"),
    ValueTag.FLAWED: flag("flawed"),
    ContainerTag.TEXT: optional("body", decode_typed_data),
}


def bind_document(children: Children) -> Document:
    return Document(**scan_fields("Document", _DOCUMENT_FIELDS, children))


# ===========================
# Series and class contracts
# ===========================

_CLASS_CONTRACT_FIELDS: FieldTable = {
    ValueTag.CLASS_CONTRACT_ID: one("class_contract_id"),
    ValueTag.CLASS_CONTRACT_NAME: one("class_contract_name"),
    ValueTag.CLASS_CONTRACT_TICKER_SYMBOL: optional("class_contract_ticker_symbol"),
}


def bind_class_contract(children: Children) -> ClassContract:
    return ClassContract(**scan_fields("ClassContract", _CLASS_CONTRACT_FIELDS, children))


_SERIES_FIELDS: FieldTable = {
    ValueTag.OWNER_CIK: optional("owner_cik"),
    ValueTag.SERIES_ID: one("series_id"),
    ValueTag.SERIES_NAME: one("series_name"),
    ContainerTag.CLASS_CONTRACT: many("class_contracts", bind_class_contract),
}


def bind_series(children: Children) -> Series:
    return Series(**scan_fields("Series", _SERIES_FIELDS, children))


_ACQUIRING_DATA_FIELDS: FieldTable = {
    ValueTag.CIK: one("cik"),
    ContainerTag.SERIES: one("series", bind_series),
}

_TARGET_DATA_FIELDS: FieldTable = {
    ValueTag.CIK: one("cik"),
    ContainerTag.SERIES: many("series", bind_series),
}


def bind_acquiring_data(children: Children) -> AcquiringData:
    return AcquiringData(**scan_fields("AcquiringData", _ACQUIRING_DATA_FIELDS, children))


def bind_target_data(children: Children) -> TargetData:
    return TargetData(**scan_fields("TargetData", _TARGET_DATA_FIELDS, children))


_MERGER_FIELDS: FieldTable = {
    ContainerTag.ACQUIRING_DATA: one("acquiring_data", bind_acquiring_data),
    ContainerTag.TARGET_DATA: many("target_data", bind_target_data),
}


def bind_merger(children: Children) -> Merger:
    return Merger(**scan_fields("Merger", _MERGER_FIELDS, children))


_EXISTING_SERIES_FIELDS: FieldTable = {
    ContainerTag.SERIES: many("series", bind_series),
}

_MERGER_SERIES_FIELDS: FieldTable = {
    ContainerTag.MERGER: many("mergers", bind_merger),
}

_NEW_SERIES_FIELDS: FieldTable = {
    ValueTag.OWNER_CIK: optional("owner_cik"),
    ContainerTag.NEW_SERIES: many("new_series", bind_series),
    ContainerTag.NEW_CLASSES_CONTRACTS: many("new_classes_contracts", bind_series),
}


def bind_existing_series(children: Children) -> SeriesAndClassesContracts:
    return SeriesAndClassesContracts(
        **scan_fields("SeriesAndClassesContracts", _EXISTING_SERIES_FIELDS, children)
    )


def bind_merger_series(children: Children) -> MergerSeriesAndClassesContracts:
    return MergerSeriesAndClassesContracts(
        **scan_fields("MergerSeriesAndClassesContracts", _MERGER_SERIES_FIELDS, children)
    )


def bind_new_series(children: Children) -> NewSeriesAndClassesContracts:
    return NewSeriesAndClassesContracts(
        **scan_fields("NewSeriesAndClassesContracts", _NEW_SERIES_FIELDS, children)
    )


_SERIES_DATA_FIELDS: FieldTable = {
    ContainerTag.EXISTING_SERIES_AND_CLASSES_CONTRACTS: optional(
        "existing_series_and_classes_contracts", bind_existing_series
    ),
    ContainerTag.MERGER_SERIES_AND_CLASSES_CONTRACTS: optional(
        "merger_series_and_classes_contracts", bind_merger_series
    ),
    ContainerTag.NEW_SERIES_AND_CLASSES_CONTRACTS: optional(
        "new_series_and_classes_contracts", bind_new_series
    ),
}


def bind_series_data(children: Children) -> SeriesAndClassesContractsData:
    return SeriesAndClassesContractsData(
        **scan_fields("SeriesAndClassesContractsData", _SERIES_DATA_FIELDS, children)
    )


# ===========================
# Submission (root)
# ===========================

def bind_submission(children: Children) -> Submission:
    """
    Bind the children of a <SUBMISSION> (or <CONFIRMING-COPY>) container.

    Children of a <PAPER> wrapper are bound as direct children of the
    submission and mark it as a paper filing. A <CONFIRMING-COPY> is bound
    recursively into a nested Submission.

    Raises:
        CardinalityViolation: Missing or duplicated single-valued field.
        UnrecognizedChild: A child that is not legal in a submission.
        DocumentCountMismatch: PUBLIC-DOCUMENT-COUNT differs from the
            number of <DOCUMENT> children.
    """
    paper = any(_is_paper(child) for child in children)
    fields = scan_fields("Submission", _SUBMISSION_FIELDS, _unwrap_paper(children))

    declared = fields.get("public_document_count")
    parsed = len(fields["documents"])
    if declared is not None and declared != parsed:
        raise DocumentCountMismatch(declared, parsed)

    logger.debug(
        "Bound submission %s with %d documents",
        fields.get("accession_number"), parsed,
    )
    return Submission(paper=paper, **fields)


def _is_paper(node: GenericNode) -> bool:
    return isinstance(node, ContainerNode) and node.tag is ContainerTag.PAPER


def _unwrap_paper(children: Iterable[GenericNode]) -> Iterator[GenericNode]:
    for child in children:
        if _is_paper(child):
            yield from _unwrap_paper(child.children)
        else:
            yield child


_SUBMISSION_FIELDS: FieldTable = {
    # Header values
    ValueTag.ACCESSION_NUMBER: one("accession_number"),
    ValueTag.TYPE: one("filing_type"),
    ValueTag.FILING_DATE: one("filing_date", parse_date),
    ValueTag.PUBLIC_DOCUMENT_COUNT: optional("public_document_count", parse_int),
    ValueTag.ITEMS: many("items"),
    ValueTag.GROUP_MEMBERS: many("group_members"),
    ValueTag.DATE_OF_FILING_DATE_CHANGE: optional("date_of_filing_date_change", parse_date),
    ValueTag.EFFECTIVENESS_DATE: optional("effectiveness_date", parse_date),
    ValueTag.PERIOD: optional("period", parse_date),
    ValueTag.ACTION_DATE: optional("action_date", parse_date),
    ValueTag.RECEIVED_DATE: optional("received_date", parse_date),
    ValueTag.PERIOD_START: optional("period_start", parse_date),
    ValueTag.PUBLIC_REL_DATE: optional("public_rel_date", parse_date),
    ValueTag.TIMESTAMP: optional("timestamp", parse_timestamp),
    ValueTag.IS_FILER_A_NEW_REGISTRANT: optional("is_filer_a_new_registrant", parse_bool),
    ValueTag.IS_FILER_A_WELL_KNOWN_SEASONED_ISSUER: optional(
        "is_filer_a_well_known_seasoned_issuer", parse_bool
    ),
    ValueTag.FILED_PURSUANT_TO_GENERAL_INSTRUCTION_A2: optional(
        "filed_pursuant_to_general_instruction_a2", parse_bool
    ),
    ValueTag.IS_FUND_24F2_ELIGIBLE: optional("is_fund_24f2_eligible", parse_bool),
    ValueTag.REGISTERED_ENTITY: optional("registered_entity", parse_bool),
    ValueTag.NO_QUARTERLY_ACTIVITY: optional("no_quarterly_activity", parse_bool),
    ValueTag.NO_ANNUAL_ACTIVITY: optional("no_annual_activity", parse_bool),
    ValueTag.ABS_RULE: optional("abs_rule"),
    ValueTag.ABS_ASSET_CLASS: optional("abs_asset_class"),
    ValueTag.DEPOSITOR_CIK: optional("depositor_cik"),
    ValueTag.SPONSOR_CIK: optional("sponsor_cik"),
    ValueTag.SECURITIZER_CIK: optional("securitizer_cik"),
    ValueTag.ISSUING_ENTITY_CIK: optional("issuing_entity_cik"),
    ValueTag.ISSUING_ENTITY_NAME: optional("issuing_entity_name"),
    ValueTag.SECURITIZER_FILE_NUMBER: optional("securitizer_file_number"),
    ValueTag.DEPOSITOR_FILE_NUMBER: optional("depositor_file_number"),
    ValueTag.REFERENCE_462B: optional("reference_462b"),
    ValueTag.REFERENCES_429: optional("references_429"),
    ValueTag.MA_I_INDIVIDUAL: optional("ma_i_individual"),
    ValueTag.CATEGORY: optional("category"),
    ValueTag.PUBLIC_REFERENCE_ACC: optional("public_reference_acc"),
    ValueTag.SROS: optional("sros"),
    ValueTag.PREVIOUS_ACCESSION_NUMBER: optional("previous_accession_number"),
    ValueTag.PRIVATE_TO_PUBLIC: flag("private_to_public"),
    ValueTag.DELETION: flag("deletion"),
    ValueTag.CORRECTION: flag("correction"),

    # Companies by role. FILED-BY is repeated: legacy archives exist that
    # list it more than once.
    ContainerTag.FILER: many("filers", bind_company),
    ContainerTag.REPORTING_OWNER: many("reporting_owners", bind_company),
    ContainerTag.SUBJECT_COMPANY: many("subject_companies", bind_company),
    ContainerTag.FILED_FOR: many("filed_for", bind_company),
    ContainerTag.FILED_BY: many("filed_by", bind_company),
    ContainerTag.ISSUER: optional("issuer", bind_company),
    ContainerTag.DEPOSITOR: optional("depositor", bind_company),
    ContainerTag.SECURITIZER: optional("securitizer", bind_company),

    ContainerTag.DOCUMENT: many("documents", bind_document),
    ContainerTag.SERIES_AND_CLASSES_CONTRACTS_DATA: optional(
        "series_and_classes_contracts_data", bind_series_data
    ),
    ContainerTag.CONFIRMING_COPY: optional("confirming_copy", bind_submission),
}

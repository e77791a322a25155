"""
Unit tests for edgar_nc/parsing/binder.py (generic tree -> typed models).

All tests use synthetic in-memory archives - no real filing data required.
"""

from datetime import date, datetime

import pytest

from edgar_nc.parsing.binder import (
    bind_company,
    bind_document,
    bind_merger_series,
    bind_new_series,
    bind_series_data,
    bind_submission,
)
from edgar_nc.parsing.errors import (
    CardinalityViolation,
    DocumentCountMismatch,
    InvalidFieldValue,
    UnrecognizedChild,
)
from edgar_nc.parsing.models import DataType, MonthDayPair


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------

COMPANY = """\
<FILER>
<COMPANY-DATA>
<CONFORMED-NAME>ACME CORP
<CIK>0000123456
<ASSIGNED-SIC>3577
<FISCAL-YEAR-END>1231
</COMPANY-DATA>
<FILING-VALUES>
<FORM-TYPE>10-K
<ACT>34
<FILE-NUMBER>001-12345
</FILING-VALUES>
<FILING-VALUES>
<FORM-TYPE>10-K/A
</FILING-VALUES>
<BUSINESS-ADDRESS>
<STREET1>1 MAIN ST
<CITY>SPRINGFIELD
<STATE>IL
</BUSINESS-ADDRESS>
<MAIL-ADDRESS>
<STREET1>PO BOX 7
</MAIL-ADDRESS>
<FORMER-COMPANY>
<FORMER-CONFORMED-NAME>ACME HOLDINGS INC
<DATE-CHANGED>20050615
</FORMER-COMPANY>
<FORMER-COMPANY>
<FORMER-CONFORMED-NAME>ACME WIDGETS
<DATE-CHANGED>19990101
</FORMER-COMPANY>
<FORMER-NAME>
<FORMER-CONFORMED-NAME>ACME PERSONAL
<DATE-CHANGED>20010101
</FORMER-NAME>
</FILER>
"""

CONFIRMING_COPY = """\
<CONFIRMING-COPY>
<ACCESSION-NUMBER>0000950123-21-000002
<TYPE>10-K
<PUBLIC-DOCUMENT-COUNT>1
<FILING-DATE>20210302
<DOCUMENT>
<TYPE>10-K
<SEQUENCE>1
<TEXT>
copy
</TEXT>
</DOCUMENT>
</CONFIRMING-COPY>"""


def _company_block(role: str, name: str, cik: str) -> str:
    return (
        f"<{role}>\n<COMPANY-DATA>\n<CONFORMED-NAME>{name}\n<CIK>{cik}\n"
        f"</COMPANY-DATA>\n</{role}>"
    )


# ---------------------------------------------------------------------------
# Tests: companies
# ---------------------------------------------------------------------------

class TestBindCompany:
    def test_company_data(self, node_children):
        company = bind_company(node_children(COMPANY))
        assert company.company_data.conformed_name == "ACME CORP"
        assert company.company_data.cik == "0000123456"
        assert company.company_data.fiscal_year_end == MonthDayPair(month=12, day=31)
        assert company.owner_data is None
        assert company.display_name == "ACME CORP"

    def test_repeated_blocks_keep_input_order(self, node_children):
        company = bind_company(node_children(COMPANY))
        assert [fv.form_type for fv in company.filing_values] == ["10-K", "10-K/A"]
        assert [fc.former_conformed_name for fc in company.former_companies] == [
            "ACME HOLDINGS INC",
            "ACME WIDGETS",
        ]
        assert company.former_companies[0].date_changed == date(2005, 6, 15)

    def test_former_name_is_kept_apart_from_former_company(self, node_children):
        company = bind_company(node_children(COMPANY))
        assert [fn.former_conformed_name for fn in company.former_names] == ["ACME PERSONAL"]

    def test_addresses(self, node_children):
        company = bind_company(node_children(COMPANY))
        assert company.business_address.city == "SPRINGFIELD"
        assert company.business_address.zip is None
        assert company.mail_address.street1 == "PO BOX 7"

    def test_owner_data(self, node_children):
        company = bind_company(node_children(
            "<REPORTING-OWNER>\n<OWNER-DATA>\n<CONFORMED-NAME>DOE JOHN\n"
            "<CIK>0001000001\n</OWNER-DATA>\n</REPORTING-OWNER>\n"
        ))
        assert company.company_data is None
        assert company.cik == "0001000001"

    def test_duplicate_company_data(self, node_children):
        children = node_children(
            "<FILER>\n"
            "<COMPANY-DATA>\n<CONFORMED-NAME>A\n<CIK>1\n</COMPANY-DATA>\n"
            "<COMPANY-DATA>\n<CONFORMED-NAME>B\n<CIK>2\n</COMPANY-DATA>\n"
            "</FILER>\n"
        )
        with pytest.raises(CardinalityViolation) as exc_info:
            bind_company(children)
        assert exc_info.value.entity == "Company"
        assert exc_info.value.field == "company_data"

    def test_company_data_is_optional(self, node_children):
        company = bind_company(node_children(
            "<FILER>\n<FILING-VALUES>\n<FORM-TYPE>D\n</FILING-VALUES>\n</FILER>\n"
        ))
        assert company.company_data is None
        assert company.display_name is None

    def test_value_directly_under_company(self, node_children):
        with pytest.raises(UnrecognizedChild) as exc_info:
            bind_company(node_children("<FILER>\n<CIK>1\n</FILER>\n"))
        assert exc_info.value.entity == "Company"

    def test_missing_cik(self, node_children):
        children = node_children(
            "<FILER>\n<COMPANY-DATA>\n<CONFORMED-NAME>A\n</COMPANY-DATA>\n</FILER>\n"
        )
        with pytest.raises(CardinalityViolation) as exc_info:
            bind_company(children)
        assert exc_info.value.entity == "CompanyData"
        assert exc_info.value.field == "cik"


# ---------------------------------------------------------------------------
# Tests: documents
# ---------------------------------------------------------------------------

class TestBindDocument:
    def test_document_fields(self, node_children):
        document = bind_document(node_children(
            "<DOCUMENT>\n<TYPE>EX-99.1\n<SEQUENCE>2\n<FILENAME>ex991.htm\n"
            "<DESCRIPTION>PRESS\nRELEASE\n<TEXT>\n<html>news</html>\n</TEXT>\n</DOCUMENT>\n"
        ))
        assert document.doc_type == "EX-99.1"
        assert document.sequence == 2
        assert document.filename == "ex991.htm"
        assert document.description == "PRESS RELEASE"
        assert document.flawed is False
        assert document.body.data_type is DataType.PLAINTEXT
        assert document.body.body.text == "<html>news</html>"

    def test_flawed_flag(self, node_children):
        document = bind_document(node_children(
            "<DOCUMENT>\n<TYPE>10-K\n<SEQUENCE>1\n<FLAWED>\n</DOCUMENT>\n"
        ))
        assert document.flawed is True
        assert document.body is None

    def test_missing_sequence(self, node_children):
        with pytest.raises(CardinalityViolation) as exc_info:
            bind_document(node_children("<DOCUMENT>\n<TYPE>10-K\n</DOCUMENT>\n"))
        assert exc_info.value.field == "sequence"

    def test_non_numeric_sequence(self, node_children):
        with pytest.raises(InvalidFieldValue) as exc_info:
            bind_document(node_children("<DOCUMENT>\n<TYPE>10-K\n<SEQUENCE>one\n</DOCUMENT>\n"))
        assert exc_info.value.field == "Document.sequence"

    def test_two_text_blocks(self, node_children):
        children = node_children(
            "<DOCUMENT>\n<TYPE>10-K\n<SEQUENCE>1\n"
            "<TEXT>\na\n</TEXT>\n<TEXT>\nb\n</TEXT>\n</DOCUMENT>\n"
        )
        with pytest.raises(CardinalityViolation):
            bind_document(children)


# ---------------------------------------------------------------------------
# Tests: series and class contracts
# ---------------------------------------------------------------------------

class TestBindSeries:
    def test_existing_series(self, node_children):
        data = bind_series_data(node_children(
            "<SERIES-AND-CLASSES-CONTRACTS-DATA>\n"
            "<EXISTING-SERIES-AND-CLASSES-CONTRACTS>\n"
            "<SERIES>\n<OWNER-CIK>0000900001\n<SERIES-ID>S000001234\n"
            "<SERIES-NAME>ACME GROWTH FUND\n"
            "<CLASS-CONTRACT>\n<CLASS-CONTRACT-ID>C000004567\n"
            "<CLASS-CONTRACT-NAME>CLASS A\n<CLASS-CONTRACT-TICKER-SYMBOL>ACMGX\n"
            "</CLASS-CONTRACT>\n"
            "<CLASS-CONTRACT>\n<CLASS-CONTRACT-ID>C000004568\n"
            "<CLASS-CONTRACT-NAME>CLASS I\n</CLASS-CONTRACT>\n"
            "</SERIES>\n"
            "</EXISTING-SERIES-AND-CLASSES-CONTRACTS>\n"
            "</SERIES-AND-CLASSES-CONTRACTS-DATA>\n"
        ))
        (series,) = data.existing_series_and_classes_contracts.series
        assert series.series_id == "S000001234"
        assert series.owner_cik == "0000900001"
        assert [c.class_contract_ticker_symbol for c in series.class_contracts] == ["ACMGX", None]
        assert data.merger_series_and_classes_contracts is None

    def test_merger(self, node_children):
        block = bind_merger_series(node_children(
            "<MERGER-SERIES-AND-CLASSES-CONTRACTS>\n<MERGER>\n"
            "<ACQUIRING-DATA>\n<CIK>0000900001\n"
            "<SERIES>\n<SERIES-ID>S000001234\n<SERIES-NAME>ACME GROWTH FUND\n</SERIES>\n"
            "</ACQUIRING-DATA>\n"
            "<TARGET-DATA>\n<CIK>0000900002\n"
            "<SERIES>\n<SERIES-ID>S000009999\n<SERIES-NAME>OLD FUND\n</SERIES>\n"
            "<SERIES>\n<SERIES-ID>S000009998\n<SERIES-NAME>OTHER FUND\n</SERIES>\n"
            "</TARGET-DATA>\n"
            "</MERGER>\n</MERGER-SERIES-AND-CLASSES-CONTRACTS>\n"
        ))
        (merger,) = block.mergers
        assert merger.acquiring_data.series.series_name == "ACME GROWTH FUND"
        (target,) = merger.target_data
        assert target.cik == "0000900002"
        assert [s.series_id for s in target.series] == ["S000009999", "S000009998"]

    def test_acquiring_data_takes_one_series(self, node_children):
        children = node_children(
            "<MERGER-SERIES-AND-CLASSES-CONTRACTS>\n<MERGER>\n"
            "<ACQUIRING-DATA>\n<CIK>1\n"
            "<SERIES>\n<SERIES-ID>S1\n<SERIES-NAME>A\n</SERIES>\n"
            "<SERIES>\n<SERIES-ID>S2\n<SERIES-NAME>B\n</SERIES>\n"
            "</ACQUIRING-DATA>\n"
            "</MERGER>\n</MERGER-SERIES-AND-CLASSES-CONTRACTS>\n"
        )
        with pytest.raises(CardinalityViolation) as exc_info:
            bind_merger_series(children)
        assert exc_info.value.entity == "AcquiringData"

    def test_new_series(self, node_children):
        block = bind_new_series(node_children(
            "<NEW-SERIES-AND-CLASSES-CONTRACTS>\n<OWNER-CIK>0000900001\n"
            "<NEW-SERIES>\n<SERIES-ID>S000010000\n<SERIES-NAME>ACME VALUE FUND\n</NEW-SERIES>\n"
            "</NEW-SERIES-AND-CLASSES-CONTRACTS>\n"
        ))
        assert block.owner_cik == "0000900001"
        assert [s.series_name for s in block.new_series] == ["ACME VALUE FUND"]
        assert block.new_classes_contracts == []


# ---------------------------------------------------------------------------
# Tests: submission
# ---------------------------------------------------------------------------

class TestBindSubmission:
    def test_header_values(self, node_children, make_submission):
        submission = bind_submission(node_children(make_submission(
            header_extra="<ITEMS>1.01\n<ITEMS>9.01\n<PERIOD>20201231\n"
                         "<TIMESTAMP>20210301:163001\n<IS-FILER-A-NEW-REGISTRANT>N"
        )))
        assert submission.accession_number == "0000950123-21-000001"
        assert submission.filing_type == "10-K"
        assert submission.filing_date == date(2021, 3, 1)
        assert submission.items == ["1.01", "9.01"]
        assert submission.period == date(2020, 12, 31)
        assert submission.timestamp == datetime(2021, 3, 1, 16, 30, 1)
        assert submission.is_filer_a_new_registrant is False
        assert submission.is_fund_24f2_eligible is None

    def test_document_type_is_scoped_to_document(self, node_children, make_submission):
        submission = bind_submission(node_children(make_submission(
            documents=[{"type": "10-K"}, {"type": "EX-99"}]
        )))
        assert submission.filing_type == "10-K"
        assert [d.doc_type for d in submission.documents] == ["10-K", "EX-99"]
        assert [d.sequence for d in submission.documents] == [1, 2]

    def test_invalid_bool(self, node_children, make_submission):
        children = node_children(make_submission(header_extra="<IS-FILER-A-NEW-REGISTRANT>X"))
        with pytest.raises(InvalidFieldValue) as exc_info:
            bind_submission(children)
        assert exc_info.value.field == "Submission.is_filer_a_new_registrant"

    def test_presence_flags(self, node_children, make_submission):
        submission = bind_submission(node_children(make_submission(
            header_extra="<DELETION>\n<CORRECTION>"
        )))
        assert submission.deletion is True
        assert submission.correction is True
        assert submission.private_to_public is False
        assert submission.paper is False

    def test_duplicate_accession_number(self, node_children, make_submission):
        children = node_children(make_submission(
            header_extra="<ACCESSION-NUMBER>0000950123-21-000009"
        ))
        with pytest.raises(CardinalityViolation) as exc_info:
            bind_submission(children)
        assert exc_info.value.field == "accession_number"

    def test_missing_accession_number(self, node_children):
        children = node_children("<SUBMISSION>\n<TYPE>10-K\n<FILING-DATE>20210301\n</SUBMISSION>\n")
        with pytest.raises(CardinalityViolation) as exc_info:
            bind_submission(children)
        assert exc_info.value.field == "accession_number"

    def test_roles(self, node_children, make_submission):
        header = "\n".join([
            _company_block("SUBJECT-COMPANY", "TARGET INC", "0000000001"),
            _company_block("FILED-BY", "FUND ONE", "0000000002"),
            _company_block("FILED-BY", "FUND TWO", "0000000003"),
            _company_block("ISSUER", "ISSUER CO", "0000000004"),
        ])
        submission = bind_submission(node_children(make_submission(header_extra=header)))
        assert [c.display_name for c in submission.filers] == ["ACME CORP"]
        assert [c.display_name for c in submission.subject_companies] == ["TARGET INC"]
        assert [c.cik for c in submission.filed_by] == ["0000000002", "0000000003"]
        assert submission.issuer.display_name == "ISSUER CO"
        assert submission.depositor is None

    def test_duplicate_issuer(self, node_children, make_submission):
        header = "\n".join([
            _company_block("ISSUER", "A", "1"),
            _company_block("ISSUER", "B", "2"),
        ])
        with pytest.raises(CardinalityViolation) as exc_info:
            bind_submission(node_children(make_submission(header_extra=header)))
        assert exc_info.value.field == "issuer"

    def test_document_inside_company_is_rejected(self, node_children, make_submission):
        header = "<FILER>\n<DOCUMENT>\n<TYPE>10-K\n<SEQUENCE>9\n</DOCUMENT>\n</FILER>"
        with pytest.raises(UnrecognizedChild):
            bind_submission(node_children(make_submission(header_extra=header)))

    def test_binding_is_deterministic(self, node_children, minimal_submission_text):
        children = node_children(minimal_submission_text)
        assert bind_submission(children) == bind_submission(children)


class TestDocumentCount:
    def test_mismatch(self, node_children, make_submission):
        children = node_children(make_submission(document_count=2))
        with pytest.raises(DocumentCountMismatch) as exc_info:
            bind_submission(children)
        assert exc_info.value.declared == 2
        assert exc_info.value.parsed == 1

    def test_absent_count_is_not_checked(self, node_children, make_submission):
        submission = bind_submission(node_children(make_submission(
            documents=[{}, {}], include_count=False
        )))
        assert submission.public_document_count is None
        assert len(submission) == 2

    def test_zero_documents(self, node_children, make_submission):
        submission = bind_submission(node_children(make_submission(documents=[])))
        assert submission.public_document_count == 0
        assert submission.documents == []


class TestPaperAndConfirmingCopy:
    def test_paper_wrapper_merges_into_submission(self, node_children):
        submission = bind_submission(node_children(
            "<SUBMISSION>\n<PAPER>\n<ACCESSION-NUMBER>9999999997-21-000001\n"
            "<TYPE>144\n<FILING-DATE>20210301\n</PAPER>\n</SUBMISSION>\n"
        ))
        assert submission.paper is True
        assert submission.filing_type == "144"
        assert submission.documents == []

    def test_paper_wrapper_still_checks_cardinality(self, node_children):
        children = node_children(
            "<SUBMISSION>\n<TYPE>144\n<PAPER>\n<ACCESSION-NUMBER>1\n"
            "<TYPE>144\n<FILING-DATE>20210301\n</PAPER>\n</SUBMISSION>\n"
        )
        with pytest.raises(CardinalityViolation):
            bind_submission(children)

    def test_confirming_copy_is_bound_recursively(self, node_children, make_submission):
        submission = bind_submission(node_children(make_submission(header_extra=CONFIRMING_COPY)))
        copy = submission.confirming_copy
        assert copy.accession_number == "0000950123-21-000002"
        assert copy.filing_date == date(2021, 3, 2)
        assert copy.documents[0].body.body.text == "copy"
        assert copy.confirming_copy is None
        assert len(submission.documents) == 1

    def test_confirming_copy_count_is_checked(self, node_children, make_submission):
        bad_copy = CONFIRMING_COPY.replace("<PUBLIC-DOCUMENT-COUNT>1", "<PUBLIC-DOCUMENT-COUNT>3")
        with pytest.raises(DocumentCountMismatch):
            bind_submission(node_children(make_submission(header_extra=bad_copy)))

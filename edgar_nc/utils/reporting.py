"""Report formatting utilities for the describe and batch commands."""

from typing import Any, Dict, List, Optional

from edgar_nc.parsing.models import Company, Document, Submission


class SubmissionFormatter:
    """
    Utilities for rendering parsed submissions and batch results as text.

    Provides consistent formatting for key/value lines, status icons and
    summaries across the CLI commands.
    """

    @staticmethod
    def format_status_icon(status: str) -> str:
        """
        Convert status to consistent icon format.

        Example:
            >>> SubmissionFormatter.format_status_icon('success')
            '[ OK ]'
            >>> SubmissionFormatter.format_status_icon('error')
            '[FAIL]'
        """
        icons = {
            'success': '[ OK ]',
            'error': '[FAIL]',
        }
        return icons.get(status, '[----]')

    @staticmethod
    def _line(key: str, value: Any, indent: int) -> str:
        return f"{' ' * indent}{key}: {value}"

    @classmethod
    def format_company(cls, company: Company, indent: int = 0) -> List[str]:
        lines = []
        for data in (company.company_data, company.owner_data):
            if data is None:
                continue
            lines.append(cls._line("Name", data.conformed_name, indent + 1))
            lines.append(cls._line("CIK", data.cik, indent + 1))
        return lines

    @classmethod
    def format_document(cls, document: Document, indent: int = 0) -> List[str]:
        lines = [
            cls._line("Sequence", document.sequence, indent + 1),
            cls._line("Type", document.doc_type, indent + 1),
        ]
        if document.filename is not None:
            lines.append(cls._line("Filename", document.filename, indent + 1))
        if document.description is not None:
            lines.append(cls._line("Description", document.description, indent + 1))
        if document.body is not None:
            lines.append(cls._line("Data Type", document.body.data_type.value, indent + 1))
            lines.append(cls._line("Data", str(document.body.body), indent + 1))
        return lines

    @classmethod
    def format_submission(cls, submission: Submission, indent: int = 0) -> str:
        """
        Render a human-readable description of a submission.

        Example output:
            Accession Number: 0000950123-21-000001
            Type: 10-K
            Filing Date: 2021-03-01
            Filer
             Name: ACME CORP
             CIK: 0000123456
            Document
             Sequence: 1
             Type: 10-K
        """
        lines = [
            cls._line("Accession Number", submission.accession_number, indent),
            cls._line("Type", submission.filing_type, indent),
            cls._line("Filing Date", submission.filing_date.isoformat(), indent),
        ]
        if submission.paper:
            lines.append(cls._line("Paper Filing", "yes", indent))

        roles = [
            ("Reporting Owner", submission.reporting_owners),
            ("Filer", submission.filers),
            ("Subject Company", submission.subject_companies),
            ("Filed By", submission.filed_by),
            ("Filed For", submission.filed_for),
        ]
        for role, company in (
            ("Issuer", submission.issuer),
            ("Depositor", submission.depositor),
            ("Securitizer", submission.securitizer),
        ):
            if company is not None:
                roles.append((role, [company]))

        for role, companies in roles:
            for company in companies:
                lines.append(f"{' ' * indent}{role}")
                lines.extend(cls.format_company(company, indent))

        for document in submission.documents:
            lines.append(f"{' ' * indent}Document")
            lines.extend(cls.format_document(document, indent))

        if submission.confirming_copy is not None:
            lines.append(f"{' ' * indent}Confirming Copy")
            lines.append(cls.format_submission(submission.confirming_copy, indent + 2))

        return "\n".join(lines)

    @classmethod
    def print_summary(
        cls,
        results: List[Dict[str, Any]],
        title: str = "Batch Parse",
        verbose: bool = False,
        limit: Optional[int] = 50,
    ) -> None:
        """
        Print a human-readable batch summary to console.

        Args:
            results: One dict per file with keys 'status', 'file' and,
                for failures, 'error'
            title: Report title
            verbose: Show per-file results
            limit: Maximum number of per-file lines in verbose mode
        """
        parsed = sum(1 for r in results if r['status'] == 'success')
        failed = len(results) - parsed
        status = 'PASS' if failed == 0 else 'FAIL'

        print(f"\n{'='*60}")
        print(f"{title}: {status}")
        print(f"{'='*60}")
        print(f"  Total files: {len(results)}")
        print(f"  Parsed: {parsed}")
        print(f"  Failed: {failed}")

        if verbose and results:
            print(f"\n{'='*60}")
            print("Per-File Results:")
            print(f"{'='*60}")
            for result in results[:limit]:
                print(f"  {cls.format_status_icon(result['status'])} {result['file']}")
                if result['status'] == 'error':
                    print(f"         Error: {result.get('error', 'Unknown error')}")

        print(f"{'='*60}")

"""
Pydantic models for filer entities.

A Company is any business entity taking part in a submission: a filer, a
reporting owner, the issuer, a depositor and so on. They all share the same
shape; the role is given by the Submission field the company is stored in.
"""

from datetime import date
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator


class Record(BaseModel):
    """Base for all bound records: immutable value objects, unknown fields rejected."""
    model_config = ConfigDict(frozen=True, extra='forbid')


class MonthDayPair(Record):
    """A month/day pair such as a fiscal year end (`MMDD` in the archive)."""

    month: int = Field(ge=1, le=12)
    day: int = Field(ge=1, le=31)

    @model_validator(mode='after')
    def _check_calendar_day(self) -> 'MonthDayPair':
        # 2000 is a leap year, so 0229 is accepted
        date(2000, self.month, self.day)
        return self

    def __str__(self) -> str:
        return f"{self.month:02d}{self.day:02d}"


class FilingValues(Record):
    """<FILING-VALUES> block: one form filed by a company."""

    form_type: str
    act: Optional[str] = None
    file_number: Optional[str] = None
    film_number: Optional[str] = None


class CompanyData(Record):
    """<COMPANY-DATA> or <OWNER-DATA> block."""

    conformed_name: str
    cik: str
    irs_number: Optional[str] = None
    state_of_incorporation: Optional[str] = None
    fiscal_year_end: Optional[MonthDayPair] = None
    assigned_sic: Optional[str] = None
    relationship: Optional[str] = None


class Address(Record):
    """<BUSINESS-ADDRESS> or <MAIL-ADDRESS> block."""

    street1: Optional[str] = None
    street2: Optional[str] = None
    city: Optional[str] = None
    state: Optional[str] = None
    zip: Optional[str] = None
    phone: Optional[str] = None


class FormerCompany(Record):
    """<FORMER-COMPANY> or <FORMER-NAME> block."""

    former_conformed_name: str
    date_changed: date


class Company(Record):
    """A filer entity with its identifying data and address blocks."""

    company_data: Optional[CompanyData] = None
    owner_data: Optional[CompanyData] = None
    filing_values: List[FilingValues] = Field(default_factory=list)
    business_address: Optional[Address] = None
    mail_address: Optional[Address] = None
    former_names: List[FormerCompany] = Field(default_factory=list)
    former_companies: List[FormerCompany] = Field(default_factory=list)

    @property
    def display_name(self) -> Optional[str]:
        """Conformed name from company data, falling back to owner data."""
        data = self.company_data or self.owner_data
        return data.conformed_name if data else None

    @property
    def cik(self) -> Optional[str]:
        data = self.company_data or self.owner_data
        return data.cik if data else None

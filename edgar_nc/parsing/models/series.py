"""
Pydantic models for investment-fund series, class contracts and mergers.

Used by fund filings (485BPOS, N-CSR, ...) through the
<SERIES-AND-CLASSES-CONTRACTS-DATA> block of the submission header.
"""

from typing import List, Optional

from pydantic import Field

from .company import Record


class ClassContract(Record):
    """A share class (or contract) of a fund series."""

    class_contract_id: str
    class_contract_name: str
    class_contract_ticker_symbol: Optional[str] = None


class Series(Record):
    """A fund series and its class contracts."""

    series_id: str
    series_name: str
    owner_cik: Optional[str] = None
    class_contracts: List[ClassContract] = Field(default_factory=list)


class AcquiringData(Record):
    """Acquiring side of a merger: one registrant and the surviving series."""

    cik: str
    series: Series


class TargetData(Record):
    """Target side of a merger: one registrant and its absorbed series."""

    cik: str
    series: List[Series] = Field(default_factory=list)


class Merger(Record):
    acquiring_data: AcquiringData
    target_data: List[TargetData] = Field(default_factory=list)


class SeriesAndClassesContracts(Record):
    """<EXISTING-SERIES-AND-CLASSES-CONTRACTS> block."""

    series: List[Series] = Field(default_factory=list)


class MergerSeriesAndClassesContracts(Record):
    mergers: List[Merger] = Field(default_factory=list)


class NewSeriesAndClassesContracts(Record):
    owner_cik: Optional[str] = None
    new_series: List[Series] = Field(default_factory=list)
    new_classes_contracts: List[Series] = Field(default_factory=list)


class SeriesAndClassesContractsData(Record):
    """<SERIES-AND-CLASSES-CONTRACTS-DATA> block of the submission header."""

    existing_series_and_classes_contracts: Optional[SeriesAndClassesContracts] = None
    merger_series_and_classes_contracts: Optional[MergerSeriesAndClassesContracts] = None
    new_series_and_classes_contracts: Optional[NewSeriesAndClassesContracts] = None

"""
Pydantic data models for parsed `.nc` submissions.

Organized by entity:
- company: Company, CompanyData, Address, FilingValues, FormerCompany, MonthDayPair
- document: Document, TypedData, DataType, TextBody, BinaryBody
- series: Series, ClassContract, Merger and the series/class contracts blocks
- submission: Submission (root)
"""
from .company import (
    Record,
    MonthDayPair,
    FilingValues,
    CompanyData,
    Address,
    FormerCompany,
    Company,
)
from .document import DataType, TextBody, BinaryBody, DocumentBody, TypedData, Document
from .series import (
    ClassContract,
    Series,
    AcquiringData,
    TargetData,
    Merger,
    SeriesAndClassesContracts,
    MergerSeriesAndClassesContracts,
    NewSeriesAndClassesContracts,
    SeriesAndClassesContractsData,
)
from .submission import Submission

__all__ = [
    'Record',
    'MonthDayPair',
    'FilingValues',
    'CompanyData',
    'Address',
    'FormerCompany',
    'Company',
    'DataType',
    'TextBody',
    'BinaryBody',
    'DocumentBody',
    'TypedData',
    'Document',
    'ClassContract',
    'Series',
    'AcquiringData',
    'TargetData',
    'Merger',
    'SeriesAndClassesContracts',
    'MergerSeriesAndClassesContracts',
    'NewSeriesAndClassesContracts',
    'SeriesAndClassesContractsData',
    'Submission',
]

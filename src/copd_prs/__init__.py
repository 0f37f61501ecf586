"""
COPD PRS Lookup.

Looks up precomputed COPD variant records by gene name or SNP ID, shows them as
a table and buckets the summed effect sizes into a Low/Medium/High PRS chart.
"""

from copd_prs.data_store import DataStore, normalize_record
from copd_prs.exceptions import (
    CopdPrsError,
    DataUnavailableError,
    EmptyQueryError,
    GeneNotFoundError,
    LoadError,
    QueryError,
    SnpNotFoundError,
)
from copd_prs.lookup import LookupEngine, bucket_for_score, compute_prs_score, resolve_query
from copd_prs.models import Bucket, QueryResult, StoreState, VariantRecord
from copd_prs.session import LookupSession, SearchOutcome

__version__ = "0.1.0"

__all__ = [
    'DataStore',
    'normalize_record',
    'LookupEngine',
    'resolve_query',
    'compute_prs_score',
    'bucket_for_score',
    'Bucket',
    'QueryResult',
    'StoreState',
    'VariantRecord',
    'LookupSession',
    'SearchOutcome',
    'CopdPrsError',
    'LoadError',
    'QueryError',
    'EmptyQueryError',
    'DataUnavailableError',
    'SnpNotFoundError',
    'GeneNotFoundError',
]

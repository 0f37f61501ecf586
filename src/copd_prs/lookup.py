"""
Lookup module for COPD PRS Lookup.

Resolves a gene name or SNP identifier against the loaded variant records and
aggregates the placeholder PRS (sum of effect sizes) into a Low/Medium/High
bucket.
"""

import logging
from typing import Iterable, Optional, Sequence, Tuple

from copd_prs.config import HIGH_THRESHOLD, LOW_THRESHOLD, SNP_PREFIXES
from copd_prs.data_store import DataStore
from copd_prs.exceptions import (
    DataUnavailableError,
    EmptyQueryError,
    GeneNotFoundError,
    SnpNotFoundError,
)
from copd_prs.models import Bucket, QueryResult, VariantRecord

# Configure logging
log = logging.getLogger("copd-prs")


def normalize_query(raw_input: Optional[str]) -> str:
    """Trim whitespace and uppercase a user query."""
    if raw_input is None:
        return ""
    return raw_input.strip().upper()


def is_snp_query(query: str) -> bool:
    """
    Decide whether a normalized query is a SNP identifier.

    Both "RS" and the spaced "R S" prefix are treated as SNP ids.
    """
    return query.upper().startswith(SNP_PREFIXES)


def find_snp(records: Iterable[VariantRecord], snp_id: str) -> Optional[VariantRecord]:
    """Return the first record whose SNP id matches case-insensitively."""
    target = snp_id.upper()
    for record in records:
        if record.snp_id.upper() == target:
            return record
    return None


def select_gene(records: Iterable[VariantRecord], gene_name: str) -> Tuple[VariantRecord, ...]:
    """Return every record for a gene (case-insensitive), keeping store order."""
    target = gene_name.upper()
    return tuple(record for record in records if record.gene_name.upper() == target)


def compute_prs_score(records: Iterable[VariantRecord]) -> float:
    """Sum the effect sizes of the given records."""
    return sum((record.effect_size_beta for record in records), 0.0)


def bucket_for_score(score: float) -> Bucket:
    """
    Map a PRS score to its bucket.

    Low below 0.5, Medium from 0.5 up to (not including) 1.0, High from 1.0.
    """
    if score < LOW_THRESHOLD:
        return Bucket.LOW
    if score < HIGH_THRESHOLD:
        return Bucket.MEDIUM
    return Bucket.HIGH


def resolve_query(raw_input: Optional[str], store: DataStore) -> QueryResult:
    """
    Resolve a gene name or SNP id into matched records and a bucketed score.

    Args:
        raw_input: Free-text query as typed by the user
        store: Loaded data store to search

    Returns:
        QueryResult for the resolved gene

    Raises:
        EmptyQueryError: If the query is blank
        DataUnavailableError: If the store has not finished loading
        SnpNotFoundError: If a SNP id is not in the dataset
        GeneNotFoundError: If no record belongs to the resolved gene
    """
    query = normalize_query(raw_input)
    if not query:
        raise EmptyQueryError()

    if not store.is_ready():
        raise DataUnavailableError(details=f"store is {store.state.value}")

    records: Sequence[VariantRecord] = store.records
    gene_name = query
    via_snp = False

    if is_snp_query(query):
        snp_record = find_snp(records, query)
        if snp_record is None:
            raise SnpNotFoundError(query)
        gene_name = snp_record.gene_name.upper()
        via_snp = True
        log.debug(f"Resolved SNP {query} to gene {gene_name}")

    matched = select_gene(records, gene_name)
    if not matched:
        raise GeneNotFoundError(gene_name)

    score = compute_prs_score(matched)
    bucket = bucket_for_score(score)
    log.debug(f"{gene_name}: {len(matched)} records, PRS {score:.4f} ({bucket.value})")

    return QueryResult(
        query=query,
        resolved_gene_name=gene_name,
        matched_records=matched,
        prs_score=score,
        bucket=bucket,
        via_snp=via_snp,
    )


class LookupEngine:
    """Resolves queries against a single data store."""

    def __init__(self, store: DataStore):
        self.store = store

    def resolve(self, raw_input: Optional[str]) -> QueryResult:
        """Resolve a query against this engine's store."""
        return resolve_query(raw_input, self.store)

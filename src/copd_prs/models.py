"""
Data models for COPD PRS Lookup.

Variant records keep a typed core (gene, SNP, effect size) and pass every other
source field through untouched, in source order, so tables can show them.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Mapping, Tuple

from copd_prs.config import EFFECT_SIZE_KEY, GENE_NAME_KEY, SNP_ID_KEY


class Bucket(str, Enum):
    """PRS score bucket."""

    LOW = "Low"
    MEDIUM = "Medium"
    HIGH = "High"


class StoreState(str, Enum):
    """Load state of a DataStore."""

    UNLOADED = "unloaded"
    LOADING = "loading"
    READY = "ready"
    FAILED = "failed"


@dataclass(frozen=True)
class VariantRecord:
    """Single normalized row of the variant dataset."""

    gene_name: str
    snp_id: str
    effect_size_beta: float
    extra: Mapping[str, Any] = field(default_factory=dict)
    columns: Tuple[str, ...] = (GENE_NAME_KEY, SNP_ID_KEY, EFFECT_SIZE_KEY)

    def get(self, key: str, default: Any = None) -> Any:
        """Look up a field by its source name."""
        if key == GENE_NAME_KEY:
            return self.gene_name
        if key == SNP_ID_KEY:
            return self.snp_id
        if key == EFFECT_SIZE_KEY:
            return self.effect_size_beta
        return self.extra.get(key, default)

    def to_row(self) -> Dict[str, Any]:
        """Serialize into an ordered dict keyed by source field names."""
        return {column: self.get(column) for column in self.columns}


@dataclass(frozen=True)
class QueryResult:
    """Outcome of a successful lookup. Recomputed for every query."""

    query: str
    resolved_gene_name: str
    matched_records: Tuple[VariantRecord, ...]
    prs_score: float
    bucket: Bucket
    via_snp: bool = False

    @property
    def record_count(self) -> int:
        return len(self.matched_records)

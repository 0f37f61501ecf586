"""
Data store module for COPD PRS Lookup.

Holds the in-memory collection of normalized variant records. The collection is
loaded once, published as a whole, and read-only afterwards.
"""

import logging
import os
import threading
from concurrent.futures import Executor, Future, ThreadPoolExecutor
from typing import Any, Iterable, Iterator, Mapping, Optional, Tuple, Union

from copd_prs.config import DEFAULT_EFFECT_SIZE, DEFAULT_TIMEOUT, EFFECT_SIZE_KEY, GENE_NAME_KEY, SNP_ID_KEY
from copd_prs.exceptions import LoadError
from copd_prs.models import StoreState, VariantRecord
from copd_prs.sources import fetch_records

# Configure logging
log = logging.getLogger("copd-prs")

_CORE_KEYS = (GENE_NAME_KEY, SNP_ID_KEY, EFFECT_SIZE_KEY)


def normalize_record(raw: Mapping[str, Any], default_beta: float = DEFAULT_EFFECT_SIZE) -> VariantRecord:
    """
    Convert a raw dataset row into a VariantRecord.

    A missing or null effect size is replaced by ``default_beta``. All other
    fields pass through unchanged and keep their source order; a defaulted
    effect size column is appended after them.

    Args:
        raw: Raw record mapping as decoded from the dataset
        default_beta: Effect size to use when the record has none

    Returns:
        VariantRecord
    """
    beta = raw.get(EFFECT_SIZE_KEY)
    columns = tuple(raw.keys())
    if EFFECT_SIZE_KEY not in raw:
        columns = columns + (EFFECT_SIZE_KEY,)
    if beta is None:
        beta = default_beta

    extra = {key: value for key, value in raw.items() if key not in _CORE_KEYS}

    return VariantRecord(
        gene_name=raw[GENE_NAME_KEY],
        snp_id=raw[SNP_ID_KEY],
        effect_size_beta=float(beta),
        extra=extra,
        columns=columns,
    )


class DataStore:
    """In-memory variant record collection with an explicit load state."""

    def __init__(self, default_beta: float = DEFAULT_EFFECT_SIZE):
        """
        Initialize an empty, unloaded store.

        Args:
            default_beta: Effect size assigned to records that have none
        """
        self.default_beta = default_beta
        self._records: Tuple[VariantRecord, ...] = ()
        self._state = StoreState.UNLOADED
        self._lock = threading.Lock()
        self.load_error: Optional[LoadError] = None
        self.source: Optional[str] = None
        self.defaulted_count = 0

    @property
    def records(self) -> Tuple[VariantRecord, ...]:
        return self._records

    @property
    def state(self) -> StoreState:
        return self._state

    def is_ready(self) -> bool:
        """Return True once a load has completed successfully."""
        return self._state is StoreState.READY

    def __len__(self) -> int:
        return len(self._records)

    def __iter__(self) -> Iterator[VariantRecord]:
        return iter(self._records)

    def _begin_load(self, source: str) -> None:
        with self._lock:
            if self._state in (StoreState.LOADING, StoreState.READY):
                raise RuntimeError(f"Data store is already {self._state.value}")
            self._state = StoreState.LOADING
            self.source = source
            self.load_error = None

    def _normalize_all(self, raw_records: Iterable[Mapping[str, Any]]) -> Tuple[Tuple[VariantRecord, ...], int]:
        records = []
        defaulted = 0
        for index, raw in enumerate(raw_records):
            if raw.get(EFFECT_SIZE_KEY) is None:
                defaulted += 1
            try:
                records.append(normalize_record(raw, self.default_beta))
            except (TypeError, ValueError, OverflowError) as e:
                raise LoadError(f"Record {index} could not be normalized", details=str(e)) from e
        return tuple(records), defaulted

    def _publish(self, records: Tuple[VariantRecord, ...], defaulted: int) -> None:
        # Swap the whole collection in one step; readers never see a partial load
        with self._lock:
            self._records = records
            self.defaulted_count = defaulted
            self._state = StoreState.READY

    def _load(self, source: str, timeout: float) -> "DataStore":
        try:
            records, defaulted = self._normalize_all(fetch_records(source, timeout=timeout))
        except LoadError as e:
            with self._lock:
                self._records = ()
                self._state = StoreState.FAILED
                self.load_error = e
            log.error(f"Error loading variant data from {source}: {e}")
            raise

        self._publish(records, defaulted)
        log.info(
            f"Data loaded successfully: {len(self._records)} records "
            f"({self.defaulted_count} with default effect size {self.default_beta})"
        )
        return self

    def load(self, source: Union[str, os.PathLike], timeout: float = DEFAULT_TIMEOUT) -> "DataStore":
        """
        Fetch, validate and normalize the dataset, then publish it.

        Args:
            source: Local path or HTTP(S) URL of the JSON dataset
            timeout: Request timeout in seconds for remote sources

        Returns:
            This store, now READY

        Raises:
            LoadError: If the dataset cannot be obtained; the store stays
                empty and moves to FAILED
            RuntimeError: If the store is already loading or loaded
        """
        source = str(source)
        self._begin_load(source)
        log.info(f"Loading variant data from {source}")
        return self._load(source, timeout)

    def load_in_background(
        self,
        source: Union[str, os.PathLike],
        timeout: float = DEFAULT_TIMEOUT,
        executor: Optional[Executor] = None,
    ) -> Future:
        """
        Run the load on a worker thread.

        The store moves to LOADING before this returns, so queries issued
        meanwhile see a store that is not ready.

        Args:
            source: Local path or HTTP(S) URL of the JSON dataset
            timeout: Request timeout in seconds for remote sources
            executor: Executor to submit to. If None, a single-worker pool is used.

        Returns:
            Future resolving to this store, or raising LoadError
        """
        source = str(source)
        self._begin_load(source)
        log.info(f"Loading variant data from {source} in the background")

        if executor is not None:
            return executor.submit(self._load, source, timeout)

        pool = ThreadPoolExecutor(max_workers=1, thread_name_prefix="copd-prs-load")
        future = pool.submit(self._load, source, timeout)
        pool.shutdown(wait=False)
        return future

    def replace(self, raw_records: Iterable[Mapping[str, Any]]) -> "DataStore":
        """
        Publish an in-memory record sequence as the loaded dataset.

        Args:
            raw_records: Raw record mappings in dataset order

        Returns:
            This store, now READY

        Raises:
            LoadError: If a record cannot be normalized; the store is unchanged
            RuntimeError: If a load is in progress
        """
        records, defaulted = self._normalize_all(raw_records)
        with self._lock:
            if self._state is StoreState.LOADING:
                raise RuntimeError("Data store is loading; wait for the load before replacing records")
            self._records = records
            self.defaulted_count = defaulted
            self._state = StoreState.READY
            self.load_error = None
        return self

    def __repr__(self):
        return f"DataStore(state={self._state.value}, records={len(self._records)}, source={self.source!r})"

"""
In-memory job listings store.

This module provides the JobStore, which loads the job listings once from a
data provider and answers queries against them with linear scans.

Example:
    store = JobStore.from_config(load_config())
    store.load()

    employers = store.find_all_values("employer")
    java_jobs = store.find_by_value("java")
"""

import logging
import threading
from typing import List, Dict, Optional, Union

from .config.settings import StoreConfig
from .providers.base import DataProvider, Row
from .providers.csv_provider import CSVProvider
from .utils.errors import DataSourceError, DataNotLoadedError, MissingColumnError

# Set up logging
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)


class JobStore:
    """
    Owns the parsed job listings and serves every query over them.

    The store reads its provider at most once. Queries load it lazily when
    `load()` has not been called yet; a failed load is remembered and every
    later query raises DataNotLoadedError instead of scanning missing data.

    All query results are fresh dicts, so callers may mutate them freely.
    """

    def __init__(self, provider: Union[DataProvider, str]):
        """
        Initialize the store.

        Args:
            provider: Data provider, or a path to a CSV file
        """
        if isinstance(provider, str):
            provider = CSVProvider(provider)
        self.provider = provider
        self._headers: List[str] = []
        self._jobs: List[Row] = []
        self._loaded = False
        self._load_error: Optional[DataSourceError] = None
        self._lock = threading.Lock()

    @classmethod
    def from_config(cls, config: Optional[StoreConfig] = None) -> 'JobStore':
        """
        Build a store over the CSV file named by a configuration.

        Args:
            config: Store configuration (defaults used when omitted)

        Returns:
            JobStore instance, not yet loaded
        """
        config = config or StoreConfig()
        provider = CSVProvider(
            config.data_file,
            delimiter=config.get_csv_setting('delimiter'),
            quotechar=config.get_csv_setting('quotechar'),
            encoding=config.get_csv_setting('encoding')
        )
        return cls(provider)

    @property
    def is_loaded(self) -> bool:
        return self._loaded

    def load(self) -> None:
        """
        Read the job data from the provider, once.

        Calling this again after a successful load does nothing. After a
        failed load it raises DataNotLoadedError without touching the
        provider again.

        Raises:
            DataSourceError: If the provider fails on this call
            DataNotLoadedError: If an earlier load already failed
        """
        if self._loaded:
            return

        with self._lock:
            if self._loaded:
                return
            self._check_failed()

            try:
                headers, jobs = self.provider.read()
            except DataSourceError as e:
                logger.error(f"Failed to load job data from {self.provider.source_path}: {e}",
                             exc_info=True)
                self._load_error = e
                raise

            self._headers = headers
            self._jobs = jobs
            self._loaded = True

        logger.info(f"Loaded {len(self._jobs)} jobs with columns {self._headers}")

    def _check_failed(self) -> None:
        if self._load_error is not None:
            raise DataNotLoadedError(
                f"Job data is unavailable: {self._load_error}",
                details={'cause': self._load_error}
            )

    def _ensure_loaded(self) -> None:
        if not self._loaded:
            self._check_failed()
            self.load()

    def _check_column(self, column: str) -> None:
        if column not in self._headers:
            raise MissingColumnError(column, self._headers)

    def get_all_fields(self) -> List[str]:
        """
        Get the column names, in file order.

        Returns:
            List of column names
        """
        self._ensure_loaded()
        return list(self._headers)

    def get_record_count(self) -> int:
        self._ensure_loaded()
        return len(self._jobs)

    def find_all_values(self, column: str) -> List[str]:
        """
        Fetch every distinct value of a column, sorted.

        Args:
            column: The column to retrieve values from

        Returns:
            Sorted list of the column's values without duplicates

        Raises:
            MissingColumnError: If the column is not in the header
        """
        self._ensure_loaded()
        self._check_column(column)

        values = []
        seen = set()
        for job in self._jobs:
            value = job[column]
            if value not in seen:
                seen.add(value)
                values.append(value)

        values.sort()
        return values

    def find_all(self) -> List[Dict[str, str]]:
        """
        Fetch a copy of every job listing.

        Returns:
            List of all jobs in file order
        """
        self._ensure_loaded()
        return [dict(job) for job in self._jobs]

    def find_by_column_and_value(self, column: str, value: str) -> List[Dict[str, str]]:
        """
        Search one column for a term, case-insensitively.

        For example, searching employer for "Enterprise" includes jobs whose
        employer is "Enterprise Holdings, Inc".

        Args:
            column: Column that should be searched
            value: Term the column must contain

        Returns:
            List of matching jobs in file order

        Raises:
            MissingColumnError: If the column is not in the header
        """
        self._ensure_loaded()
        self._check_column(column)

        term = value.lower()
        jobs = [dict(job) for job in self._jobs if term in job[column].lower()]

        logger.debug(f"{len(jobs)} jobs with {column} containing '{value}'")
        return jobs

    def find_by_value(self, value: str) -> List[Dict[str, str]]:
        """
        Search every column for a term, case-insensitively.

        A job is returned once even when several of its columns match.
        Jobs are told apart by position, not by value: identical listings on
        separate lines of the source are separate jobs and are each
        returned, rather than collapsed into one.

        Args:
            value: Term any column must contain

        Returns:
            List of matching jobs in file order
        """
        self._ensure_loaded()

        term = value.lower()
        jobs = []
        for job in self._jobs:
            if any(term in cell.lower() for cell in job.values()):
                jobs.append(dict(job))

        logger.debug(f"{len(jobs)} jobs containing '{value}'")
        return jobs

    def __len__(self) -> int:
        return self.get_record_count()

    def __repr__(self) -> str:
        state = 'loaded' if self._loaded else ('failed' if self._load_error else 'not loaded')
        return f"JobStore({self.provider!r}, {state})"

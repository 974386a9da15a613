"""Session store mediating all traffic with the properties backend."""

from __future__ import annotations

import threading
from contextlib import contextmanager
from dataclasses import dataclass
from typing import Any, Iterator, List, Optional, Tuple

import httpx

from .config import PROPERTIES_API_URL, REQUEST_TIMEOUT
from .exceptions import CatalogError, ConfigurationError, FetchError, SubmitError
from .log import get_logger
from .models import NewProperty, Property

logger = get_logger(__name__)

FETCH_FAILED = "Failed to fetch properties"
SUBMIT_FAILED = "Failed to add property"

FETCH = "fetch"
SUBMIT = "submit"


@dataclass(frozen=True)
class OperationResult:
    """Outcome of a store operation: a value on success, a message otherwise."""

    ok: bool
    value: Any = None
    error: Optional[str] = None
    exception: Optional[CatalogError] = None

    @classmethod
    def success(cls, value: Any = None) -> "OperationResult":
        return cls(ok=True, value=value)

    @classmethod
    def failure(cls, exc: CatalogError) -> "OperationResult":
        return cls(ok=False, error=str(exc), exception=exc)


@dataclass(frozen=True)
class StoreSnapshot:
    properties: Tuple[Property, ...]
    loading: bool
    error: Optional[str]
    error_kind: Optional[str]


class PropertyStore:
    """Owns the in-memory property list for one session.

    The list is only ever replaced wholesale by a successful load. Failures
    never raise out of the store; they become ``error`` (with ``error_kind``
    telling a failed load from a failed create) and a failed
    ``OperationResult``. All backend calls go through one re-entrant lock,
    so a create and its follow-up reload cannot interleave with another load.
    """

    def __init__(
        self,
        base_url: str = PROPERTIES_API_URL,
        client: Optional[httpx.Client] = None,
        timeout: float = REQUEST_TIMEOUT,
    ):
        if not base_url:
            raise ConfigurationError("PROPERTIES_API_URL is not set")
        self.base_url = base_url
        self._timeout = timeout
        self._client = client
        self._owns_client = client is None
        self._lock = threading.RLock()
        self._properties: Tuple[Property, ...] = ()
        # nothing has been loaded yet, so a fresh session shows the spinner
        self._loading = True
        self._error: Optional[str] = None
        self._error_kind: Optional[str] = None
        self._started = False

    # lifecycle

    def start(self) -> "PropertyStore":
        """Open the HTTP client and run the initial load (once per store)."""
        with self._lock:
            if self._started:
                return self
            if self._client is None:
                self._client = httpx.Client(timeout=self._timeout)
            self._started = True
            self.load_all()
        return self

    def close(self) -> None:
        with self._lock:
            if self._client is not None and self._owns_client:
                self._client.close()
                self._client = None
            self._started = False

    def __enter__(self) -> "PropertyStore":
        return self.start()

    def __exit__(self, *exc_info) -> None:
        self.close()

    # read-only views

    @property
    def properties(self) -> Tuple[Property, ...]:
        return self._properties

    @property
    def loading(self) -> bool:
        return self._loading

    @property
    def error(self) -> Optional[str]:
        return self._error

    @property
    def error_kind(self) -> Optional[str]:
        return self._error_kind

    @property
    def started(self) -> bool:
        return self._started

    def snapshot(self) -> StoreSnapshot:
        with self._lock:
            return StoreSnapshot(
                self._properties, self._loading, self._error, self._error_kind
            )

    # operations

    def load_all(self) -> OperationResult:
        """Replace the property list with the backend's full collection."""
        with self._lock, self._loading_scope():
            self._clear_error()
            try:
                records = self._fetch()
            except CatalogError as e:
                self._set_error(e, FETCH)
                logger.warning("load failed: %s", e)
                return OperationResult.failure(e)
            self._properties = tuple(records)
            logger.info("loaded %d properties", len(records))
            return OperationResult.success(self._properties)

    refetch = load_all

    def create(self, candidate: NewProperty) -> OperationResult:
        """Submit a new listing, then reload the collection.

        The create counts as successful once the backend accepted the record;
        a failing reload shows up as a fetch error, not as a failed create.
        """
        with self._lock:
            prepared = candidate.with_defaults()
            try:
                prepared.validate()
                self._submit(prepared)
            except CatalogError as e:
                self._set_error(e, SUBMIT)
                logger.warning("create failed for %r: %s", candidate.name, e)
                return OperationResult.failure(e)
            logger.info("created property %r", prepared.name)
            self.load_all()
            return OperationResult.success(prepared)

    def _set_error(self, exc: CatalogError, kind: str) -> None:
        self._error = str(exc)
        self._error_kind = kind

    def _clear_error(self) -> None:
        self._error = None
        self._error_kind = None

    # backend calls

    @contextmanager
    def _loading_scope(self) -> Iterator[None]:
        self._loading = True
        try:
            yield
        finally:
            self._loading = False

    def _http(self) -> httpx.Client:
        if self._client is None:
            raise CatalogError("Store is not started")
        return self._client

    def _fetch(self) -> List[Property]:
        try:
            response = self._http().get(self.base_url)
        except httpx.HTTPError as e:
            raise FetchError(str(e) or FETCH_FAILED) from e
        if not response.is_success:
            raise FetchError(FETCH_FAILED)
        try:
            data = response.json()
        except ValueError as e:
            raise FetchError(FETCH_FAILED) from e
        if not isinstance(data, list):
            raise FetchError(FETCH_FAILED)
        try:
            # parse everything before touching state so no partial list lands
            return [Property.from_dict(item) for item in data]
        except (KeyError, TypeError, ValueError, AttributeError) as e:
            raise FetchError(FETCH_FAILED) from e

    def _submit(self, prepared: NewProperty) -> None:
        try:
            response = self._http().post(
                self.base_url,
                json=prepared.to_payload(),
                headers={"Content-Type": "application/json"},
            )
        except httpx.HTTPError as e:
            raise SubmitError(str(e) or SUBMIT_FAILED) from e
        if not response.is_success:
            raise SubmitError(SUBMIT_FAILED)

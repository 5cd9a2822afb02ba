# UI/panels/base.py
import itertools
import logging
import threading
from concurrent.futures import ThreadPoolExecutor
from typing import Any, Dict, List, Mapping, Optional, Sequence, Tuple, Type

import pydantic

from UI.errors import ApiError, RequestError, ValidationError
from UI.schemas import Record

logger = logging.getLogger("hrms")

_instances = itertools.count(1)


def is_blank(value: Any) -> bool:
    if value is None:
        return True
    if isinstance(value, str):
        return not value.strip()
    return False


class ResourcePanel:
    """
    One entity's "load list + submit create form" unit.

    Subclasses declare:
      - path / model: the collection route and the record model it returns
      - references: {name: (path, model)} lists fetched alongside, used only for display names
      - fields: {field: empty value}; required: fields that must be non-blank to submit
    and implement payload() and rows().
    """

    name: str = ""
    title: str = ""
    subtitle: str = ""
    empty_message: str = ""
    path: str = ""
    model: Type[Record] = Record
    references: Mapping[str, Tuple[str, Type[Record]]] = {}
    fields: Mapping[str, Any] = {}
    required: Sequence[str] = ()

    def __init__(self, client):
        self.client = client
        self.instance = next(_instances)
        self.items: List[Record] = []
        self.refs: Dict[str, List[Record]] = {name: [] for name in self.references}
        self._index: Dict[str, Dict[Any, Record]] = {name: {} for name in self.references}
        self.form: Dict[str, Any] = dict(self.fields)
        self.loading = False
        self.error: Optional[str] = None
        self._unmounted = threading.Event()

    # -----------------------------
    # Lifecycle
    # -----------------------------
    def mount(self) -> None:
        self.load()

    def unmount(self) -> None:
        self._unmounted.set()

    @property
    def mounted(self) -> bool:
        return not self._unmounted.is_set()

    def widget_key(self, field: str) -> str:
        return f"{self.name}-{self.instance}-{field}"

    # -----------------------------
    # Load
    # -----------------------------
    def _sources(self) -> Dict[str, Tuple[str, Type[Record]]]:
        sources = {"items": (self.path, self.model)}
        sources.update(self.references)
        return sources

    def _parse(self, key: str, model: Type[Record], payload: Any) -> List[Record]:
        if not isinstance(payload, list):
            raise RequestError(f"Expected a list for {self.name} {key}, got {type(payload).__name__}")
        records = []
        for raw in payload:
            try:
                records.append(model.model_validate(raw))
            except pydantic.ValidationError as e:
                # one bad record should not blank the whole list
                logger.warning("Skipping malformed %s record %r: %s", model.__name__, raw, e)
        return records

    def load(self) -> bool:
        """Fetch the list and every reference list concurrently; replace state only if all succeed."""
        sources = self._sources()
        self.loading = True
        try:
            with ThreadPoolExecutor(max_workers=len(sources)) as pool:
                futures = {key: pool.submit(self.client.get, path) for key, (path, _) in sources.items()}
                raw = {key: fut.result() for key, fut in futures.items()}
            parsed = {key: self._parse(key, sources[key][1], raw[key]) for key in sources}
        except ApiError as e:
            logger.warning("Loading %s failed: %s", self.name, e)
            self.error = str(e)
            return False
        finally:
            self.loading = False

        if not self.mounted:
            logger.info("Discarding %s list, panel was unmounted", self.name)
            return False

        self.items = parsed.pop("items")
        for key, records in parsed.items():
            self.refs[key] = records
            self._index[key] = {r.id: r for r in records}
        self.error = None
        return True

    # -----------------------------
    # Create
    # -----------------------------
    def validate(self) -> None:
        missing = [f for f in self.required if is_blank(self.form.get(f))]
        if missing:
            raise ValidationError(missing)

    def payload(self) -> Dict[str, Any]:
        raise NotImplementedError

    def clear(self) -> None:
        self.form = dict(self.fields)

    def create(self) -> bool:
        """Submit the form once; on success clear it and reload. Returns True when the form was cleared."""
        try:
            self.validate()
        except ValidationError as e:
            logger.debug("Not submitting %s: %s", self.name, e)
            return False

        try:
            self.client.post(self.path, self.payload())
        except ApiError as e:
            logger.warning("Creating %s failed: %s", self.name, e)
            self.error = str(e)
            return False

        if not self.mounted:
            logger.info("Skipping %s reload, panel was unmounted", self.name)
            return False

        self.clear()
        self.load()
        return True

    # -----------------------------
    # Display
    # -----------------------------
    def resolve(self, reference: str, ref_id: Any) -> str:
        record = self._index.get(reference, {}).get(ref_id)
        label = self.display_name(reference, record) if record is not None else None
        return label or str(ref_id)

    def display_name(self, reference: str, record: Record) -> Optional[str]:
        return getattr(record, "name", None)

    def rows(self) -> List[Dict[str, Any]]:
        raise NotImplementedError

# app/normalizers/base.py
from typing import Any, Protocol
from .types import CanonicalRecord, FieldResult, RawRecord


class FieldRule(Protocol):
    def __call__(self, value: Any) -> FieldResult:
        """Map one raw field value to a FieldResult. Must never raise."""
        ...


class Normalizer(Protocol):
    def normalize(self, raw: RawRecord) -> CanonicalRecord:
        """Return a NEW canonical record. Do not mutate `raw`."""
        ...

# app/normalizers/types.py
from dataclasses import dataclass, field
from typing import Any, Literal, Optional, Tuple, TypedDict, Union

# Wire names of the raw product fields, in evaluation order.
Field = Literal["name", "price", "stock", "category", "updatedAt"]
FIELD_ORDER: Tuple[Field, ...] = ("name", "price", "stock", "category", "updatedAt")


class _Missing:
    """Stands in for a key the raw record does not have at all (as opposed to null)."""
    def __repr__(self):
        return "MISSING"


MISSING = _Missing()


class RawRecord(TypedDict, total=False):
    """Untrusted product record as stored / received. Nothing here is guaranteed."""
    id: str
    name: Any
    price: Any
    stock: Any
    category: Any
    updatedAt: Any


@dataclass(frozen=True)
class Issue:
    field: Field
    message: str

    def to_dict(self) -> dict:
        return {"field": self.field, "message": self.message}


@dataclass(frozen=True)
class FieldResult:
    """Output of one field rule: the cleaned value plus what it cost."""
    value: Any
    issue: Optional[Issue] = None
    penalty: int = 0

    @property
    def clean(self) -> bool:
        return self.issue is None and self.penalty == 0


# -----------------------------
# Category comes in three shapes; tag it at the boundary.
# -----------------------------
@dataclass(frozen=True)
class TextCategory:
    value: str


@dataclass(frozen=True)
class ListCategory:
    items: Tuple[Any, ...]


@dataclass(frozen=True)
class MissingCategory:
    original: Any = None


CategoryInput = Union[TextCategory, ListCategory, MissingCategory]


def classify_category(value: Any) -> CategoryInput:
    if isinstance(value, str):
        return TextCategory(value)
    if isinstance(value, (list, tuple)):
        return ListCategory(tuple(value))
    return MissingCategory(value)


@dataclass(frozen=True)
class CanonicalRecord:
    id: str
    name: str
    price: float
    stock: int
    category: str
    updated_at: Optional[str]
    glitch_score: int = 0
    glitch_report: Tuple[Issue, ...] = field(default_factory=tuple)

    @property
    def glitched(self) -> bool:
        return self.glitch_score != 0

    def to_dict(self) -> dict:
        """Serialize using the same camelCase keys the raw records use."""
        return {
            "id": self.id,
            "name": self.name,
            "price": self.price,
            "stock": self.stock,
            "category": self.category,
            "updatedAt": self.updated_at,
            "glitchScore": self.glitch_score,
            "glitchReport": [i.to_dict() for i in self.glitch_report],
        }

    def to_raw(self) -> RawRecord:
        """Rebuild a raw-shaped record from the cleaned values (no score/report)."""
        return RawRecord(
            id=self.id,
            name=self.name,
            price=self.price,
            stock=self.stock,
            category=self.category,
            updatedAt=self.updated_at,
        )

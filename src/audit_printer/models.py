"""Data models for audit results."""

from dataclasses import dataclass, field
from typing import Any, Optional, Union

from .errors import ResultsLoadError, UnresolvedAuditError


def _extra(data: dict[str, Any], known: tuple[str, ...]) -> dict[str, Any]:
    """Keys of a JSON object this model does not interpret."""
    return {k: v for k, v in data.items() if k not in known}


def _require(data: Any, kind: str) -> dict[str, Any]:
    if not isinstance(data, dict):
        raise ResultsLoadError(f"Expected {kind} object, got {type(data).__name__}")
    return data


def _list(data: dict[str, Any], key: str) -> list[Any]:
    """A JSON array field; a missing key or null reads as empty."""
    value = data.get(key)
    if value is None:
        return []
    if not isinstance(value, list):
        raise ResultsLoadError(f"Expected {key!r} to be an array, got {type(value).__name__}")
    return value


def _mapping(data: dict[str, Any], key: str) -> dict[str, Any]:
    """A JSON object field; a missing key or null reads as empty."""
    value = data.get(key)
    if value is None:
        return {}
    return _require(value, repr(key))


def _number(data: dict[str, Any], key: str) -> float:
    value = data.get(key)
    if value is None:
        return 0
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ResultsLoadError(f"Expected {key!r} to be a number, got {type(value).__name__}")
    return value


@dataclass
class ExtendedInfo:
    """Supplementary audit detail rendered by a named formatter."""
    value: Any
    formatter: str

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "ExtendedInfo":
        data = _require(data, "extendedInfo")
        return cls(value=data.get("value"), formatter=data.get("formatter", "null"))

    def to_dict(self) -> dict[str, Any]:
        return {"value": self.value, "formatter": self.formatter}


@dataclass
class AuditResult:
    """Outcome of a single audit."""
    score: Union[bool, int, float, str]
    description: str
    display_value: Optional[str] = None
    debug_string: Optional[str] = None
    extended_info: Optional[ExtendedInfo] = None
    extra: dict[str, Any] = field(default_factory=dict)

    _KEYS = ("score", "description", "displayValue", "debugString", "extendedInfo")

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "AuditResult":
        data = _require(data, "audit")
        extended = data.get("extendedInfo")
        return cls(
            score=data.get("score"),
            description=data.get("description", ""),
            display_value=data.get("displayValue"),
            debug_string=data.get("debugString"),
            extended_info=ExtendedInfo.from_dict(extended) if extended is not None else None,
            extra=_extra(data, cls._KEYS),
        )

    def to_dict(self) -> dict[str, Any]:
        out: dict[str, Any] = {"score": self.score, "description": self.description}
        if self.display_value is not None:
            out["displayValue"] = self.display_value
        if self.debug_string is not None:
            out["debugString"] = self.debug_string
        if self.extended_info is not None:
            out["extendedInfo"] = self.extended_info.to_dict()
        out.update(self.extra)
        return out


@dataclass
class AuditRef:
    """Sub-item given as a key into Results.audits."""
    key: str


SubItem = Union[AuditResult, AuditRef]


@dataclass
class AggregationResultItem:
    """A scored group of audits inside an aggregation."""
    overall: float
    name: str
    scored: bool
    sub_items: list[SubItem] = field(default_factory=list)
    extra: dict[str, Any] = field(default_factory=dict)

    _KEYS = ("overall", "name", "scored", "subItems")

    @property
    def percentage(self) -> int:
        """Overall score as a whole percentage, rounded half up."""
        return int(self.overall * 100 + 0.5)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "AggregationResultItem":
        data = _require(data, "aggregation item")
        sub_items: list[SubItem] = []
        for entry in _list(data, "subItems"):
            if isinstance(entry, str):
                sub_items.append(AuditRef(entry))
            else:
                sub_items.append(AuditResult.from_dict(entry))
        return cls(
            overall=_number(data, "overall"),
            name=data.get("name", ""),
            scored=bool(data.get("scored", False)),
            sub_items=sub_items,
            extra=_extra(data, cls._KEYS),
        )

    def to_dict(self) -> dict[str, Any]:
        out: dict[str, Any] = {
            "overall": self.overall,
            "name": self.name,
            "scored": self.scored,
            "subItems": [
                s.key if isinstance(s, AuditRef) else s.to_dict()
                for s in self.sub_items
            ],
        }
        out.update(self.extra)
        return out


@dataclass
class Aggregation:
    """A category of audit items, e.g. "Performance"."""
    name: str
    items: list[AggregationResultItem] = field(default_factory=list)
    extra: dict[str, Any] = field(default_factory=dict)

    _KEYS = ("name", "score", "items")

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Aggregation":
        data = _require(data, "aggregation")
        items = _list(data, "score" if "score" in data else "items")
        return cls(
            name=data.get("name", ""),
            items=[AggregationResultItem.from_dict(i) for i in items],
            extra=_extra(data, cls._KEYS),
        )

    def to_dict(self) -> dict[str, Any]:
        out: dict[str, Any] = {
            "name": self.name,
            "score": [i.to_dict() for i in self.items],
        }
        out.update(self.extra)
        return out


@dataclass
class Results:
    """Complete results tree for one audited URL."""
    url: str
    version: str
    aggregations: list[Aggregation] = field(default_factory=list)
    audits: dict[str, AuditResult] = field(default_factory=dict)
    extra: dict[str, Any] = field(default_factory=dict)

    _KEYS = ("url", "lighthouseVersion", "version", "aggregations", "audits")

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Results":
        data = _require(data, "results")
        version = data["lighthouseVersion"] if "lighthouseVersion" in data else data.get("version", "")
        return cls(
            url=data.get("url", ""),
            version=version,
            aggregations=[Aggregation.from_dict(a) for a in _list(data, "aggregations")],
            audits={k: AuditResult.from_dict(v) for k, v in _mapping(data, "audits").items()},
            extra=_extra(data, cls._KEYS),
        )

    def to_dict(self) -> dict[str, Any]:
        out: dict[str, Any] = {
            "url": self.url,
            "aggregations": [a.to_dict() for a in self.aggregations],
            "audits": {k: v.to_dict() for k, v in self.audits.items()},
            "lighthouseVersion": self.version,
        }
        out.update(self.extra)
        return out

    def resolve(self, sub_item: SubItem) -> AuditResult:
        """Return the audit result for an inline or referenced sub-item."""
        if isinstance(sub_item, AuditRef):
            audit = self.audits.get(sub_item.key)
            if audit is None:
                raise UnresolvedAuditError(sub_item.key)
            return audit
        return sub_item

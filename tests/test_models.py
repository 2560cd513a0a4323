import pytest

from audit_printer.errors import ResultsLoadError, UnresolvedAuditError
from audit_printer.models import (
    AggregationResultItem,
    AuditRef,
    AuditResult,
    Results,
)


def test_string_sub_items_become_refs(results):
    item = results.aggregations[0].items[0]
    assert item.sub_items[0] == AuditRef("service-worker")
    assert isinstance(item.sub_items[1], AuditResult)


def test_to_dict_restores_input(sample_data, results):
    assert results.to_dict() == sample_data


def test_unknown_keys_kept_in_extra(results):
    assert results.extra == {"generatedTime": "2016-10-01T12:00:00.000Z"}
    assert results.audits["service-worker"].extra == {"name": "service-worker"}


def test_missing_optional_fields_stay_absent(results):
    audit = results.audits["external-anchors"]
    assert audit.display_value is None
    assert audit.extended_info is None
    assert "displayValue" not in audit.to_dict()


def test_aliases_accepted():
    results = Results.from_dict({
        "url": "http://x",
        "version": "2.0",
        "aggregations": [{"name": "Cat", "items": [{"overall": 1, "name": "I", "scored": True, "subItems": []}]}],
        "audits": {},
    })
    assert results.version == "2.0"
    assert results.aggregations[0].items[0].name == "I"


def test_resolve_reference(results):
    assert results.resolve(AuditRef("first-meaningful-paint")).score == 93


def test_resolve_inline_returns_same_object(results):
    audit = AuditResult(score=1, description="inline")
    assert results.resolve(audit) is audit


def test_resolve_missing_key_raises(results):
    with pytest.raises(UnresolvedAuditError) as exc:
        results.resolve(AuditRef("does-not-exist"))
    assert exc.value.key == "does-not-exist"
    assert "does-not-exist" in str(exc.value)


@pytest.mark.parametrize("overall,expected", [
    (0.8, 80),
    (0.5, 50),
    (0.285, 28),
    (0.996, 100),
    (0.004, 0),
    (1, 100),
])
def test_percentage_rounding(overall, expected):
    item = AggregationResultItem(overall=overall, name="x", scored=True)
    assert item.percentage == expected


def test_non_object_rejected():
    with pytest.raises(ResultsLoadError):
        Results.from_dict(["not", "an", "object"])


def test_null_collections_read_as_empty():
    results = Results.from_dict({
        "url": "http://x",
        "lighthouseVersion": "1.0",
        "aggregations": [{"name": "Cat", "score": [
            {"overall": None, "name": "Item", "scored": True, "subItems": None},
        ]}],
        "audits": None,
    })
    item = results.aggregations[0].items[0]
    assert results.audits == {}
    assert item.sub_items == []
    assert item.percentage == 0


@pytest.mark.parametrize("data", [
    {"aggregations": None},
    {"aggregations": [{"name": "Cat", "score": None}]},
    {"aggregations": [{"name": "Cat", "items": None}]},
])
def test_null_aggregation_fields(data):
    results = Results.from_dict({"url": "http://x", **data})
    assert all(a.items == [] for a in results.aggregations)


@pytest.mark.parametrize("data", [
    {"audits": []},
    {"aggregations": {"name": "Cat"}},
    {"aggregations": [{"name": "Cat", "score": "oops"}]},
    {"aggregations": [{"name": "Cat", "score": [{"overall": "high", "subItems": []}]}]},
    {"aggregations": [{"name": "Cat", "score": [{"overall": 1, "subItems": 3}]}]},
    {"aggregations": [{"name": "Cat", "score": [{"overall": 1, "subItems": [7]}]}]},
])
def test_wrong_types_rejected(data):
    with pytest.raises(ResultsLoadError):
        Results.from_dict({"url": "http://x", **data})

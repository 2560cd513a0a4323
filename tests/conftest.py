"""Shared fixtures for audit-printer tests."""

import copy

import pytest
from loguru import logger

from audit_printer.models import Results


SAMPLE_DATA = {
    "url": "https://example.com/",
    "lighthouseVersion": "1.2.0",
    "generatedTime": "2016-10-01T12:00:00.000Z",
    "aggregations": [
        {
            "name": "Progressive Web App",
            "description": "These audits validate the aspects of a PWA.",
            "score": [
                {
                    "overall": 0.5,
                    "name": "App can load on offline/flaky connections",
                    "scored": True,
                    "subItems": [
                        "service-worker",
                        {
                            "score": False,
                            "description": "Responds with a 200 when offline",
                            "displayValue": "",
                            "debugString": "No service worker registered",
                        },
                    ],
                },
                {
                    "overall": 1,
                    "name": "Page load performance is fast",
                    "scored": True,
                    "subItems": ["first-meaningful-paint"],
                },
            ],
        },
        {
            "name": "Best Practices",
            "score": [
                {
                    "overall": 0.25,
                    "name": "Using modern protocols",
                    "scored": False,
                    "subItems": [
                        {"score": "n/a", "description": "Uses HTTP/2"},
                        "uses-passive-listeners",
                    ],
                },
                {
                    "overall": 0,
                    "name": "",
                    "scored": False,
                    "subItems": ["external-anchors"],
                },
            ],
        },
    ],
    "audits": {
        "service-worker": {
            "name": "service-worker",
            "score": True,
            "description": "Has a registered Service Worker",
            "displayValue": "",
            "debugString": "",
        },
        "first-meaningful-paint": {
            "score": 93,
            "description": "First meaningful paint",
            "displayValue": "1035.6ms",
            "debugString": "",
        },
        "uses-passive-listeners": {
            "score": False,
            "description": "Site is using passive listeners",
            "extendedInfo": {
                "formatter": "url-list",
                "value": ["https://example.com/app.js", "https://example.com/vendor.js"],
            },
        },
        "external-anchors": {
            "score": 30,
            "description": "Opens external anchors safely",
            "debugString": "Lighthouse was unable to determine the destination",
        },
    },
}


@pytest.fixture
def sample_data():
    return copy.deepcopy(SAMPLE_DATA)


@pytest.fixture
def results(sample_data):
    return Results.from_dict(sample_data)


@pytest.fixture
def log_messages():
    """Collect loguru messages emitted during a test."""
    messages = []
    handler_id = logger.add(lambda m: messages.append(m.record["message"]), level="DEBUG")
    yield messages
    logger.remove(handler_id)

import json

import pytest

from audit_printer.composer import create_output
from audit_printer.errors import InvalidModeError
from audit_printer.models import Results
from audit_printer.modes import OutputMode
from audit_printer.pretty import render_pretty


def test_json_round_trip(results, sample_data):
    output = create_output(results, OutputMode.JSON)
    parsed = json.loads(output)
    assert parsed == sample_data
    assert Results.from_dict(parsed) == results


def test_json_is_indented(results):
    output = create_output(results, OutputMode.JSON)
    assert output.startswith('{\n  "url": "https://example.com/"')


@pytest.mark.parametrize("mode", list(OutputMode))
def test_output_is_deterministic(results, mode):
    assert create_output(results, mode) == create_output(results, mode)


def test_pretty_dispatch(results):
    assert create_output(results, OutputMode.PRETTY) == render_pretty(results)
    assert create_output(results, OutputMode.PRETTY, color=False) == render_pretty(results, color=False)


def test_html_dispatch(results):
    output = create_output(results, OutputMode.HTML)
    assert output.startswith("<!DOCTYPE html>")
    assert "<style>" in output


@pytest.mark.parametrize("mode", ["pretty", "xml", None])
def test_unresolved_mode_rejected(results, mode):
    with pytest.raises(InvalidModeError):
        create_output(results, mode)

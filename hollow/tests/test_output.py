"""
Tests for the JSON stub report
"""

import json
from typing import List

from hollow.cache import TypeCache
from hollow.output.json_formatter import StubReportFormatter, format_stub, type_name
from hollow.tests.contracts import Color, Point, Secretive, Shape


def test_type_name():
    assert type_name(int) == "int"
    assert type_name(None) == "None"
    assert type_name("Missing") == "Missing"
    assert type_name(Color) == "hollow.tests.contracts.Color"
    assert type_name(List[int]) == "List[int]"


def test_format_stub():
    report = format_stub(TypeCache().get_or_create(Shape))

    assert report["name"] == "ShapeStub"
    assert report["contract"] == "hollow.tests.contracts.Shape"
    assert report["interfaces"] == ["hollow.tests.contracts.Shape", "hollow.tests.contracts.Named"]

    properties = {p["name"]: p for p in report["properties"]}
    assert properties["sides"] == {
        "name": "sides",
        "type": "int",
        "default": "0",
        "backing_field": "_sides"
    }
    assert properties["name"]["default"] == "''"

    methods = {m["name"]: m for m in report["methods"]}
    assert methods["unit"]["binding"] == "static"
    assert methods["fetch"]["is_async"] is True
    assert methods["default_color"]["default"] == "<Color.RED: 1>"


def test_format_skipped_members():
    report = format_stub(TypeCache().get_or_create(Secretive))
    assert report["skipped"] == ["secret"]


def test_report_summary(tmp_path):
    cache = TypeCache()
    formatter = StubReportFormatter(source="tests")
    formatter.add_stub(cache.get_or_create(Point))
    formatter.add_stub(cache.get_or_create(Secretive))

    data = formatter.generate()
    assert data["schema_version"] == StubReportFormatter.SCHEMA_VERSION
    assert data["metadata"]["source"] == "tests"
    assert data["summary"] == {
        "total_stubs": 2,
        "properties": 2,
        "methods": 1,
        "skipped": 1
    }

    output = tmp_path / "reports" / "stubs.json"
    formatter.save_to_file(str(output))
    assert json.loads(output.read_text())["summary"]["total_stubs"] == 2
    assert json.loads(formatter.to_json_string())["results"][0]["name"] == "PointStub"

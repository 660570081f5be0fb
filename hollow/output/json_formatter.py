"""
JSON output formatter for synthesized stub types.
"""

import json
import typing
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Dict, List

from hollow import __version__
from hollow.core.models import SynthesizedType


def type_name(annotation: Any) -> str:
    """Readable name for a declared type."""
    if annotation is None or annotation is type(None):
        return "None"
    if isinstance(annotation, str):
        return annotation
    if isinstance(annotation, type) and typing.get_origin(annotation) is None:
        if annotation.__module__ == "builtins":
            return annotation.__qualname__
        return f"{annotation.__module__}.{annotation.__qualname__}"
    return repr(annotation).replace("typing.", "")


def format_stub(synthesized: SynthesizedType) -> Dict[str, Any]:
    """
    Describe one stub type as plain JSON-compatible data.

    Default values are rendered with repr() since they need not be JSON types.
    """
    return {
        "name": synthesized.name,
        "qualified_name": synthesized.qualified_name,
        "contract": type_name(synthesized.contract),
        "properties": [
            {
                "name": prop.name,
                "type": type_name(prop.value_type),
                "default": repr(prop.default),
                "backing_field": prop.backing_field
            }
            for prop in synthesized.properties
        ],
        "methods": [
            {
                "name": stub.name,
                "returns": type_name(stub.return_type),
                "default": repr(stub.default),
                "binding": stub.binding.value,
                "is_async": stub.is_async
            }
            for stub in synthesized.methods
        ],
        "interfaces": [type_name(face) for face in synthesized.interfaces],
        "skipped": list(synthesized.skipped)
    }


class StubReportFormatter:
    """
    Collects stub descriptions into a single JSON report.
    """

    SCHEMA_VERSION = "1.0.0"

    def __init__(self, source: str = ""):
        """
        Initialize formatter.

        Args:
            source: What the contracts were resolved from (e.g. a module path)
        """
        self.source = source
        self.results: List[Dict[str, Any]] = []

    def add_stub(self, synthesized: SynthesizedType) -> None:
        self.results.append(format_stub(synthesized))

    def generate(self) -> Dict[str, Any]:
        """
        Generate the complete JSON output structure.

        Returns:
            Dictionary representing the JSON structure
        """
        return {
            "schema_version": self.SCHEMA_VERSION,
            "metadata": {
                "timestamp": datetime.now(timezone.utc).isoformat(),
                "source": self.source,
                "generator_version": f"hollow-{__version__}"
            },
            "summary": {
                "total_stubs": len(self.results),
                "properties": sum(len(r["properties"]) for r in self.results),
                "methods": sum(len(r["methods"]) for r in self.results),
                "skipped": sum(len(r["skipped"]) for r in self.results)
            },
            "results": self.results
        }

    def to_json_string(self, indent: int = 2) -> str:
        return json.dumps(self.generate(), indent=indent)

    def save_to_file(self, output_path: str, indent: int = 2) -> None:
        """
        Save JSON to file.

        Args:
            output_path: Path to output JSON file
            indent: Number of spaces for indentation
        """
        Path(output_path).parent.mkdir(parents=True, exist_ok=True)
        with open(output_path, 'w', encoding='utf-8') as f:
            json.dump(self.generate(), f, indent=indent)

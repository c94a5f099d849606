"""Write the JSON Schema of the flat ``ImpactRecord`` usage-log row.

Usage:

    python scripts/export_record_schema.py [--output PATH]

Downstream log pipelines validate rows written by ``llm-impact -f record``
against this schema. The default file name carries the record schema version.
"""

from __future__ import annotations

import argparse
import json
from pathlib import Path

from llm_impact.schemas import CURRENT_RECORD_SCHEMA_VERSION, ImpactRecord

DEFAULT_OUTPUT = Path(__file__).resolve().parent.parent / (
    f"impact_record_schema_v{CURRENT_RECORD_SCHEMA_VERSION}.json"
)


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Export the ImpactRecord JSON Schema.")
    parser.add_argument("--output", "-o", type=Path, default=DEFAULT_OUTPUT)
    args = parser.parse_args(argv)

    schema = ImpactRecord.model_json_schema()
    schema["$id"] = f"llm-impact/impact-record/{CURRENT_RECORD_SCHEMA_VERSION}"
    args.output.parent.mkdir(parents=True, exist_ok=True)
    args.output.write_text(json.dumps(schema, indent=2) + "\n", encoding="utf-8")
    print(args.output)


if __name__ == "__main__":
    main()

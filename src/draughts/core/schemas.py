"""Schema loading and validation utilities."""

import json
from pathlib import Path

import jsonschema


def load_schema(path: Path) -> dict:
    """Load a JSON Schema file and return as dict."""
    with open(path) as f:
        return json.load(f)


def schema_errors(document: object, schema: dict) -> list[str]:
    """Return every schema violation in *document*, empty if it is valid.

    Each message is prefixed with the dotted path of the offending value.
    """
    validator = jsonschema.Draft7Validator(schema)
    messages = []
    for error in sorted(validator.iter_errors(document), key=lambda e: list(e.path)):
        where = ".".join(str(p) for p in error.path) or "<root>"
        messages.append(f"{where}: {error.message}")
    return messages

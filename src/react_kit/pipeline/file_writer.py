"""File artifacts: literal overwrites and the JSON manifest merge."""

import json
from pathlib import Path

from react_kit.pipeline.errors import ManifestMergeError


def write_file(path, content: str) -> None:
    """Overwrite path with content, creating parent directories."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content, encoding="utf-8")


def merge_json_key(path, key: str, value) -> dict:
    """Set key to value in the JSON object at path and rewrite the file.

    Existing keys and their order are kept; key is replaced in place if it
    already exists, appended otherwise.

    Raises:
        ManifestMergeError: If the file is not UTF-8, not valid JSON or not an object.
        OSError: If the file cannot be read or written.
    """
    path = Path(path)
    try:
        text = path.read_text(encoding="utf-8")
    except UnicodeDecodeError as exc:
        raise ManifestMergeError(path, f"not valid UTF-8 ({exc})") from exc
    try:
        document = json.loads(text)
    except json.JSONDecodeError as exc:
        raise ManifestMergeError(path, f"invalid JSON ({exc})") from exc
    if not isinstance(document, dict):
        raise ManifestMergeError(path, "expected a JSON object")

    document[key] = value
    path.write_text(json.dumps(document, indent=2, ensure_ascii=False) + "\n", encoding="utf-8")
    return document

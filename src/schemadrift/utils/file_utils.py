# src/schemadrift/utils/file_utils.py
import json
import yaml
from typing import Literal

FileType = Literal["json", "yaml", "unknown"]


def detect_file_type(filename: str, raw_bytes: bytes) -> FileType:
    """
    Best-effort file type detection:
    1. Use extension if available
    2. Otherwise try parsing JSON, then YAML
    """
    name = (filename or "").lower()

    if name.endswith(".json"):
        return "json"
    if name.endswith((".yaml", ".yml")):
        return "yaml"

    try:
        text = raw_bytes.decode("utf-8")
    except UnicodeDecodeError:
        return "unknown"

    try:
        json.loads(text)
        return "json"
    except ValueError:
        pass

    try:
        yaml.safe_load(text)
        return "yaml"
    except yaml.YAMLError:
        pass

    return "unknown"

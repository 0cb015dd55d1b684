# Copyright (C) 2025 Logical Mechanism LLC
# SPDX-License-Identifier: GPL-3.0-only
import json

from pathlib import Path
from typing import Any


def save_json(path: str | Path, data: Any) -> None:
    """
    Write `data` as JSON (indent 2, sorted keys), creating parent directories.

    Raises:
        TypeError: If `data` is not JSON-serializable.
        OSError: If the file cannot be written.
    """
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    with path.open("w", encoding="utf-8") as f:
        json.dump(data, f, indent=2, sort_keys=True)


def load_json(path: str | Path) -> Any:
    path = Path(path)
    with path.open("r", encoding="utf-8") as f:
        return json.load(f)


def extract_key(file_path: str | Path) -> bytes:
    """
    Extract the raw key bytes from a wallet key file.

    The file is JSON with a top-level `"cborHex"` field holding a CBOR byte
    string: a 2-byte header (`5820`) followed by the 32 key bytes.

    Args:
        file_path: Path to the wallet key file.

    Returns:
        bytes: The 32 key bytes.

    Raises:
        KeyError: If `"cborHex"` is missing.
        ValueError: If the payload is not 32 bytes of hex.
    """
    data = load_json(file_path)
    key = bytes.fromhex(data["cborHex"][4:])
    if len(key) != 32:
        raise ValueError(f"wallet key must be 32 bytes, got {len(key)}")
    return key


def get_bytes(data: dict, index: int) -> str:
    """
    Return the hex string held by field `index` of a constructor object.

    Raises:
        ValueError: If the object is not a `{"constructor": 0, "fields": [...]}`
            value with a `{"bytes": ...}` entry at `index`.
    """
    try:
        if data["constructor"] != 0:
            raise ValueError(f"unexpected constructor {data['constructor']}")
        value = data["fields"][index]["bytes"]
    except (KeyError, IndexError, TypeError) as e:
        raise ValueError(f"missing bytes field {index}") from e
    if not isinstance(value, str):
        raise ValueError(f"field {index} must be a hex string")
    return value

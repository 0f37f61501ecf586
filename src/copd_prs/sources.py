"""
Data source module for COPD PRS Lookup.

Fetches the raw variant dataset from a local JSON file or an HTTP(S) URL and
validates its shape against the bundled JSON schema.
"""

import json
import logging
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

import jsonschema
import requests

from copd_prs.config import DEFAULT_TIMEOUT
from copd_prs.exceptions import LoadError

# Configure logging
log = logging.getLogger("copd-prs")

SCHEMA_PATH = Path(__file__).parent / "schemas" / "variant_records.json"

_schema_cache: Optional[Dict] = None


def is_remote(source: Union[str, Path]) -> bool:
    """Return True if the source should be fetched over HTTP."""
    return str(source).lower().startswith(("http://", "https://"))


def load_schema(schema_path: Optional[Union[str, Path]] = None) -> Dict:
    """
    Load the variant records JSON schema.

    Args:
        schema_path: Path to a schema file. If None, uses the bundled schema.

    Returns:
        Dict: The loaded JSON schema
    """
    global _schema_cache

    if schema_path is None and _schema_cache is not None:
        return _schema_cache

    path = Path(schema_path) if schema_path else SCHEMA_PATH
    with open(path, "r") as f:
        schema = json.load(f)

    if schema_path is None:
        _schema_cache = schema
    return schema


def _fetch_remote(url: str, timeout: float) -> Any:
    log.info(f"Fetching variant data from {url}")
    try:
        response = requests.get(url, timeout=timeout)
    except requests.RequestException as e:
        raise LoadError(f"Could not reach {url}", details=str(e)) from e

    try:
        response.raise_for_status()
    except requests.HTTPError as e:
        raise LoadError(f"HTTP error! status: {response.status_code}", details=url) from e

    try:
        return response.json()
    except ValueError as e:
        raise LoadError(f"Invalid JSON returned by {url}", details=str(e)) from e


def _read_local(path: Path) -> Any:
    log.info(f"Reading variant data from {path}")
    try:
        with open(path, "r", encoding="utf-8") as f:
            return json.load(f)
    except FileNotFoundError as e:
        raise LoadError(f"Data file not found: {path}") from e
    except OSError as e:
        raise LoadError(f"Could not read data file {path}", details=str(e)) from e
    except json.JSONDecodeError as e:
        raise LoadError(f"Invalid JSON in {path}", details=str(e)) from e
    except UnicodeDecodeError as e:
        raise LoadError(f"Data file {path} is not valid UTF-8", details=str(e)) from e


def validate_records(payload: Any, schema: Optional[Dict] = None) -> List[Dict[str, Any]]:
    """
    Validate a decoded payload against the variant records schema.

    Args:
        payload: Decoded JSON payload
        schema: Schema to validate against. If None, uses the bundled schema.

    Returns:
        List of raw record dicts

    Raises:
        LoadError: If the payload does not match the schema
    """
    try:
        jsonschema.validate(instance=payload, schema=schema or load_schema())
    except jsonschema.exceptions.ValidationError as e:
        location = "/".join(str(part) for part in e.absolute_path) or "<root>"
        raise LoadError("Variant data failed validation", details=f"{location}: {e.message}") from e
    return payload


def fetch_records(source: Union[str, Path], timeout: float = DEFAULT_TIMEOUT) -> List[Dict[str, Any]]:
    """
    Obtain the raw variant records from a data source.

    Args:
        source: Local path or HTTP(S) URL of a JSON array of records
        timeout: Request timeout in seconds for remote sources

    Returns:
        List of raw record dicts, in source order

    Raises:
        LoadError: If the source is unreachable, returns a non-success status,
            or does not contain a valid record array
    """
    if is_remote(source):
        payload = _fetch_remote(str(source), timeout)
    else:
        payload = _read_local(Path(source))

    return validate_records(payload)

"""Authentication and signing utilities for the EcoFlow cloud API."""

import hashlib
import hmac
import random
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any
from urllib.parse import urlencode

from ..utils.timing import get_timestamp_ms

NONCE_MIN = 100000
NONCE_MAX = 999999


@dataclass(frozen=True)
class Credentials:
    """Access/secret key pair issued by the EcoFlow developer portal."""

    access_key: str
    secret_key: str

    def __post_init__(self):
        if not self.access_key or not self.secret_key:
            raise ValueError("Both access_key and secret_key are required")

    def __repr__(self) -> str:
        return f"Credentials(access_key={self.access_key!r}, secret_key='***')"


def flatten(params: Mapping[str, Any] | list, prefix: str = "") -> dict[str, Any]:
    """
    Flatten nested parameters into a single-level dict with dot-joined keys.

    Lists are expanded by index, so {"a": [5, 6]} becomes {"a.0": 5, "a.1": 6}.

    Args:
        params: Nested mapping (or list) of request parameters
        prefix: Key prefix for the current nesting level

    Returns:
        Flat dict of scalar values
    """
    items = params.items() if isinstance(params, Mapping) else enumerate(params)
    result: dict[str, Any] = {}

    for key, value in items:
        new_key = str(key) if prefix == "" else f"{prefix}.{key}"

        if isinstance(value, (Mapping, list, tuple)):
            for flat_key, flat_value in flatten(value, new_key).items():
                # First occurrence wins on key collisions
                result.setdefault(flat_key, flat_value)
        else:
            result.setdefault(new_key, value)

    return result


def _encode_value(value: Any) -> str:
    if isinstance(value, bool):
        return "1" if value else "0"
    if isinstance(value, float):
        # Whole floats encode without the fractional part: 1.0 -> "1"
        if value.is_integer() and abs(value) < 1e15:
            return str(int(value))
        return repr(value)
    return str(value)


def canonicalize(mapping: Mapping[str, Any]) -> str:
    """
    Build a deterministic query string from a flat mapping.

    Keys are sorted lexicographically and None values are dropped. Booleans
    are encoded as 1/0, whole floats as integers.

    Example: {"b": 2, "a": "x y"} -> "a=x+y&b=2"
    """
    pairs = [
        (str(key), _encode_value(value))
        for key, value in sorted(mapping.items(), key=lambda kv: str(kv[0]))
        if value is not None
    ]
    return urlencode(pairs)


def build_signing_string(
    params: Mapping[str, Any] | None, headers: Mapping[str, Any]
) -> str:
    """
    Build the text the signature is computed over.

    Format: canonical(flatten(params)) + "&" + canonical(headers),
    with the params segment omitted when there are no params.
    """
    signing_string = ""

    if params:
        signing_string += canonicalize(flatten(params)) + "&"

    signing_string += canonicalize(headers)
    return signing_string


def sign(
    params: Mapping[str, Any] | None,
    headers: Mapping[str, Any],
    secret_key: str,
) -> str:
    """
    Sign a request using HMAC-SHA256.

    Args:
        params: Request parameters (nested allowed)
        headers: accessKey, nonce and timestamp headers
        secret_key: API secret key

    Returns:
        Hex-encoded HMAC-SHA256 digest
    """
    signing_string = build_signing_string(params, headers)

    return hmac.new(
        secret_key.encode("utf-8"),
        signing_string.encode("utf-8"),
        hashlib.sha256,
    ).hexdigest()


def generate_nonce() -> int:
    """Random 6-digit request nonce."""
    return random.randint(NONCE_MIN, NONCE_MAX)


def build_headers(
    credentials: Credentials,
    params: Mapping[str, Any] | None = None,
    nonce: int | None = None,
    timestamp: int | None = None,
) -> dict[str, str]:
    """
    Get authentication headers for a REST API request.

    Args:
        credentials: API credentials
        params: Parameters that are part of the signature
        nonce: Request nonce (random if None)
        timestamp: Epoch milliseconds (current time if None)

    Returns:
        Dictionary of headers including the signature
    """
    if nonce is None:
        nonce = generate_nonce()
    if timestamp is None:
        timestamp = get_timestamp_ms()

    headers = {
        "accessKey": credentials.access_key,
        "nonce": str(nonce),
        "timestamp": str(timestamp),
    }
    headers["sign"] = sign(params, headers, credentials.secret_key)

    return headers

"""Client modules for signed REST communication."""

from .auth import Credentials, build_headers, canonicalize, flatten, sign
from .rest import SignedApiClient

__all__ = [
    "Credentials",
    "SignedApiClient",
    "build_headers",
    "canonicalize",
    "flatten",
    "sign",
]

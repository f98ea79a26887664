"""Reusable type definitions for node identities."""

from .base import CamelModel, StrictBaseModel
from .byte_arrays import BaseBytes, Bytes16, Bytes32, Bytes64
from .exceptions import (
    AddressDerivationError,
    ConflictingPublicKeysError,
    EntropyExhaustedError,
    HexDecodeError,
    InvalidSigningKeyError,
    KeyDecodeError,
    PrefixLengthError,
    WrongKeyLengthError,
    YggKeysError,
)

__all__ = [
    # Core types
    "BaseBytes",
    "Bytes16",
    "Bytes32",
    "Bytes64",
    "CamelModel",
    "StrictBaseModel",
    # Exceptions
    "YggKeysError",
    "KeyDecodeError",
    "WrongKeyLengthError",
    "HexDecodeError",
    "ConflictingPublicKeysError",
    "InvalidSigningKeyError",
    "AddressDerivationError",
    "PrefixLengthError",
    "EntropyExhaustedError",
]

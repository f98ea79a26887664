"""Exception hierarchy for key import and address derivation."""

from __future__ import annotations


class YggKeysError(Exception):
    """
    Base exception for all errors raised by this package.

    Attributes:
        message: Human-readable error description.
    """

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.message!r})"


class KeyDecodeError(YggKeysError):
    """
    Base class for errors while importing keys from hex strings.

    None of these are transient: they describe bad input, so retrying
    with the same strings always fails the same way.
    """


class WrongKeyLengthError(KeyDecodeError):
    """
    Raised when decoded hex does not have an accepted byte length.

    The secret accepts 32 bytes (secret only) or 64 bytes (secret and
    public concatenated). The public key accepts 32 bytes.

    Attributes:
        kind: Which argument was rejected ("secret" or "public").
        actual: The decoded byte length.
    """

    def __init__(self, kind: str, actual: int) -> None:
        self.kind = kind
        self.actual = actual
        super().__init__(f"key has wrong length: {kind} key decoded to {actual} bytes")


class HexDecodeError(KeyDecodeError):
    """
    Raised when a key string is not valid hex.

    Attributes:
        cause: The underlying decode failure, which names the offending position.
    """

    def __init__(self, cause: Exception) -> None:
        self.cause = cause
        super().__init__(f"string is not valid hex: {cause}")


class ConflictingPublicKeysError(KeyDecodeError):
    """Raised when an explicit public key differs from the one embedded in a keypair."""

    def __init__(self) -> None:
        super().__init__("pub keys in optional argument and included with secret key differ")


class InvalidSigningKeyError(KeyDecodeError):
    """
    Raised when the signature library rejects the key bytes.

    Attributes:
        cause: The exception raised by the signature library.
    """

    def __init__(self, cause: Exception) -> None:
        self.cause = cause
        super().__init__(f"the signature keys are invalid: {cause}")


class AddressDerivationError(YggKeysError, ValueError):
    """
    Base class for structural failures while packing an address.

    These signal programmer or data errors: the prefix is a protocol
    constant and real public keys always leave enough entropy.
    """


class PrefixLengthError(AddressDerivationError):
    """
    Raised when the routing prefix does not fit the address or subnet.

    Attributes:
        length: The prefix length in bytes.
        maximum: The largest accepted length for the requested mode.
        net: True if a subnet was requested.
    """

    def __init__(self, length: int, maximum: int, *, net: bool) -> None:
        self.length = length
        self.maximum = maximum
        self.net = net

        kind = "subnet" if net else "address"
        super().__init__(
            f"{kind} prefix must be between 1 and {maximum} bytes, got {length}"
        )


class EntropyExhaustedError(AddressDerivationError):
    """
    Raised when too few bits remain after stripping the leading-ones run.

    Attributes:
        needed: Number of remainder bytes the address layout requires.
        available: Number of remainder bytes actually left.
    """

    def __init__(self, needed: int, available: int) -> None:
        self.needed = needed
        self.available = available
        super().__init__(
            f"public key leaves {available} bytes of entropy, address needs {needed}"
        )

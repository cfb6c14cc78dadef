"""Exception types raised by jwtkit."""


class JWTError(Exception):
    """Base class for all jwtkit errors."""

    default_message = "JWT operation failed"

    def __init__(self, message: str | None = None) -> None:
        super().__init__(message or self.default_message)

    @property
    def description(self) -> str:
        """Human readable description of the error."""
        return str(self)


class InvalidJWTStringError(JWTError):
    """Input was not dot-separated base64url segments."""

    default_message = "Input was not a valid JWT String"


class InvalidUTF8DataError(JWTError):
    """Raw token bytes could not be decoded as UTF-8."""

    default_message = "Could not decode Data from UTF8 to String"


class FailedVerificationError(JWTError):
    """The verifier rejected the token signature."""

    default_message = "JWT verifier failed to verify the JWT String signature"


class InvalidPrivateKeyError(JWTError):
    """The key could not be used to produce a signature."""

    default_message = "Provided private key could not be used to sign JWT"


class MissingPEMHeadersError(JWTError):
    """Key material had neither PEM armour nor a DER structure."""

    default_message = "The provided key did not have the expected PEM headers/footers"


class InvalidKeyIDError(JWTError):
    """The `kid` header was absent or did not resolve to a signer/verifier."""

    default_message = (
        "The JWT KeyID `kid` header failed to generate a JWTSigner/JWTVerifier"
    )


class UnsupportedAlgorithmError(JWTError):
    """The installed cryptography backend lacks a required primitive."""

    default_message = "The cryptography backend does not support this algorithm"


class JWTContainerError(JWTError):
    """A value other than a keyed {header, claims} structure was encoded."""

    default_message = "JWTEncoder can only encode JWT tokens"


class InvalidPublicKeyError(JWTError):
    """Public key or certificate material could not be parsed."""

    default_message = "Provided public key or certificate could not be loaded"

"""The "none" algorithm: no signature, every token verifies."""


class NoneAlgorithm:
    """Unsecured JWS. Only reachable through an explicit ``none()`` factory."""

    def sign(self, data: bytes) -> bytes:
        return b""

    def verify(self, signature: bytes, data: bytes) -> bool:
        return True

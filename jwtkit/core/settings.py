"""Settings loaded from environment variables."""

from pydantic_settings import BaseSettings, SettingsConfigDict

LEEWAY_DEFAULT = 0.0


class JWTSettings(BaseSettings):
    """Bearer-token acceptance policy for the HTTP integration."""

    model_config = SettingsConfigDict(env_prefix="JWT_")

    leeway: float = LEEWAY_DEFAULT
    validate_claims: bool = True
    issuer: str = ""
    audience: str = ""

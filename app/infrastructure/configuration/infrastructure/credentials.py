"""Credential cache infrastructure settings."""

from pydantic import Field

from infrastructure.configuration.base import InfrastructureSettings


class CredentialSettings(InfrastructureSettings):
    """Access-token cache configuration.

    Environment Variables:
        CREDENTIAL_EXPIRY_SKEW_SECONDS: Seconds subtracted from the provider TTL
            before a cached token is considered expired (default: 60)
        CREDENTIAL_SINGLE_FLIGHT: Serialize refreshes of the same key so
            concurrent sends issue one token request (default: True)

    Expiry calculation:
        expires_at = issued_at + expires_in - CREDENTIAL_EXPIRY_SKEW_SECONDS

        Example with a 7200s provider TTL: the token is reused for 7140s.
    """

    expiry_skew_seconds: int = Field(
        default=60,
        alias="CREDENTIAL_EXPIRY_SKEW_SECONDS",
        description="Safety margin subtracted from provider token TTL",
    )
    single_flight: bool = Field(
        default=True,
        alias="CREDENTIAL_SINGLE_FLIGHT",
        description="Serialize concurrent refreshes of the same credential",
    )

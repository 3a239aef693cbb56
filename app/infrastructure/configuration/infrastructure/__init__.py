"""Infrastructure settings __init__ - exports all infrastructure settings."""

from infrastructure.configuration.infrastructure.credentials import CredentialSettings
from infrastructure.configuration.infrastructure.transport import TransportSettings

__all__ = [
    "CredentialSettings",
    "TransportSettings",
]

from dataclasses import dataclass
from types import MappingProxyType
from typing import Iterable, Mapping

from hookgate.core.config import Settings


@dataclass(frozen=True)
class SecretStore:
    """Webhook HMAC keys by provider name, fixed for the life of the app."""

    _secrets: Mapping[str, bytes]

    @classmethod
    def from_settings(cls, settings: Settings, providers: Iterable[str]) -> "SecretStore":
        secrets = {}
        for provider in providers:
            secret = settings.webhook_secret(provider)
            if secret is not None and secret.get_secret_value():
                secrets[provider] = secret.get_secret_value().encode("utf-8")
        return cls(MappingProxyType(secrets))

    def get(self, provider: str) -> bytes | None:
        return self._secrets.get(provider)

    def is_configured(self, provider: str) -> bool:
        return provider in self._secrets

    def __repr__(self) -> str:
        return f"SecretStore(providers={sorted(self._secrets)})"

from functools import lru_cache

from pydantic import SecretStr
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    forgejo_webhook_secret: SecretStr | None = None
    github_webhook_secret: SecretStr | None = None
    api_prefix: str = "/api"
    log_level: str = "info"

    model_config = {"env_file": ".env", "extra": "ignore"}

    def webhook_secret(self, provider: str) -> SecretStr | None:
        return getattr(self, f"{provider}_webhook_secret", None)


@lru_cache
def get_settings() -> Settings:
    return Settings()

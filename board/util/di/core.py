"""Core DI providers (non-mockable)."""

from dishka import Scope, provide

from board.config import AuthSettings, CacheSettings, RateLimitSettings, Settings
from board.util.di.base import ProviderBase
from board.util.sanitize import HtmlSanitizer


class ProdConfigProvider(ProviderBase):
    """Settings and stateless helpers shared by the whole app.

    Settings are loaded from environment variables and .env file automatically.
    """

    scope = Scope.APP

    @provide
    def provide_settings(self) -> Settings:
        """Provide application settings from environment."""
        return Settings()

    @provide
    def provide_auth_settings(self, settings: Settings) -> AuthSettings:
        return settings.auth

    @provide
    def provide_cache_settings(self, settings: Settings) -> CacheSettings:
        return settings.cache

    @provide
    def provide_rate_limit_settings(self, settings: Settings) -> RateLimitSettings:
        return settings.rate_limit

    @provide
    def provide_sanitizer(self) -> HtmlSanitizer:
        return HtmlSanitizer()

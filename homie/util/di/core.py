"""Core DI providers (non-mockable)."""

from dishka import Provider, Scope, provide

from homie.config import Settings
from homie.domain.service import FeaturedAccountPolicy
from homie.util.di.base import ProviderBase


class ProdConfigProvider(ProviderBase):
    """Settings and the policies derived from them.

    Settings are loaded from environment variables and .env file automatically.
    """

    @provide(scope=Scope.APP)
    def provide_settings(self) -> Settings:
        return Settings()

    @provide(scope=Scope.APP)
    def provide_featured_account_policy(
        self, settings: Settings
    ) -> FeaturedAccountPolicy:
        """Provide the featured account search policy."""
        return FeaturedAccountPolicy(settings.search.featured_usernames)


class FixedSettingsProvider(Provider):
    """Replaces environment-loaded settings with a given instance.

    Added after ``ProdConfigProvider`` so its factory overrides the default.
    """

    def __init__(self, settings: Settings) -> None:
        super().__init__()
        self.settings = settings

    @provide(scope=Scope.APP)
    def provide_settings(self) -> Settings:
        return self.settings

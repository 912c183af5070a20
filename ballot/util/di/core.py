"""Settings providers."""

from dishka import Scope, provide

from ballot.config import AuthSettings, Settings
from ballot.util.di.base import ProviderBase


class ProdConfigProvider(ProviderBase):
    """Reads Settings once per container.

    Sections are provided on their own so consumers can depend on just
    the part they read.
    """

    scope = Scope.APP

    @provide
    def provide_settings(self) -> Settings:
        return Settings()

    @provide
    def provide_auth_settings(self, settings: Settings) -> AuthSettings:
        return settings.auth

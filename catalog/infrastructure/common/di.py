"""FastAPI dependencies for the dispatcher and application settings."""

from typing import Annotated

from fastapi import Depends, Request

from catalog.application.common.dispatcher import Dispatcher
from catalog.config import Settings
from catalog.core import container


def get_dispatcher() -> Dispatcher:
    """
    FastAPI dependency returning the application dispatcher.

    The dispatcher is a container singleton built at startup; tests can
    replace it through app.dependency_overrides.
    """
    return container.dispatcher()


# Type alias for dispatcher dependency
DispatcherDep = Annotated[Dispatcher, Depends(get_dispatcher)]


def get_app_settings(request: Request) -> Settings:
    """FastAPI dependency returning the settings the application was created with."""
    settings: Settings = request.app.state.settings
    return settings


SettingsDep = Annotated[Settings, Depends(get_app_settings)]

"""Lazy, validated settings for Cameraman.

Defaults live in cameraman.conf.global_settings. A host program overrides
them with its own settings module, found through the
CAMERAMAN_SETTINGS_MODULE environment variable (or a `settings` module on the
import path), or directly with settings.configure().

Every value is checked against the type of its default when it is set, so a
typo such as `CMAN_AUTO_EXIT = "yes"` fails at startup instead of silently
changing how a demo is recorded.

Usage:
    # In your project's settings.py
    CMAN_PROFILE = "demos/map01.cman"
    CMAN_AUTO_EXIT = True

    # In your host code
    from cameraman.conf import settings

    print(settings.CMAN_PROFILE)  # "demos/map01.cman"
"""

from __future__ import annotations

import importlib
import logging
import os
from typing import Any

from cameraman.conf import global_settings

logger = logging.getLogger(__name__)

SETTINGS_MODULE_ENV = "CAMERAMAN_SETTINGS_MODULE"
DEFAULT_SETTINGS_MODULE = "settings"

LOG_LEVEL_NAMES = frozenset({"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"})


class ImproperlyConfigured(Exception):
    """Raised when a setting has an invalid value or the settings module is missing."""


def validate_setting(name: str, value: Any) -> Any:  # noqa: ANN401
    """Check a setting against its default and return the value to store.

    Settings without a default are accepted as they are, so host programs can
    keep their own values next to Cameraman's.

    Raises:
        ImproperlyConfigured: If the value does not fit the setting.
    """
    if not hasattr(global_settings, name):
        return value

    expected = type(getattr(global_settings, name))
    # bool is an int subclass; neither may stand in for the other
    if isinstance(value, bool) is not (expected is bool) or not isinstance(value, expected):
        msg = f"{name} must be a {expected.__name__}, got {value!r}"
        raise ImproperlyConfigured(msg)

    if name in ("CMAN_ANGLE_BUFFER_MAX", "TICRATE") and value < 1:
        msg = f"{name} must be at least 1, got {value}"
        raise ImproperlyConfigured(msg)
    if name == "LOG_LEVEL":
        if value.upper() not in LOG_LEVEL_NAMES:
            msg = f"LOG_LEVEL must be one of {', '.join(sorted(LOG_LEVEL_NAMES))}, got {value!r}"
            raise ImproperlyConfigured(msg)
        return value.upper()
    return value


class Settings:
    """Validated setting values, starting from the package defaults."""

    def __init__(self) -> None:
        """Load the defaults from global_settings."""
        for name in dir(global_settings):
            if name.isupper():
                setattr(self, name, getattr(global_settings, name))

    def __setattr__(self, name: str, value: Any) -> None:  # noqa: ANN401
        """Validate and store a setting."""
        super().__setattr__(name, validate_setting(name, value))

    def update_from_module(self, module_name: str) -> None:
        """Apply every upper case name defined in a settings module.

        Raises:
            ImportError: If the module cannot be imported.
            ImproperlyConfigured: If one of its values is invalid.
        """
        module = importlib.import_module(module_name)
        for name in dir(module):
            if name.isupper():
                setattr(self, name, getattr(module, name))
        logger.debug("Loaded Cameraman settings from %s", module_name)


class LazySettings:
    """Settings proxy that loads the user's settings module on first access."""

    def __init__(self) -> None:
        """Create an unloaded proxy."""
        self._wrapped: Settings | None = None

    def _setup(self) -> Settings:
        """Load the defaults and the user's settings module.

        A module named explicitly in CAMERAMAN_SETTINGS_MODULE must exist; the
        conventional `settings` module is optional.

        Raises:
            ImproperlyConfigured: If the explicitly named module cannot be imported.
        """
        wrapped = Settings()
        module_name = os.environ.get(SETTINGS_MODULE_ENV)
        try:
            wrapped.update_from_module(module_name or DEFAULT_SETTINGS_MODULE)
        except ImportError as e:
            if module_name:
                msg = f"Could not import {SETTINGS_MODULE_ENV}={module_name!r}: {e}"
                raise ImproperlyConfigured(msg) from e
        self._wrapped = wrapped
        return wrapped

    def _settings(self) -> Settings:
        return self._wrapped if self._wrapped is not None else self._setup()

    def __getattr__(self, name: str) -> Any:  # noqa: ANN401
        """Get a setting value, loading settings if not yet loaded."""
        return getattr(self._settings(), name)

    def __setattr__(self, name: str, value: Any) -> None:  # noqa: ANN401
        """Set a setting value."""
        if name == "_wrapped":
            self.__dict__["_wrapped"] = value
        else:
            setattr(self._settings(), name, value)

    def configure(self, **options: Any) -> None:  # noqa: ANN401
        """Set settings directly, skipping the settings module (tests and the CLI).

        Example:
            settings.configure(CMAN_PROFILE="flyby.cman", CMAN_AUTO_SKIP=True)

        Raises:
            ImproperlyConfigured: If a value is invalid.
        """
        if self._wrapped is None:
            self._wrapped = Settings()
        for name, value in options.items():
            setattr(self._wrapped, name, value)

    def is_configured(self) -> bool:
        """Check if settings have been loaded."""
        return self._wrapped is not None


settings = LazySettings()

__all__ = ["ImproperlyConfigured", "LazySettings", "Settings", "global_settings", "settings", "validate_setting"]

"""Tests for the pydantic-settings integration."""

import pytest
from pydantic import BaseModel
from pydantic_settings import BaseSettings

from solowire.container import Container
from solowire.integrations.pydantic_settings import SETTINGS_BASES, is_pydantic_settings_subclass
from solowire.type_registry import ReflectiveTypeRegistry


class AppSettings(BaseSettings):
    app_name: str = "solowire"
    debug: bool = False


class Mailer:
    def __init__(self, settings: AppSettings) -> None:
        self.settings = settings


class TestSettingsDetection:
    def test_settings_bases_discovered(self) -> None:
        assert SETTINGS_BASES == (BaseSettings,)

    def test_settings_subclass(self) -> None:
        assert is_pydantic_settings_subclass(AppSettings)

    def test_plain_models_and_values_are_not_settings(self) -> None:
        class Payload(BaseModel):
            value: int = 0

        assert not is_pydantic_settings_subclass(Payload)
        assert not is_pydantic_settings_subclass(Mailer)
        assert not is_pydantic_settings_subclass(AppSettings())
        assert not is_pydantic_settings_subclass(list[int])


class TestSettingsResolution:
    def test_settings_have_no_constructor_parameters(
        self,
        type_registry: ReflectiveTypeRegistry,
    ) -> None:
        assert type_registry.constructor_parameters(type_registry.register(AppSettings)) == ()

    def test_settings_load_from_environment(
        self,
        container: Container,
        monkeypatch: pytest.MonkeyPatch,
    ) -> None:
        monkeypatch.setenv("APP_NAME", "from-env")
        monkeypatch.setenv("DEBUG", "true")

        settings = container.get(AppSettings)

        assert settings.app_name == "from-env"
        assert settings.debug is True

    def test_settings_shared_as_singleton(self, container: Container) -> None:
        mailer = container.get(Mailer)

        assert mailer.settings is container.get(AppSettings)
        assert mailer.settings.app_name == "solowire"

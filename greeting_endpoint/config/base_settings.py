"""
Settings base class for the greeting endpoint.

Values are read from one or more YAML files located in a settings directory. Later files take precedence over earlier
ones, and environment variables (nested with ``__``, e.g. ``MAIN__GREETING_PREFIX``) take precedence over all of them.
"""

import logging
import os
from typing import Any, Type

import yaml
from pydantic.fields import FieldInfo
from pydantic.v1.utils import deep_update
from pydantic_settings import (BaseSettings, InitSettingsSource,
                               PydanticBaseSettingsSource, SettingsConfigDict)

logger = logging.getLogger(__name__)


class BaseServiceSettings(BaseSettings):
    """
    Pydantic settings with an additional YAML source.

    Source precedence, highest first: environment, YAML files, init arguments, secret files.
    """

    model_config = SettingsConfigDict(env_nested_delimiter="__", extra="allow")

    def __init__(
        self, settings_file_names: str | list[str], settings_dirname: str, **values: Any
    ):
        """
        :param settings_file_names: YAML file name, or list of names applied in order
        :param settings_dirname: directory holding the YAML files
        :param values: passed on to pydantic's ``BaseSettings``
        :raises FileNotFoundError: if none of the given YAML files exist
        """
        if isinstance(settings_file_names, str):
            settings_file_names = [settings_file_names]

        # optional overlays (e.g. a local settings file) may be missing
        existing = [
            fname for fname in settings_file_names
            if _exists(settings_dirname, fname)
        ]

        if not existing:
            raise FileNotFoundError(
                f"None of the settings files {settings_file_names} exist in {settings_dirname}."
            )

        super().__init__(
            _settings_filenames=existing,
            _settings_dirname=settings_dirname,
            **values
        )

    # pylint: disable=too-many-arguments
    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: Type[BaseSettings],
        init_settings: InitSettingsSource,  # type: ignore # the init_settings is always a InitSettingsSource
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        yaml_settings = _YamlConfigSource(
            settings_cls=settings_cls,
            filenames=init_settings.init_kwargs.pop("_settings_filenames"),
            dirname=init_settings.init_kwargs.pop("_settings_dirname"),
        )

        return env_settings, yaml_settings, init_settings, file_secret_settings


def _exists(dirname: str, fname: str) -> bool:
    if os.path.exists(os.path.join(dirname, fname)):
        return True
    logger.warning('Given YAML settings file "%s" does not exist.', fname)
    return False


class _YamlConfigSource(PydanticBaseSettingsSource):
    _content: dict[str, Any]

    def __init__(
        self, filenames: list[str], dirname: str, settings_cls: type[BaseSettings]
    ):
        self._content = {}

        for filename in filenames:
            with open(os.path.join(dirname, filename), encoding="utf-8") as file:
                self._content = deep_update(self._content, yaml.safe_load(file) or {})

        super().__init__(settings_cls)

    def get_field_value(
        self, field: FieldInfo, field_name: str
    ) -> tuple[Any, str, bool]:
        # unused: __call__ hands over the whole merged document
        raise NotImplementedError()

    def __call__(self) -> dict[str, Any]:
        return self._content

"""High-level access to persisted CLI preferences."""

from __future__ import annotations

from ..chain.models import DEFAULT_LINE_FORMAT
from .environment import EnvironmentManager
from .models import CLIConfig
from .repository import ConfigRepository, TomlConfigRepository
from .services import logging as logging_service
from .services import outputs as outputs_service


class ConfigManager:
    """Loads configuration once and writes every change straight back to the repository."""

    def __init__(
        self,
        repository: ConfigRepository | None = None,
        environment: EnvironmentManager | None = None,
    ) -> None:
        self._repository = repository or TomlConfigRepository()
        self._environment = environment or EnvironmentManager()
        self._config: CLIConfig | None = None

    @property
    def repository(self) -> ConfigRepository:
        return self._repository

    def load(self) -> CLIConfig:
        if self._config is None:
            self._config = self._repository.load()
        return self._config

    def save(self) -> None:
        self._repository.save(self.load())

    def get_logging_verbosity(self) -> str | None:
        return logging_service.get_logging_verbosity(self.load())

    def set_logging_verbosity(self, verbosity: str | None) -> None:
        logging_service.set_logging_verbosity(self.load(), verbosity)
        self.save()

    def resolve_log_level(self, default: int | None = None) -> int:
        return self._environment.resolve_log_level(self.load(), default)

    def get_base_url(self) -> str | None:
        return self._environment.resolve_base_url(self.load())

    def set_base_url(self, base_url: str | None) -> None:
        outputs_service.set_base_url(self.load(), base_url)
        self.save()

    def get_line_format(self) -> str:
        return outputs_service.get_line_format(self.load(), DEFAULT_LINE_FORMAT)

    def set_line_format(self, line_format: str | None) -> None:
        outputs_service.set_line_format(self.load(), line_format)
        self.save()

from dataclasses import replace
from typing import List, Optional, Set

from mkxorg.logging import Logger
from .config import GeneratorConfig
from .console import Reporter
from .options import Settings

logger = Logger(__name__)


class DriverInventory:
    def __init__(self, config: GeneratorConfig, reporter: Optional[Reporter] = None):
        self.config = config
        self.reporter = reporter or Reporter(color=config.color)
        self._drivers: Optional[Set[str]] = None

    def list_drivers(self) -> List[str]:
        directory = self.config.driver_dir
        suffix = self.config.driver_suffix
        if not directory.is_dir():
            logger.debug(f"Driver directory not found: {directory}")
            return []

        names = [
            p.name[:-len(suffix)]
            for p in directory.iterdir()
            if p.name.endswith(suffix) and len(p.name) > len(suffix)
        ]
        return sorted(names)

    @property
    def drivers(self) -> Set[str]:
        if self._drivers is None:
            self._drivers = set(self.list_drivers())
            logger.debug(f"Installed drivers: {', '.join(sorted(self._drivers)) or '(none)'}")
        return self._drivers

    def is_installed(self, name: str) -> bool:
        return name in self.drivers

    def validate(self, settings: Settings) -> Settings:
        if not settings.driver or settings.force:
            return settings

        default = self.config.default_driver
        if self.is_installed(settings.driver):
            return settings

        if settings.driver == default:
            self.reporter.warning(f'default driver "{default}" is not installed either, keeping it')
            return settings

        self.reporter.warning(f'driver "{settings.driver}" is not installed, using "{default}"')
        available = sorted(self.drivers)
        if available:
            self.reporter.detail(f"available drivers: {' '.join(available)}")
        return replace(settings, driver=default, fallback_from=settings.driver)

"""Xorg config generation - main module."""

import sys
from dataclasses import replace
from datetime import datetime
from pathlib import Path
from typing import Optional

from mkxorg.logging import Logger
from .config import GeneratorConfig
from .console import Reporter
from .detector import FramebufferProbe
from .file_writer import ConfigFileWriter
from .inventory import DriverInventory
from .options import OptionParser, Settings, SENTINELS
from .renderer import XorgRenderer

logger = Logger(__name__)


class XorgConfigManager:
    def __init__(self, config: Optional[GeneratorConfig] = None, reporter: Optional[Reporter] = None):
        self.config = config or GeneratorConfig()
        self.reporter = reporter or Reporter(color=self.config.color)
        self.parser = OptionParser(self.config, self.reporter)
        self.inventory = DriverInventory(self.config, self.reporter)
        self.probe = FramebufferProbe(self.config)
        self.renderer = XorgRenderer()
        self.writer = ConfigFileWriter()

    def build_settings(self, options: str, force: bool = False, output_path: Optional[Path] = None) -> Settings:
        settings = self.parser.parse(options)
        settings.force = force
        settings.output_path = output_path
        settings = self.resolve_resolution(settings)
        settings = self.resolve_driver(settings)
        return settings

    def resolve_resolution(self, settings: Settings) -> Settings:
        if settings.resolution not in SENTINELS:
            return settings

        resolution = self.probe.good_resolution(settings.resolution)
        if resolution in SENTINELS:
            resolution = self.config.fallback_resolution
            logger.debug(f"Falling back to resolution {resolution}")
        return replace(settings, resolution=resolution)

    def resolve_driver(self, settings: Settings) -> Settings:
        if not settings.driver:
            settings = replace(settings, driver=self.config.default_driver)
        return self.inventory.validate(settings)

    def generate(self, options: str, command_line: str, force: bool = False,
                 output_path: Optional[Path] = None, timestamp: Optional[datetime] = None) -> str:
        settings = self.build_settings(options, force=force, output_path=output_path)
        return self.renderer.render(settings, command_line, timestamp or datetime.now())

    def write_output(self, content: str, output_path: Optional[Path]) -> bool:
        if output_path is None:
            sys.stdout.write(content)
            sys.stdout.flush()
            return True

        try:
            self.writer.write(output_path, content)
            return True
        except OSError as e:
            logger.debug(f"Failed to write {output_path}: {e}")
            self.reporter.error(f"cannot write {output_path}: {e.strerror or e}")
            return False

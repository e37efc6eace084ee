"""Comma-delimited option string -> Settings."""

import re
from dataclasses import dataclass
from pathlib import Path
from typing import Callable, List, Optional, Tuple

from mkxorg.logging import Logger
from .config import GeneratorConfig
from .console import Reporter

logger = Logger(__name__)

RESOLUTION_RE = re.compile(r"^\d+x\d+$")

# Resolution placeholders replaced by FramebufferProbe / the fallback resolution
DEFAULT_SENTINEL = "default"
SAFE_SENTINEL = "safe"
SENTINELS = (DEFAULT_SENTINEL, SAFE_SENTINEL)

VBOX_DRIVER = "vesa"
VBOX_HSYNC = "28-70"
VBOX_RESOLUTION = "1280x1024"
INTEL_DRIVER = "intel"


@dataclass
class Settings:
    driver: Optional[str] = None
    resolution: Optional[str] = None
    depth: Optional[int] = None
    horizontal_sync: Optional[str] = None
    vertical_sync: Optional[str] = None
    composite: bool = False
    accel_method: Optional[str] = None
    force: bool = False
    output_path: Optional[Path] = None
    # Driver originally requested when it had to be replaced by the default
    fallback_from: Optional[str] = None


def is_resolution(value: str) -> bool:
    return bool(RESOLUTION_RE.match(value))


def split_tokens(options: str) -> List[str]:
    return [t.strip() for t in (options or "").split(",") if t.strip()]


Rule = Tuple[Callable[[str], bool], Callable[[Settings, str], None]]


class OptionParser:
    def __init__(self, config: GeneratorConfig, reporter: Optional[Reporter] = None):
        self.config = config
        self.reporter = reporter or Reporter(color=config.color)
        self.rules: List[Rule] = [
            (lambda t: t.startswith("res="), self._set_res),
            (lambda t: t in ("composite", "c"), self._set_composite),
            (lambda t: t.startswith(("depth=", "d=")), self._set_depth),
            (lambda t: t in ("safe", "default"), lambda s, t: None),
            (lambda t: t == "vbox", self._set_vbox),
            (lambda t: t.startswith("h="), self._set_hsync),
            (lambda t: t.startswith("v="), self._set_vsync),
            (lambda t: t == "auto", self._set_auto),
            (lambda t: t in ("uxa", "sna"), self._set_accel),
            (is_resolution, self._set_resolution),
        ]

    def parse(self, options: str) -> Settings:
        tokens = split_tokens(options)
        settings = Settings()

        if "default" in tokens:
            settings.driver = self.config.default_driver
        # Same effect as "default"; both are accepted
        if "safe" in tokens:
            settings.driver = self.config.default_driver

        for token in tokens:
            self._apply(settings, token)

        logger.debug(f"Parsed {tokens} -> {settings}")
        return settings

    def _apply(self, settings: Settings, token: str) -> None:
        for matches, effect in self.rules:
            if matches(token):
                effect(settings, token)
                return
        settings.driver = token

    @staticmethod
    def _value(token: str) -> str:
        return token.split("=", 1)[1]

    def _set_res(self, settings: Settings, token: str) -> None:
        value = self._value(token)
        if is_resolution(value):
            settings.resolution = value
        elif value in ("auto", DEFAULT_SENTINEL):
            settings.resolution = DEFAULT_SENTINEL
        elif value == SAFE_SENTINEL:
            settings.resolution = SAFE_SENTINEL
        else:
            self.reporter.warning(f'ignoring bad resolution "{value}" (expected WIDTHxHEIGHT)')

    def _set_composite(self, settings: Settings, token: str) -> None:
        settings.composite = True

    def _set_depth(self, settings: Settings, token: str) -> None:
        value = self._value(token)
        if value.isdecimal():
            settings.depth = int(value)
        else:
            self.reporter.warning(f'ignoring bad depth "{value}" (expected a number)')

    def _set_vbox(self, settings: Settings, token: str) -> None:
        settings.driver = VBOX_DRIVER
        settings.horizontal_sync = VBOX_HSYNC
        settings.resolution = VBOX_RESOLUTION

    def _set_hsync(self, settings: Settings, token: str) -> None:
        settings.horizontal_sync = self._value(token)

    def _set_vsync(self, settings: Settings, token: str) -> None:
        settings.vertical_sync = self._value(token)

    def _set_auto(self, settings: Settings, token: str) -> None:
        settings.resolution = DEFAULT_SENTINEL

    def _set_accel(self, settings: Settings, token: str) -> None:
        settings.accel_method = token
        settings.driver = INTEL_DRIVER

    def _set_resolution(self, settings: Settings, token: str) -> None:
        settings.resolution = token

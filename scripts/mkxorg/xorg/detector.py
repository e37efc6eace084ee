"""Decide whether the framebuffer's current mode makes a good default resolution."""

import re
from pathlib import Path
from typing import Optional

from mkxorg.logging import Logger
from .config import GeneratorConfig, XorgConfig

logger = Logger(__name__)

SIZE_RE = re.compile(r"^(\d+),(\d+)$")


class FramebufferProbe:
    def __init__(self, config: GeneratorConfig):
        self.config = config

    def _read(self, path: Path) -> Optional[str]:
        try:
            return path.read_text(encoding="utf-8", errors="ignore").strip()
        except OSError as e:
            logger.debug(f"Cannot read {path}: {e}")
            return None

    def adapter_name(self) -> Optional[str]:
        return self._read(self.config.fb_name_file)

    def reported_size(self) -> Optional[str]:
        return self._read(self.config.fb_size_file)

    def good_resolution(self, sentinel: str) -> str:
        # Virtual or accelerated framebuffers report sizes that aren't the display's
        name = self.adapter_name()
        if name != XorgConfig.GENERIC_ADAPTER:
            logger.debug(f"Framebuffer adapter {name!r} not trusted")
            return sentinel

        size = self.reported_size()
        match = SIZE_RE.match(size or "")
        if not match:
            logger.debug(f"Unparseable framebuffer size: {size!r}")
            return sentinel

        width, height = int(match.group(1)), int(match.group(2))
        resolution = f"{width}x{height}"
        if resolution in XorgConfig.BAD_DEFAULT_RESOLUTIONS:
            logger.debug(f"Framebuffer reports firmware default {resolution}")
            return sentinel

        if width < XorgConfig.MIN_TRUSTED_WIDTH:
            logger.debug(f"Framebuffer width {width} too small")
            return sentinel

        logger.info(f"Using framebuffer resolution {resolution}")
        return resolution

from dataclasses import dataclass
from pathlib import Path


class XorgConfig:
    # Installed X.org video drivers
    DRIVER_DIR = Path("/usr/lib/xorg/modules/drivers")
    DRIVER_SUFFIX = "_drv.so"
    DEFAULT_DRIVER = "vesa"

    # Framebuffer pseudo-files
    FB_NAME_FILE = Path("/sys/class/graphics/fb0/name")
    FB_SIZE_FILE = Path("/sys/class/graphics/fb0/virtual_size")
    GENERIC_ADAPTER = "VESA VGA"

    # Resolution used when the framebuffer size can't be trusted
    FALLBACK_RESOLUTION = "1024x768"
    BAD_DEFAULT_RESOLUTIONS = ("1024x768", "1280x1024")
    MIN_TRUSTED_WIDTH = 1024

    # Section identifiers
    MONITOR_ID = "Monitor0"
    DEVICE_ID = "Card0"
    SCREEN_ID = "Screen0"


@dataclass
class GeneratorConfig:
    """Values used by a single run; defaults come from XorgConfig."""

    driver_dir: Path = XorgConfig.DRIVER_DIR
    driver_suffix: str = XorgConfig.DRIVER_SUFFIX
    default_driver: str = XorgConfig.DEFAULT_DRIVER
    fb_name_file: Path = XorgConfig.FB_NAME_FILE
    fb_size_file: Path = XorgConfig.FB_SIZE_FILE
    fallback_resolution: str = XorgConfig.FALLBACK_RESOLUTION
    color: bool = True

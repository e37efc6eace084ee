from typing import Dict, List

# Preferred resolution -> smaller modes to offer after it, best first
MODE_TABLE: Dict[str, List[str]] = {
    "2560x1600": ["2560x1440", "1920x1200", "1920x1080", "1680x1050", "1280x1024", "1024x768"],
    "2560x1440": ["1920x1080", "1680x1050", "1600x900", "1280x1024", "1024x768"],
    "1920x1200": ["1920x1080", "1680x1050", "1280x1024", "1024x768"],
    "1920x1080": ["1680x1050", "1600x900", "1280x1024", "1024x768"],
    "1680x1050": ["1440x900", "1280x1024", "1024x768"],
    "1600x1200": ["1280x1024", "1024x768", "800x600"],
    "1600x900": ["1366x768", "1280x1024", "1024x768"],
    "1440x900": ["1280x800", "1024x768", "800x600"],
    "1366x768": ["1280x768", "1024x768", "800x600"],
    "1280x1024": ["1024x768", "800x600", "640x480"],
    "1280x800": ["1024x768", "800x600", "640x480"],
    "1024x768": ["800x600", "640x480"],
}

DEFAULT_FALLBACKS: List[str] = ["1024x768", "800x600", "640x480"]


class ModeUtils:
    @staticmethod
    def fallbacks(resolution: str) -> List[str]:
        modes = MODE_TABLE.get(resolution, DEFAULT_FALLBACKS)
        return [m for m in modes if m != resolution]

    @staticmethod
    def modes(resolution: str) -> List[str]:
        return [resolution] + ModeUtils.fallbacks(resolution)

    @staticmethod
    def modes_line(resolution: str) -> str:
        return " ".join(f'"{m}"' for m in ModeUtils.modes(resolution))

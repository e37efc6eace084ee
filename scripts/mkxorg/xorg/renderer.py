"""Build xorg.conf text from resolved Settings."""

from datetime import datetime
from typing import List

from .config import XorgConfig
from .modeutils import ModeUtils
from .options import Settings

INDENT = "    "


class XorgRenderer:
    def __init__(self, program: str = "mkxorgconf"):
        self.program = program

    def render(self, settings: Settings, command_line: str, timestamp: datetime) -> str:
        blocks = [
            self.header(command_line, timestamp),
            self.monitor_section(settings),
            self.device_section(settings),
        ]
        if settings.composite:
            blocks.append(self.extensions_section())
        blocks.append(self.screen_section(settings))
        return "\n".join("\n".join(block) + "\n" for block in blocks)

    def header(self, command_line: str, timestamp: datetime) -> List[str]:
        return [
            f"# xorg.conf generated by {self.program}",
            f"# Generated on {timestamp.strftime('%Y-%m-%d %H:%M:%S')}",
            f"# Command: {command_line}",
        ]

    def monitor_section(self, settings: Settings) -> List[str]:
        lines = ['Section "Monitor"', f'{INDENT}Identifier  "{XorgConfig.MONITOR_ID}"']
        if settings.horizontal_sync:
            lines.append(f"{INDENT}HorizSync   {settings.horizontal_sync}")
        if settings.vertical_sync:
            lines.append(f"{INDENT}VertRefresh {settings.vertical_sync}")
        lines.append("EndSection")
        return lines

    def device_section(self, settings: Settings) -> List[str]:
        lines = ['Section "Device"', f'{INDENT}Identifier  "{XorgConfig.DEVICE_ID}"']
        if settings.fallback_from:
            lines.extend([
                f"{INDENT}# WARNING: driver \"{settings.fallback_from}\" is not installed.",
                f"{INDENT}# Falling back to the \"{settings.driver}\" driver.",
                f"{INDENT}# Install the driver or use --force to keep it anyway.",
            ])
        if settings.driver:
            lines.append(f'{INDENT}Driver      "{settings.driver}"')
        if settings.accel_method:
            lines.append(f'{INDENT}Option      "AccelMethod" "{settings.accel_method}"')
        lines.append("EndSection")
        return lines

    def extensions_section(self) -> List[str]:
        return [
            'Section "Extensions"',
            f'{INDENT}Option      "Composite" "Enable"',
            "EndSection",
        ]

    def screen_section(self, settings: Settings) -> List[str]:
        lines = [
            'Section "Screen"',
            f'{INDENT}Identifier   "{XorgConfig.SCREEN_ID}"',
            f'{INDENT}Device       "{XorgConfig.DEVICE_ID}"',
            f'{INDENT}Monitor      "{XorgConfig.MONITOR_ID}"',
        ]
        if settings.depth is not None:
            lines.append(f"{INDENT}DefaultDepth {settings.depth}")
        if settings.resolution:
            lines.append(f'{INDENT}SubSection "Display"')
            if settings.depth is not None:
                lines.append(f"{INDENT * 2}Depth    {settings.depth}")
            lines.append(f"{INDENT * 2}Modes    {ModeUtils.modes_line(settings.resolution)}")
            lines.append(f"{INDENT}EndSubSection")
        lines.append("EndSection")
        return lines

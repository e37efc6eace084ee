import io
from pathlib import Path

import pytest

from mkxorg.xorg.config import GeneratorConfig
from mkxorg.xorg.console import Reporter


@pytest.fixture()
def driver_dir(tmp_path: Path) -> Path:
    path = tmp_path / "drivers"
    path.mkdir()
    for name in ("vesa", "fbdev", "intel", "modesetting"):
        (path / f"{name}_drv.so").write_bytes(b"")
    return path


@pytest.fixture()
def fb_dir(tmp_path: Path) -> Path:
    path = tmp_path / "fb0"
    path.mkdir()
    return path


@pytest.fixture()
def config(driver_dir: Path, fb_dir: Path) -> GeneratorConfig:
    return GeneratorConfig(
        driver_dir=driver_dir,
        fb_name_file=fb_dir / "name",
        fb_size_file=fb_dir / "virtual_size",
        color=False,
    )


@pytest.fixture()
def report_stream() -> io.StringIO:
    return io.StringIO()


@pytest.fixture()
def reporter(report_stream: io.StringIO) -> Reporter:
    return Reporter(color=False, file=report_stream)


@pytest.fixture()
def framebuffer(fb_dir: Path):
    def _set(name: str, size: str) -> None:
        (fb_dir / "name").write_text(name + "\n")
        (fb_dir / "virtual_size").write_text(size + "\n")
    return _set

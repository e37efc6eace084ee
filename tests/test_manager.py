from datetime import datetime

from mkxorg.xorg.manager import XorgConfigManager


def make_manager(config, reporter):
    return XorgConfigManager(config, reporter)


def test_unset_driver_becomes_default(config, reporter):
    settings = make_manager(config, reporter).build_settings("1600x900")
    assert settings.driver == "vesa"
    assert settings.fallback_from is None


def test_auto_uses_trusted_framebuffer(config, reporter, framebuffer):
    framebuffer("VESA VGA", "1920,1080")
    assert make_manager(config, reporter).build_settings("auto").resolution == "1920x1080"


def test_auto_falls_back_to_constant(config, reporter, framebuffer):
    framebuffer("VESA VGA", "1024,768")
    assert make_manager(config, reporter).build_settings("auto").resolution == "1024x768"


def test_force_and_output_recorded(config, reporter, tmp_path):
    out = tmp_path / "xorg.conf"
    settings = make_manager(config, reporter).build_settings("nvidia", force=True, output_path=out)
    assert settings.force is True
    assert settings.output_path == out
    assert settings.driver == "nvidia"


def test_generate_with_missing_driver(config, reporter, report_stream):
    text = make_manager(config, reporter).generate("nvidia,1600x900", "mkxorgconf nvidia,1600x900",
                                                   timestamp=datetime(2024, 1, 1))
    assert 'Driver      "vesa"' in text
    assert '# WARNING: driver "nvidia" is not installed.' in text
    assert "warning:" in report_stream.getvalue()


def test_write_output_reports_failure(config, reporter, report_stream, tmp_path):
    blocker = tmp_path / "file"
    blocker.write_text("")
    ok = make_manager(config, reporter).write_output("x\n", blocker / "xorg.conf")
    assert ok is False
    assert "error: cannot write" in report_stream.getvalue()

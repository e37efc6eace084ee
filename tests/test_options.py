import pytest

from mkxorg.xorg.options import OptionParser, Settings, split_tokens


@pytest.fixture()
def parser(config, reporter):
    return OptionParser(config, reporter)


def test_empty_string_gives_blank_settings(parser):
    assert parser.parse("") == Settings()


def test_split_skips_empty_tokens_and_whitespace():
    assert split_tokens(" fbdev, ,1600x900,") == ["fbdev", "1600x900"]


def test_driver_resolution_and_composite(parser):
    settings = parser.parse("fbdev,1600x900,composite")
    assert settings.driver == "fbdev"
    assert settings.resolution == "1600x900"
    assert settings.composite is True


def test_composite_abbreviation(parser):
    assert parser.parse("c").composite is True


@pytest.mark.parametrize("token", ["depth=16", "d=16"])
def test_depth_forms(parser, token):
    assert parser.parse(token).depth == 16


@pytest.mark.parametrize("value", ["lots", "\u00b2", "-1"])
def test_bad_depth_is_ignored_with_warning(parser, report_stream, value):
    assert parser.parse(f"fbdev,depth={value}").depth is None
    assert f'bad depth "{value}"' in report_stream.getvalue()


def test_res_prefix(parser):
    assert parser.parse("res=1920x1080").resolution == "1920x1080"


def test_res_auto_is_default_sentinel(parser):
    assert parser.parse("res=auto").resolution == "default"
    assert parser.parse("res=safe").resolution == "safe"


def test_bad_res_is_ignored_with_warning(parser, report_stream):
    assert parser.parse("res=huge").resolution is None
    assert 'bad resolution "huge"' in report_stream.getvalue()


def test_auto_sets_sentinel(parser):
    assert parser.parse("auto").resolution == "default"


def test_sync_ranges_are_verbatim(parser):
    settings = parser.parse("h=30-80,v=50-75")
    assert settings.horizontal_sync == "30-80"
    assert settings.vertical_sync == "50-75"


def test_vbox_bundle(parser):
    settings = parser.parse("vbox")
    assert settings.driver == "vesa"
    assert settings.horizontal_sync == "28-70"
    assert settings.resolution == "1280x1024"


@pytest.mark.parametrize("method", ["uxa", "sna"])
def test_accel_method_forces_intel(parser, method):
    settings = parser.parse(f"nouveau,{method}")
    assert settings.accel_method == method
    assert settings.driver == "intel"


def test_later_tokens_override_earlier(parser):
    settings = parser.parse("1024x768,fbdev,1600x900,nouveau")
    assert settings.resolution == "1600x900"
    assert settings.driver == "nouveau"


def test_vbox_then_resolution(parser):
    assert parser.parse("vbox,1920x1080").resolution == "1920x1080"


@pytest.mark.parametrize("options", ["safe", "default", "1600x900,safe", "default,composite"])
def test_safe_and_default_pick_default_driver(parser, options):
    assert parser.parse(options).driver == "vesa"


@pytest.mark.parametrize("options", ["fbdev,safe", "safe,fbdev", "default,fbdev", "fbdev,default"])
def test_explicit_driver_beats_safe_and_default(parser, options):
    assert parser.parse(options).driver == "fbdev"


def test_unknown_token_is_driver(parser):
    assert parser.parse("whatever").driver == "whatever"

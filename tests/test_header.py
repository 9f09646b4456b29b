from datetime import datetime

import pytest

from asc_reader.domain.info import DataUnit, PupilUnit
from asc_reader.errors import AscStructureError
from asc_reader.parsing import HeaderResolver, classify_line, model_from_version, parse_date

from conftest import BINOCULAR_CONFIG, PREAMBLE


def _resolver(lines):
    resolver = HeaderResolver()
    for line in lines:
        resolver.feed(classify_line(line, in_preamble=True))
    return resolver


def test_full_preamble_resolves_info():
    info = _resolver(PREAMBLE + BINOCULAR_CONFIG).finalize()

    assert info.date == datetime(2017, 3, 8, 9, 25, 20)
    assert info.model == "EyeLink 1000 Plus"
    assert info.version == "5.12"
    assert info.sample_rate == 500.0
    assert info.cr is True
    assert info.left and info.right
    assert info.mono is False
    assert (info.screen_x, info.screen_y) == (1280, 1024)
    assert info.mount == "Desktop / Binocular / Head Stabilized"
    assert info.filter_level == 2
    assert info.sample_dtype == DataUnit.GAZE
    assert info.event_dtype == DataUnit.GAZE
    assert info.pupil_dtype == PupilUnit.AREA
    assert info.resolution is True
    assert not (info.velocity or info.htarget or info.input or info.buttons)


def test_sample_flags_from_samples_line():
    info = _resolver(
        ["SAMPLES\tHREF\tRIGHT\tVEL\tRES\tHTARGET\tRATE\t2000.00\tTRACKING\tP\tFILTER\t0\tINPUT\tBUTTONS"]
    ).finalize()

    assert info.sample_dtype == DataUnit.HREF
    assert info.right and not info.left
    assert info.mono is True
    assert info.sample_rate == 2000.0
    assert info.cr is False
    assert info.filter_level == 0
    assert info.velocity and info.resolution and info.htarget and info.input and info.buttons


def test_missing_optional_fields_stay_none():
    info = _resolver(["SAMPLES\tGAZE\tLEFT\tRATE\t 250.00"]).finalize()

    assert info.screen_x is None
    assert info.screen_y is None
    assert info.date is None
    assert info.mount is None
    assert info.pupil_dtype is None
    assert info.event_dtype is None
    assert info.filter_level is None
    assert info.model == "Unknown"


def test_events_line_is_fallback_for_rate_and_eyes():
    info = _resolver(["EVENTS\tGAZE\tLEFT\tRIGHT\tRATE\t 500.00\tTRACKING\tCR\tFILTER\t2"]).finalize()

    assert info.sample_rate == 500.0
    assert info.mono is False
    assert info.sample_dtype is None


def test_start_line_declares_eyes():
    resolver = _resolver(["EVENTS\tGAZE\tRATE\t 500.00"])
    resolver.feed(classify_line("START\t1000 \tRIGHT\tSAMPLES\tEVENTS"))
    info = resolver.finalize()
    assert info.right and not info.left


def test_missing_rate_and_eye_is_structural_error():
    resolver = _resolver(PREAMBLE + ["PUPIL\tAREA"])
    with pytest.raises(AscStructureError) as excinfo:
        resolver.finalize(42, "START\t1000 \tSAMPLES\tEVENTS")
    assert excinfo.value.line_no == 42
    assert "line 42" in str(excinfo.value)


def test_missing_rate_alone_stays_none():
    info = _resolver(PREAMBLE + ["SAMPLES\tGAZE\tLEFT\tTRACKING\tCR\tFILTER\t2"]).finalize()

    assert info.sample_rate is None
    assert info.left and info.mono


def test_missing_eye_is_structural_error():
    with pytest.raises(AscStructureError):
        _resolver(["SAMPLES\tGAZE\tRATE\t 500.00"]).finalize()


def test_gaze_coords_used_when_no_display_coords():
    info = _resolver(["MSG\t10 GAZE_COORDS 0.00 0.00 1919.00 1079.00", "SAMPLES\tGAZE\tLEFT\tRATE\t 500.00"]).finalize()
    assert (info.screen_x, info.screen_y) == (1920, 1080)


def test_unknown_mount_code_is_none():
    info = _resolver(["MSG\t10 ELCLCFG XYZ", "SAMPLES\tGAZE\tLEFT\tRATE\t 500.00"]).finalize()
    assert info.mount is None


def test_conflicting_config_is_reported():
    info = _resolver(BINOCULAR_CONFIG).finalize()

    scratch = _resolver(["SAMPLES\tGAZE\tLEFT\tRIGHT\tRES\tRATE\t1000.00\tTRACKING\tCR\tFILTER\t2"])
    assert scratch.conflicts_with(info) == ["sample_rate"]

    same = _resolver([BINOCULAR_CONFIG[1]])
    assert same.conflicts_with(info) == []


@pytest.mark.parametrize(
    "version, cl_line, expected",
    [
        (None, None, ("Unknown", None)),
        ("EYELINK I VERSION 2.11", None, ("EyeLink I", "2.11")),
        ("EYELINK II 1", "EYELINK II CL v1.09 Mar 20 2003", ("EyeLink II", "1.09")),
        ("EYELINK II 1", "EYELINK II CL v4.56 Aug 18 2010", ("EyeLink 1000", "4.56")),
        ("EYELINK II 1", "EYELINK II CL v5.12 Jan 19 2017", ("EyeLink 1000 Plus", "5.12")),
        ("EYELINK II 1", "EYELINK II CL v6.12 Feb  1 2018", ("EyeLink Portable Duo", "6.12")),
    ],
)
def test_model_from_version(version, cl_line, expected):
    assert model_from_version(version, cl_line) == expected


def test_parse_date_tolerates_padding_and_garbage():
    assert parse_date("  Wed Mar  8 09:25:20 2017") == datetime(2017, 3, 8, 9, 25, 20)
    assert parse_date("yesterday") is None

from typing import List

import pytest

from asc_reader.domain.info import DataUnit, InfoRecord, PupilUnit


PREAMBLE: List[str] = [
    "** CONVERTED FROM D:\\data\\s01.edf using edfapi 4.2.1 Jan 19 2017 on Wed Mar  8 10:01:12 2017",
    "** DATE: Wed Mar  8 09:25:20 2017",
    "** TYPE: EDF_FILE BINARY EVENT SAMPLE TAGGED",
    "** VERSION: EYELINK II 1",
    "** SOURCE: EYELINK CL",
    "** EYELINK II CL v5.12 Jan 19 2017 (EyeLink Portable Duo)",
    "** CAMERA: EyeLink USBCAM Version 1.01",
    "** SERIAL NUMBER: CLU-DAB50",
    "** CAMERA_CONFIG: DAB50200.SCD",
    "**",
    "",
    "MSG\t2000 DISPLAY_COORDS 0 0 1279 1023",
    "MSG\t2001 ELCLCFG BTABLER",
]

BINOCULAR_CONFIG: List[str] = [
    "PUPIL\tAREA",
    "EVENTS\tGAZE\tLEFT\tRIGHT\tRATE\t 500.00\tTRACKING\tCR\tFILTER\t2",
    "SAMPLES\tGAZE\tLEFT\tRIGHT\tRES\tRATE\t 500.00\tTRACKING\tCR\tFILTER\t2",
]

MONOCULAR_CONFIG: List[str] = [
    "PUPIL\tAREA",
    "EVENTS\tGAZE\tLEFT\tRATE\t1000.00\tTRACKING\tCR\tFILTER\t1",
    "SAMPLES\tGAZE\tLEFT\tRATE\t1000.00\tTRACKING\tCR\tFILTER\t1",
]

BINOCULAR_SAMPLES: List[str] = [
    "1000\t  512.3\t  384.1\t 1200.0\t  515.0\t  386.2\t 1180.0\t   26.80\t   26.90\t.....",
    "1001\t  512.9\t  384.0\t 1201.0\t  515.4\t  386.0\t 1181.0\t   26.80\t   26.90\t.....",
    "1002\t  513.1\t  383.8\t 1203.0\t  515.8\t  385.7\t 1183.0\t   26.80\t   26.90\t.....",
]


def make_info(**overrides) -> InfoRecord:
    values = dict(
        date=None,
        model="EyeLink 1000 Plus",
        version="5.12",
        sample_rate=500.0,
        cr=False,
        left=True,
        right=False,
        mono=True,
        screen_x=1280,
        screen_y=1024,
        mount=None,
        filter_level=2,
        sample_dtype=DataUnit.GAZE,
        event_dtype=DataUnit.GAZE,
        pupil_dtype=PupilUnit.AREA,
    )
    values.update(overrides)
    if "mono" not in overrides:
        values["mono"] = not (values["left"] and values["right"])
    return InfoRecord(**values)


@pytest.fixture
def binocular_lines() -> List[str]:
    """Binocular 500 Hz GAZE recording with resolution, one block of three samples."""
    return PREAMBLE + BINOCULAR_CONFIG + ["START\t1000 \tLEFT\tRIGHT\tSAMPLES\tEVENTS"] + BINOCULAR_SAMPLES + ["END\t1003 \tSAMPLES\tEVENTS\tRES\t  26.80\t  26.90"]


@pytest.fixture
def monocular_lines() -> List[str]:
    """Monocular recording laid out the way the converter writes it: config after START."""
    return (
        PREAMBLE
        + ["START\t5000 \tLEFT\tSAMPLES\tEVENTS", "PRESCALER\t1", "VPRESCALER\t1"]
        + MONOCULAR_CONFIG
        + [
            "SFIX L   5000",
            "5000\t  640.1\t  480.2\t 1500.0\t...",
            "5001\t    .\t    .\t    0.0\t...",
            "5002\t  641.0\t  481.0\t 1502.0\t...",
            "EFIX L   5000\t5002\t3\t  640.5\t  480.6\t   1501",
            "END\t5003 \tSAMPLES\tEVENTS",
        ]
    )

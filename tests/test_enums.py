# tests/test_enums.py
import enum

from filecharset.enums import DetectionPass, DetectionStatus, DetectorKind


def test_detection_pass_members():
    assert list(DetectionPass) == [
        DetectionPass.METADATA_ONLY,
        DetectionPass.CONTENT_SCAN,
    ]


def test_detector_kind_members_in_pipeline_order():
    assert [k.name for k in DetectorKind] == [
        "MODE_LINE",
        "ASCII",
        "UTF16_BE",
        "UTF16_LE",
        "UTF8",
        "CHINESE",
    ]


def test_detection_status_values():
    assert {s.value for s in DetectionStatus} == {
        "detected",
        "defaulted",
        "undetermined",
        "binary",
    }


def test_enums_are_plain_enums():
    for cls in (DetectionPass, DetectorKind, DetectionStatus):
        assert issubclass(cls, enum.Enum)
        assert not issubclass(cls, enum.Flag)

"""Tests for the translation orchestrator."""

import threading

from exifbridge.catalog import TagGroup
from exifbridge.directories import DirectoryKind, DirectorySet
from exifbridge.exif_tags import TAG_FNUMBER
from exifbridge.rational import Rational
from exifbridge.source_store import MappingSourceStore
from exifbridge.translator import TagTranslator, TranslationConfig, describe_all


def _describe(attributes, **config):
    translator = TagTranslator(config=TranslationConfig(**config))
    return translator.describe_all(MappingSourceStore(attributes))


def test_described_tag_reports_description_not_raw_value():
    assert _describe({"FNumber": "28/10", "Orientation": "6"}) == {
        "Exif": {"FNumber": "f/2.8", "Orientation": "Rotate 90 CW"},
    }


def test_decimal_source_values_are_converted():
    assert _describe({"ExposureTime": "0.004"}) == {"Exif": {"ExposureTime": "1/250 sec"}}


def test_spurious_zeros_are_dropped():
    """Keys the store always reports as "0" vanish when they hold "0"."""

    result = _describe({"Orientation": "0", "ImageWidth": "0", "ImageLength": "0", "LightSource": "0"})

    assert result == {}


def test_zero_outside_the_spurious_set_is_processed():
    assert _describe({"Flash": "0", "ExposureProgram": "0"}) == {
        "Exif": {"Flash": "No Flash", "ExposureProgram": "Not Defined"},
    }


def test_mapped_tag_without_format_falls_back_to_raw(log_messages):
    result = _describe({"LightSource": "1"})

    assert result == {"Exif": {"LightSource": "1"}}
    assert ("DEBUG", "no value format for tag=LightSource, raw value kept") in log_messages
    assert ("WARNING", "failed to get description for tag=LightSource value=1") in log_messages


def test_coercion_failure_is_logged_and_falls_back_to_raw(log_messages):
    result = _describe({"FNumber": "abc", "Make": "Canon"})

    assert result == {"Exif": {"FNumber": "abc", "Make": "Canon"}}
    warnings = [message for level, message in log_messages if level == "WARNING"]
    assert "failed to convert tag=FNumber value=abc to RATIONAL" in warnings
    assert "failed to get description for tag=FNumber value=abc" in warnings


def test_byte_tags_always_fall_back_to_raw():
    assert _describe({"GPSAltitudeRef": "0", "GPSVersionID": "2,2,0,0"}) == {
        "GPS": {"GPSAltitudeRef": "0", "GPSVersionID": "2,2,0,0"},
    }


def test_warn_on_fallback_can_be_disabled(log_messages):
    _describe({"LightSource": "1"}, warn_on_fallback=False)

    assert not [message for level, message in log_messages if level == "WARNING"]


def test_unmapped_entries_report_source_key_and_raw_value():
    result = _describe({"Xmp": "<x:xmpmeta/>", "DNGVersion": "1,4,0,0"})

    assert result == {
        "XMP": {"Xmp": "<x:xmpmeta/>"},
        "Exif Raw": {"DNGVersion": "1,4,0,0"},
    }


def test_uncatalogued_and_null_attributes_are_ignored():
    assert _describe({"NotAnAttribute": "x", "Make": None}) == {}


def test_groups_in_fixed_order():
    result = _describe({
        "DNGVersion": "1,4,0,0",
        "Xmp": "<x/>",
        "GPSLatitudeRef": "N",
        "JPEGInterchangeFormat": "1234",
        "Make": "Canon",
    })

    assert list(result) == ["Exif", "Exif Thumbnail", "GPS", "XMP", "Exif Raw"]
    assert result["Exif Thumbnail"] == {"ThumbnailOffset": "1234"}


def test_gps_group():
    result = _describe({
        "GPSLatitude": "51/1,30/1,2664/100",
        "GPSLatitudeRef": "N",
        "GPSAltitude": "1234/10",
        "GPSTimeStamp": "14/1,30/1,5/1",
        "GPSDateStamp": "2024:05:01",
    })

    assert result == {
        "GPS": {
            "GPSLatitude": "51 deg 30' 26.64\"",
            "GPSLatitudeRef": "North",
            "GPSAltitude": "123.4 m",
            "GPSTimeStamp": "14:30:05 UTC",
            "GPSDateStamp": "2024:05:01",
        },
    }


def test_raw_group_maker_tags_report_raw_values():
    result = _describe({"ISO": "200", "SensorTopBorder": "8", "AspectFrame": "0 0 4031 3023"})

    assert result == {
        "Exif Raw": {"ISO": "200", "SensorTopBorder": "8", "AspectFrame": "0 0 4031 3023"},
    }


def test_thumbnail_dimensions_do_not_overwrite_image_dimensions():
    result = _describe({"ImageWidth": "4000", "ThumbnailImageWidth": "160"})

    assert result == {"Exif": {"ImageWidth": "4000 pixels", "ThumbnailImageWidth": "160 pixels"}}


def test_white_balance_and_light_source_do_not_collide():
    result = _describe({"WhiteBalance": "1", "LightSource": "4"})

    assert result == {"Exif": {"WhiteBalance": "Manual", "LightSource": "4"}}


def test_directories_are_injected_and_populated():
    directories = DirectorySet()
    translator = TagTranslator(directories=directories)

    translator.describe_all(MappingSourceStore({"FNumber": "28/10"}))

    assert directories.get(DirectoryKind.EXIF_IFD0).get_object(TAG_FNUMBER) == Rational(28, 10)


def test_directories_are_reset_between_calls():
    translator = TagTranslator()
    translator.describe_all(MappingSourceStore({"FNumber": "28/10"}))

    result = translator.describe_all(MappingSourceStore({"FNumber": "bad"}))

    assert result == {"Exif": {"FNumber": "bad"}}


def test_stale_values_survive_without_reset():
    translator = TagTranslator(config=TranslationConfig(reset_directories=False))
    translator.describe_all(MappingSourceStore({"FNumber": "28/10"}))

    result = translator.describe_all(MappingSourceStore({"FNumber": "bad"}))

    assert result == {"Exif": {"FNumber": "f/2.8"}}


def test_group_selection_keeps_catalog_order():
    attributes = {"Make": "Canon", "GPSLatitudeRef": "S", "Xmp": "<x/>"}

    result = _describe(attributes, groups=["GPS", TagGroup.BASE])

    assert list(result) == ["Exif", "GPS"]


def test_module_level_describe_all():
    assert describe_all(MappingSourceStore({"Make": "Canon"})) == {"Exif": {"Make": "Canon"}}


def test_concurrent_calls_are_serialized():
    translator = TagTranslator()
    sources = [
        (MappingSourceStore({"FNumber": "28/10"}), {"Exif": {"FNumber": "f/2.8"}}),
        (MappingSourceStore({"FNumber": "bad"}), {"Exif": {"FNumber": "bad"}}),
    ]
    failures = []

    def worker(source, expected):
        for _ in range(50):
            result = translator.describe_all(source)
            if result != expected:
                failures.append(result)

    threads = [threading.Thread(target=worker, args=sources[i % 2]) for i in range(8)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()

    assert failures == []

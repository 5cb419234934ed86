# Copyright 2025 DNAi inc.

# Dual-licensed under the DNAi Free License v1.1 and the
# DNAi Commercial License v1.1.
# See the LICENSE files in the project root for details.

"""
Value formatter for converting typed EXIF values to human-readable strings.

Directories hand their stored values to format_tag_value() together with
the tag name; values are the types produced by value coercion (str, int,
Rational, list of Rational).

Copyright 2025 DNAi inc.
"""

import math
from typing import Any, Dict, List, Optional

from exifbridge.rational import Rational

# Enumerated SHORT/LONG tags: value -> description
_ENUM_DESCRIPTIONS: Dict[str, Dict[int, str]] = {
    'Compression': {
        1: 'Uncompressed',
        2: 'CCITT 1D',
        3: 'Group 3 Fax',
        4: 'Group 4 Fax',
        5: 'LZW',
        6: 'JPEG (old-style)',
        7: 'JPEG',
        8: 'Deflate',
        99: 'JPEG',
        32773: 'PackBits',
        32946: 'Deflate',
        34712: 'JPEG2000',
    },
    'PhotometricInterpretation': {
        0: 'WhiteIsZero',
        1: 'BlackIsZero',
        2: 'RGB',
        3: 'RGB Palette',
        4: 'Transparency Mask',
        5: 'CMYK',
        6: 'YCbCr',
        8: 'CIELab',
        9: 'ICCLab',
        10: 'ITULab',
        32803: 'Color Filter Array',
        34892: 'Linear Raw',
    },
    'Orientation': {
        1: 'Horizontal (normal)',
        2: 'Mirror horizontal',
        3: 'Rotate 180',
        4: 'Mirror vertical',
        5: 'Mirror horizontal and rotate 270 CW',
        6: 'Rotate 90 CW',
        7: 'Mirror horizontal and rotate 90 CW',
        8: 'Rotate 270 CW',
    },
    'ResolutionUnit': {
        1: 'None',
        2: 'inches',
        3: 'cm',
    },
    'FocalPlaneResolutionUnit': {
        1: 'None',
        2: 'inches',
        3: 'cm',
    },
    'YCbCrPositioning': {
        1: 'Centered',
        2: 'Co-sited',
    },
    'PlanarConfiguration': {
        1: 'Chunky',
        2: 'Planar',
    },
    'ExposureProgram': {
        0: 'Not Defined',
        1: 'Manual',
        2: 'Program AE',
        3: 'Aperture-priority AE',
        4: 'Shutter speed priority AE',
        5: 'Creative (Slow speed)',
        6: 'Action (High speed)',
        7: 'Portrait',
        8: 'Landscape',
    },
    'MeteringMode': {
        0: 'Unknown',
        1: 'Average',
        2: 'Center-weighted average',
        3: 'Spot',
        4: 'Multi-spot',
        5: 'Multi-segment',
        6: 'Partial',
        255: 'Other',
    },
    'LightSource': {
        0: 'Unknown',
        1: 'Daylight',
        2: 'Fluorescent',
        3: 'Tungsten (Incandescent)',
        4: 'Flash',
        9: 'Fine Weather',
        10: 'Cloudy',
        11: 'Shade',
        12: 'Daylight Fluorescent',
        13: 'Day White Fluorescent',
        14: 'Cool White Fluorescent',
        15: 'White Fluorescent',
        16: 'Warm White Fluorescent',
        17: 'Standard Light A',
        18: 'Standard Light B',
        19: 'Standard Light C',
        20: 'D55',
        21: 'D65',
        22: 'D75',
        23: 'D50',
        24: 'ISO Studio Tungsten',
        255: 'Other',
    },
    'WhiteBalance': {
        0: 'Auto',
        1: 'Manual',
    },
    'SceneCaptureType': {
        0: 'Standard',
        1: 'Landscape',
        2: 'Portrait',
        3: 'Night',
    },
    'Saturation': {
        0: 'Normal',
        1: 'Low',
        2: 'High',
    },
    'Contrast': {
        0: 'Normal',
        1: 'Soft',
        2: 'High',
    },
    'Sharpness': {
        0: 'Normal',
        1: 'Soft',
        2: 'Hard',
    },
    'CustomRendered': {
        0: 'Normal',
        1: 'Custom',
    },
    'GainControl': {
        0: 'None',
        1: 'Low gain up',
        2: 'High gain up',
        3: 'Low gain down',
        4: 'High gain down',
    },
    'SubjectDistanceRange': {
        0: 'Unknown',
        1: 'Macro',
        2: 'Close',
        3: 'Distant',
    },
    'ColorSpace': {
        1: 'sRGB',
        2: 'Adobe RGB',
        65535: 'Uncalibrated',
    },
    'SensingMethod': {
        1: 'Not defined',
        2: 'One-chip color area',
        3: 'Two-chip color area',
        4: 'Three-chip color area',
        5: 'Color sequential area',
        7: 'Trilinear',
        8: 'Color sequential linear',
    },
    'SensitivityType': {
        0: 'Unknown',
        1: 'Standard Output Sensitivity',
        2: 'Recommended Exposure Index',
        3: 'ISO Speed',
        4: 'Standard Output Sensitivity and Recommended Exposure Index',
        5: 'Standard Output Sensitivity and ISO Speed',
        6: 'Recommended Exposure Index and ISO Speed',
        7: 'Standard Output Sensitivity, Recommended Exposure Index and ISO Speed',
    },
    'SubfileType': {
        0: 'Full-resolution image',
        1: 'Reduced-resolution image',
        2: 'Single page of multi-page image',
        3: 'Single page of multi-page reduced-resolution image',
    },
    'OldSubfileType': {
        1: 'Full-resolution image',
        2: 'Reduced-resolution image',
        3: 'Single page of multi-page image',
    },
    'GPSAltitudeRef': {
        0: 'Above sea level',
        1: 'Below sea level',
        2: 'Above WGS84 ellipsoid',
        3: 'Below WGS84 ellipsoid',
    },
    'GPSDifferential': {
        0: 'No Correction',
        1: 'Differential Corrected',
    },
}

# Single-letter GPS reference fields: value -> description
_GPS_REF_DESCRIPTIONS: Dict[str, Dict[str, str]] = {
    'GPSLatitudeRef': {'N': 'North', 'S': 'South'},
    'GPSDestLatitudeRef': {'N': 'North', 'S': 'South'},
    'GPSLongitudeRef': {'E': 'East', 'W': 'West'},
    'GPSDestLongitudeRef': {'E': 'East', 'W': 'West'},
    'GPSSpeedRef': {'K': 'km/h', 'M': 'mph', 'N': 'knots'},
    'GPSDestDistanceRef': {'K': 'Kilometers', 'M': 'Miles', 'N': 'Nautical Miles'},
    'GPSTrackRef': {'T': 'True North', 'M': 'Magnetic North'},
    'GPSImgDirectionRef': {'T': 'True North', 'M': 'Magnetic North'},
    'GPSDestBearingRef': {'T': 'True North', 'M': 'Magnetic North'},
    'GPSStatus': {'A': 'Measurement Active', 'V': 'Measurement Void'},
    'GPSMeasureMode': {'2': '2-Dimensional Measurement', '3': '3-Dimensional Measurement'},
}

# Rational tags rendered as a plain number followed by a unit
_RATIONAL_UNITS: Dict[str, str] = {
    'FocalLength': ' mm',
    'GPSAltitude': ' m',
    'GPSHPositioningError': ' m',
    'GPSDestDistance': '',
    'GPSSpeed': '',
    'GPSTrack': '',
    'GPSImgDirection': '',
    'GPSDestBearing': '',
    'GPSDOP': '',
    'BrightnessValue': '',
    'FlashEnergy': '',
    'Gamma': '',
    'XResolution': '',
    'YResolution': '',
    'FocalPlaneXResolution': '',
    'FocalPlaneYResolution': '',
    'DigitalZoomRatio': '',
}

_COORDINATE_TAGS = ('GPSLatitude', 'GPSLongitude', 'GPSDestLatitude', 'GPSDestLongitude')


def format_number(value: float) -> str:
    """
    Format a number compactly: integers without a decimal part, other
    values with up to 4 decimal places and no trailing zeros.
    """
    if value == int(value):
        return str(int(value))
    formatted = f"{value:.4f}".rstrip('0').rstrip('.')
    return formatted if formatted not in ('', '-0') else '0'


def _rational_to_float(value: Any) -> Optional[float]:
    if isinstance(value, tuple) and len(value) == 2:
        return Rational(*value).to_float()
    return None


def _format_flash(value: int) -> str:
    # Flash value 0 means no flash present
    if value == 0:
        return 'No Flash'
    # 0x20 alone: the camera has no flash at all
    if value == 32:
        return 'No flash function'

    fired = bool(value & 0x01)
    return_type = (value >> 1) & 0x03
    mode = (value >> 3) & 0x03
    red_eye = bool(value & 0x40)

    parts = []
    if mode == 3:
        parts.append('Auto')
    elif mode == 2 and not fired:
        parts.append('Off')
    if fired:
        parts.append('Fired')
        if return_type == 2:
            parts.append('Return not detected')
        elif return_type == 3:
            parts.append('Return detected')
    else:
        parts.append('Did not fire')
    if red_eye:
        parts.append('Red-eye reduction')
    return ', '.join(parts)


def _format_exposure_time(seconds: float) -> str:
    if 0 < seconds < 1:
        # Find closest 1/X representation
        closest_den = round(1.0 / seconds)
        if abs(seconds - 1.0 / closest_den) < 0.001 * seconds + 1e-9:
            return f"1/{closest_den}"
        return format_number(seconds)
    return format_number(seconds)


# APEX values outside this range overflow or underflow a float
_APEX_LIMIT = 64


def _format_apex_aperture(apex: float) -> Optional[str]:
    # ApertureValue is in APEX: value = log2(f_number^2), so f_number = sqrt(2^value)
    if abs(apex) > _APEX_LIMIT:
        return None
    f_number = math.sqrt(2 ** apex)
    return f"f/{f_number:.1f}"


def _format_apex_shutter(apex: float) -> Optional[str]:
    # ShutterSpeedValue is in APEX: value = log2(1/exposure_time)
    if abs(apex) > _APEX_LIMIT:
        return None
    exposure_time = 1.0 / (2 ** apex)
    if 0 < exposure_time < 1:
        closest_den = round(1.0 / exposure_time)
        if abs(exposure_time - 1.0 / closest_den) < 0.01:
            return f"1/{closest_den} sec"
    return f"{format_number(exposure_time)} sec"


def _format_coordinate(value: List[Any]) -> Optional[str]:
    if len(value) != 3:
        return None
    parts = [_rational_to_float(item) for item in value]
    if any(part is None for part in parts):
        return None
    degrees, minutes, seconds = parts
    # Fold fractional degrees and minutes down, rounding at hundredths of a second
    total_seconds = round(degrees * 3600 + minutes * 60 + seconds, 2)
    deg = int(total_seconds // 3600)
    remainder = total_seconds - deg * 3600
    mins = int(remainder // 60)
    secs = remainder - mins * 60
    return f"{deg} deg {mins}' {secs:.2f}\""


def _format_time_stamp(value: List[Any]) -> Optional[str]:
    if len(value) != 3:
        return None
    parts = [_rational_to_float(item) for item in value]
    if any(part is None for part in parts):
        return None
    hours, minutes, seconds = parts
    seconds = round(seconds, 3)
    if seconds == int(seconds):
        second_text = f"{int(seconds):02d}"
    else:
        second_text = f"{seconds:06.3f}".rstrip('0')
    return f"{int(hours):02d}:{int(minutes):02d}:{second_text} UTC"


def _format_lens_specification(value: List[Any]) -> Optional[str]:
    if len(value) != 4:
        return None
    min_focal, max_focal, min_f_short, min_f_long = [_rational_to_float(item) for item in value]
    if min_focal is None or max_focal is None:
        return None
    if min_focal == max_focal:
        focal = f"{format_number(min_focal)}mm"
    else:
        focal = f"{format_number(min_focal)}-{format_number(max_focal)}mm"
    if min_f_short is None:
        return focal
    if min_f_long is None or min_f_long == min_f_short:
        return f"{focal} f/{format_number(min_f_short)}"
    return f"{focal} f/{format_number(min_f_short)}-{format_number(min_f_long)}"


def _format_components(value: str) -> Optional[str]:
    component_map = {0: '-', 1: 'Y', 2: 'Cb', 3: 'Cr', 4: 'R', 5: 'G', 6: 'B'}
    codes = [ord(ch) for ch in value]
    if value.isdecimal():
        codes = [int(ch) for ch in value]
    if len(codes) != 4 or any(code not in component_map for code in codes):
        return None
    return ', '.join(component_map[code] for code in codes)


def _format_string(tag_key: str, value: str) -> Optional[str]:
    if tag_key in _GPS_REF_DESCRIPTIONS:
        ref = value.strip().upper()
        return _GPS_REF_DESCRIPTIONS[tag_key].get(ref, value)

    if tag_key == 'ComponentsConfiguration':
        return _format_components(value) or value

    if tag_key == 'SceneType':
        scene_type_map = {1: 'Directly photographed'}
        code = int(value) if value.isdecimal() else (ord(value) if len(value) == 1 else None)
        if code is not None:
            return scene_type_map.get(code, f"Unknown ({code})")
        return value

    if tag_key in ('ExifVersion', 'FlashpixVersion'):
        # "0230" -> "2.30"
        version = value.strip('\x00')
        if len(version) == 4 and version.isdecimal():
            return f"{int(version[:2])}.{version[2:]}"
        return version

    if tag_key == 'InteroperabilityIndex':
        if value.startswith('R98'):
            return 'R98 - DCF basic file (sRGB)'
        if value.startswith('THM'):
            return 'THM - DCF thumbnail file'
        if value.startswith('R03'):
            return 'R03 - DCF option file (Adobe RGB)'
        return value

    if tag_key in ('UserComment', 'GPSProcessingMethod', 'GPSAreaInformation'):
        # Strip any 8-byte character code prefix left in the string
        for prefix in ('ASCII\x00\x00\x00', 'UNICODE\x00', 'JIS\x00\x00\x00\x00\x00'):
            if value.startswith(prefix):
                value = value[len(prefix):]
                break
        return value.strip('\x00').strip()

    return value.strip('\x00').rstrip()


def _format_rational(tag_key: str, value: Any) -> Optional[str]:
    num, den = value
    if den == 0:
        return str(value)
    result = num / den

    if tag_key == 'ExposureTime':
        return f"{_format_exposure_time(result)} sec"
    if tag_key == 'FNumber':
        return f"f/{format_number(result)}"
    if tag_key in ('ApertureValue', 'MaxApertureValue'):
        return _format_apex_aperture(result)
    if tag_key == 'ShutterSpeedValue':
        return _format_apex_shutter(result)
    if tag_key == 'ExposureBiasValue':
        if result == 0:
            return '0 EV'
        sign = '+' if result > 0 else ''
        return f"{sign}{format_number(result)} EV"
    if tag_key == 'SubjectDistance':
        if num == 0xFFFFFFFF:
            return 'Infinity'
        if result < 1000:
            return f"{format_number(result)} m"
        return f"{format_number(result / 1000.0)} km"
    if tag_key == 'CompressedBitsPerPixel':
        if result == int(result):
            return f"{int(result)} bits/pixel"
        return f"{result:.3f}".rstrip('0') + ' bits/pixel'
    if tag_key in _RATIONAL_UNITS:
        return f"{format_number(result)}{_RATIONAL_UNITS[tag_key]}"
    return format_number(result)


def _format_rational_list(tag_key: str, value: List[Any]) -> Optional[str]:
    if tag_key in _COORDINATE_TAGS:
        described = _format_coordinate(value)
        if described is not None:
            return described
    elif tag_key == 'GPSTimeStamp':
        described = _format_time_stamp(value)
        if described is not None:
            return described
    elif tag_key == 'LensSpecification':
        described = _format_lens_specification(value)
        if described is not None:
            return described

    if len(value) == 1:
        return _format_rational(tag_key, value[0])

    formatted_values = []
    for item in value:
        result = _rational_to_float(item)
        formatted_values.append(format_number(result) if result is not None else str(item))
    return ' '.join(formatted_values)


def _format_integer(tag_key: str, value: int) -> Optional[str]:
    if tag_key == 'Flash':
        return _format_flash(value)
    if tag_key == 'ExposureMode':
        exposure_mode_map = {
            0: 'Auto',
            1: 'Manual',
            2: 'Auto bracket',
        }
        return exposure_mode_map.get(value, f'Unknown ({value})')
    if tag_key in _ENUM_DESCRIPTIONS:
        return _ENUM_DESCRIPTIONS[tag_key].get(value, f'Unknown ({value})')
    if tag_key in ('FocalLengthIn35mmFilm', 'FocalLength'):
        return f"{value} mm"
    if tag_key in ('ImageWidth', 'ImageLength', 'PixelXDimension', 'PixelYDimension',
                   'ThumbnailImageWidth', 'ThumbnailImageLength'):
        return f"{value} pixels"
    if tag_key in ('ThumbnailLength', 'StripByteCounts'):
        return f"{value} bytes"
    return str(value)


def format_tag_value(tag_name: str, value: Any) -> Optional[str]:
    """
    Format a typed tag value to a human-readable string.

    Args:
        tag_name: Tag name (e.g., "Orientation", "EXIF:Orientation")
        value: Value as stored in a directory (str, int, Rational or a list
               of Rational)

    Returns:
        Formatted string, or None when there is nothing to describe

    Example:
        >>> format_tag_value("Orientation", 6)
        'Rotate 90 CW'
        >>> format_tag_value("FNumber", Rational(28, 10))
        'f/2.8'
    """
    if value is None:
        return None

    # Remove group prefix for matching
    tag_key = tag_name.split(':', 1)[-1]

    if isinstance(value, bool):
        described = str(value)
    elif isinstance(value, int):
        described = _format_integer(tag_key, value)
    elif isinstance(value, tuple) and len(value) == 2:
        described = _format_rational(tag_key, value)
    elif isinstance(value, list):
        if not value:
            return None
        if isinstance(value[0], tuple):
            described = _format_rational_list(tag_key, value)
        else:
            described = ' '.join(str(v) for v in value)
    elif isinstance(value, str):
        described = _format_string(tag_key, value)
    else:
        # Default: convert to string
        described = str(value)

    if not described:
        return None
    return described

# Copyright 2025 DNAi inc.

# Dual-licensed under the DNAi Free License v1.1 and the
# DNAi Commercial License v1.1.
# See the LICENSE files in the project root for details.

"""
EXIF tag definitions per directory

Numeric tag identifiers and tag names for every directory the translation
layer populates. Tags are scoped by directory: GPS tag 0x0001
(GPSLatitudeRef) and interoperability tag 0x0001 (InteroperabilityIndex)
share an identifier but live in different tables.

Based on EXIF 2.32, the Olympus makernote layout and the Panasonic RW2 IFD0.

Copyright 2025 DNAi inc.
"""

# ============================================================
# EXIF IFD0 / EXIF sub-IFD / Interoperability tags
# ============================================================
TAG_INTEROP_INDEX = 0x0001
TAG_NEW_SUBFILE_TYPE = 0x00FE
TAG_SUBFILE_TYPE = 0x00FF
TAG_IMAGE_WIDTH = 0x0100
TAG_IMAGE_HEIGHT = 0x0101
TAG_BITS_PER_SAMPLE = 0x0102
TAG_COMPRESSION = 0x0103
TAG_PHOTOMETRIC_INTERPRETATION = 0x0106
TAG_IMAGE_DESCRIPTION = 0x010E
TAG_MAKE = 0x010F
TAG_MODEL = 0x0110
TAG_STRIP_OFFSETS = 0x0111
TAG_ORIENTATION = 0x0112
TAG_SAMPLES_PER_PIXEL = 0x0115
TAG_ROWS_PER_STRIP = 0x0116
TAG_STRIP_BYTE_COUNTS = 0x0117
TAG_X_RESOLUTION = 0x011A
TAG_Y_RESOLUTION = 0x011B
TAG_PLANAR_CONFIGURATION = 0x011C
TAG_RESOLUTION_UNIT = 0x0128
TAG_TRANSFER_FUNCTION = 0x012D
TAG_SOFTWARE = 0x0131
TAG_DATETIME = 0x0132
TAG_ARTIST = 0x013B
TAG_WHITE_POINT = 0x013E
TAG_PRIMARY_CHROMATICITIES = 0x013F
TAG_YCBCR_COEFFICIENTS = 0x0211
TAG_YCBCR_SUBSAMPLING = 0x0212
TAG_YCBCR_POSITIONING = 0x0213
TAG_REFERENCE_BLACK_WHITE = 0x0214
TAG_COPYRIGHT = 0x8298
TAG_EXPOSURE_TIME = 0x829A
TAG_FNUMBER = 0x829D
TAG_EXPOSURE_PROGRAM = 0x8822
TAG_SPECTRAL_SENSITIVITY = 0x8824
TAG_ISO_EQUIVALENT = 0x8827
TAG_OPTO_ELECTRIC_CONVERSION_FUNCTION = 0x8828
TAG_SENSITIVITY_TYPE = 0x8830
TAG_STANDARD_OUTPUT_SENSITIVITY = 0x8831
TAG_RECOMMENDED_EXPOSURE_INDEX = 0x8832
TAG_ISO_SPEED = 0x8833
TAG_ISO_SPEED_LATITUDE_YYY = 0x8834
TAG_ISO_SPEED_LATITUDE_ZZZ = 0x8835
TAG_EXIF_VERSION = 0x9000
TAG_DATETIME_ORIGINAL = 0x9003
TAG_DATETIME_DIGITIZED = 0x9004
TAG_TIME_ZONE = 0x9010
TAG_TIME_ZONE_ORIGINAL = 0x9011
TAG_TIME_ZONE_DIGITIZED = 0x9012
TAG_COMPONENTS_CONFIGURATION = 0x9101
TAG_COMPRESSED_AVERAGE_BITS_PER_PIXEL = 0x9102
TAG_SHUTTER_SPEED = 0x9201
TAG_APERTURE = 0x9202
TAG_BRIGHTNESS_VALUE = 0x9203
TAG_EXPOSURE_BIAS = 0x9204
TAG_MAX_APERTURE = 0x9205
TAG_SUBJECT_DISTANCE = 0x9206
TAG_METERING_MODE = 0x9207
TAG_LIGHT_SOURCE = 0x9208
TAG_FLASH = 0x9209
TAG_FOCAL_LENGTH = 0x920A
TAG_SUBJECT_AREA = 0x9214
TAG_MAKERNOTE = 0x927C
TAG_USER_COMMENT = 0x9286
TAG_SUBSECOND_TIME = 0x9290
TAG_SUBSECOND_TIME_ORIGINAL = 0x9291
TAG_SUBSECOND_TIME_DIGITIZED = 0x9292
TAG_FLASHPIX_VERSION = 0xA000
TAG_COLOR_SPACE = 0xA001
TAG_EXIF_IMAGE_WIDTH = 0xA002
TAG_EXIF_IMAGE_HEIGHT = 0xA003
TAG_RELATED_SOUND_FILE = 0xA004
TAG_FLASH_ENERGY = 0xA20B
TAG_SPATIAL_FREQ_RESPONSE = 0xA20C
TAG_FOCAL_PLANE_X_RESOLUTION = 0xA20E
TAG_FOCAL_PLANE_Y_RESOLUTION = 0xA20F
TAG_FOCAL_PLANE_RESOLUTION_UNIT = 0xA210
TAG_SUBJECT_LOCATION = 0xA214
TAG_EXPOSURE_INDEX = 0xA215
TAG_SENSING_METHOD = 0xA217
TAG_FILE_SOURCE = 0xA300
TAG_SCENE_TYPE = 0xA301
TAG_CFA_PATTERN = 0xA302
TAG_CUSTOM_RENDERED = 0xA401
TAG_EXPOSURE_MODE = 0xA402
TAG_WHITE_BALANCE_MODE = 0xA403
TAG_DIGITAL_ZOOM_RATIO = 0xA404
TAG_35MM_FILM_EQUIV_FOCAL_LENGTH = 0xA405
TAG_SCENE_CAPTURE_TYPE = 0xA406
TAG_GAIN_CONTROL = 0xA407
TAG_CONTRAST = 0xA408
TAG_SATURATION = 0xA409
TAG_SHARPNESS = 0xA40A
TAG_DEVICE_SETTING_DESCRIPTION = 0xA40B
TAG_SUBJECT_DISTANCE_RANGE = 0xA40C
TAG_IMAGE_UNIQUE_ID = 0xA420
TAG_CAMERA_OWNER_NAME = 0xA430
TAG_BODY_SERIAL_NUMBER = 0xA431
TAG_LENS_SPECIFICATION = 0xA432
TAG_LENS_MAKE = 0xA433
TAG_LENS_MODEL = 0xA434
TAG_LENS_SERIAL_NUMBER = 0xA435
TAG_GAMMA = 0xA500

EXIF_IFD0_TAG_NAMES = {
    TAG_INTEROP_INDEX: "InteroperabilityIndex",
    TAG_NEW_SUBFILE_TYPE: "SubfileType",
    TAG_SUBFILE_TYPE: "OldSubfileType",
    TAG_IMAGE_WIDTH: "ImageWidth",
    TAG_IMAGE_HEIGHT: "ImageLength",
    TAG_BITS_PER_SAMPLE: "BitsPerSample",
    TAG_COMPRESSION: "Compression",
    TAG_PHOTOMETRIC_INTERPRETATION: "PhotometricInterpretation",
    TAG_IMAGE_DESCRIPTION: "ImageDescription",
    TAG_MAKE: "Make",
    TAG_MODEL: "Model",
    TAG_STRIP_OFFSETS: "StripOffsets",
    TAG_ORIENTATION: "Orientation",
    TAG_SAMPLES_PER_PIXEL: "SamplesPerPixel",
    TAG_ROWS_PER_STRIP: "RowsPerStrip",
    TAG_STRIP_BYTE_COUNTS: "StripByteCounts",
    TAG_X_RESOLUTION: "XResolution",
    TAG_Y_RESOLUTION: "YResolution",
    TAG_PLANAR_CONFIGURATION: "PlanarConfiguration",
    TAG_RESOLUTION_UNIT: "ResolutionUnit",
    TAG_TRANSFER_FUNCTION: "TransferFunction",
    TAG_SOFTWARE: "Software",
    TAG_DATETIME: "DateTime",
    TAG_ARTIST: "Artist",
    TAG_WHITE_POINT: "WhitePoint",
    TAG_PRIMARY_CHROMATICITIES: "PrimaryChromaticities",
    TAG_YCBCR_COEFFICIENTS: "YCbCrCoefficients",
    TAG_YCBCR_SUBSAMPLING: "YCbCrSubSampling",
    TAG_YCBCR_POSITIONING: "YCbCrPositioning",
    TAG_REFERENCE_BLACK_WHITE: "ReferenceBlackWhite",
    TAG_COPYRIGHT: "Copyright",
    TAG_EXPOSURE_TIME: "ExposureTime",
    TAG_FNUMBER: "FNumber",
    TAG_EXPOSURE_PROGRAM: "ExposureProgram",
    TAG_SPECTRAL_SENSITIVITY: "SpectralSensitivity",
    TAG_ISO_EQUIVALENT: "ISOSpeedRatings",
    TAG_OPTO_ELECTRIC_CONVERSION_FUNCTION: "OECF",
    TAG_SENSITIVITY_TYPE: "SensitivityType",
    TAG_STANDARD_OUTPUT_SENSITIVITY: "StandardOutputSensitivity",
    TAG_RECOMMENDED_EXPOSURE_INDEX: "RecommendedExposureIndex",
    TAG_ISO_SPEED: "ISOSpeed",
    TAG_ISO_SPEED_LATITUDE_YYY: "ISOSpeedLatitudeyyy",
    TAG_ISO_SPEED_LATITUDE_ZZZ: "ISOSpeedLatitudezzz",
    TAG_EXIF_VERSION: "ExifVersion",
    TAG_DATETIME_ORIGINAL: "DateTimeOriginal",
    TAG_DATETIME_DIGITIZED: "CreateDate",
    TAG_TIME_ZONE: "OffsetTime",
    TAG_TIME_ZONE_ORIGINAL: "OffsetTimeOriginal",
    TAG_TIME_ZONE_DIGITIZED: "OffsetTimeDigitized",
    TAG_COMPONENTS_CONFIGURATION: "ComponentsConfiguration",
    TAG_COMPRESSED_AVERAGE_BITS_PER_PIXEL: "CompressedBitsPerPixel",
    TAG_SHUTTER_SPEED: "ShutterSpeedValue",
    TAG_APERTURE: "ApertureValue",
    TAG_BRIGHTNESS_VALUE: "BrightnessValue",
    TAG_EXPOSURE_BIAS: "ExposureBiasValue",
    TAG_MAX_APERTURE: "MaxApertureValue",
    TAG_SUBJECT_DISTANCE: "SubjectDistance",
    TAG_METERING_MODE: "MeteringMode",
    TAG_LIGHT_SOURCE: "LightSource",
    TAG_FLASH: "Flash",
    TAG_FOCAL_LENGTH: "FocalLength",
    TAG_SUBJECT_AREA: "SubjectArea",
    TAG_MAKERNOTE: "MakerNote",
    TAG_USER_COMMENT: "UserComment",
    TAG_SUBSECOND_TIME: "SubSecTime",
    TAG_SUBSECOND_TIME_ORIGINAL: "SubSecTimeOriginal",
    TAG_SUBSECOND_TIME_DIGITIZED: "SubSecTimeDigitized",
    TAG_FLASHPIX_VERSION: "FlashpixVersion",
    TAG_COLOR_SPACE: "ColorSpace",
    TAG_EXIF_IMAGE_WIDTH: "PixelXDimension",
    TAG_EXIF_IMAGE_HEIGHT: "PixelYDimension",
    TAG_RELATED_SOUND_FILE: "RelatedSoundFile",
    TAG_FLASH_ENERGY: "FlashEnergy",
    TAG_SPATIAL_FREQ_RESPONSE: "SpatialFrequencyResponse",
    TAG_FOCAL_PLANE_X_RESOLUTION: "FocalPlaneXResolution",
    TAG_FOCAL_PLANE_Y_RESOLUTION: "FocalPlaneYResolution",
    TAG_FOCAL_PLANE_RESOLUTION_UNIT: "FocalPlaneResolutionUnit",
    TAG_SUBJECT_LOCATION: "SubjectLocation",
    TAG_EXPOSURE_INDEX: "ExposureIndex",
    TAG_SENSING_METHOD: "SensingMethod",
    TAG_FILE_SOURCE: "FileSource",
    TAG_SCENE_TYPE: "SceneType",
    TAG_CFA_PATTERN: "CFAPattern",
    TAG_CUSTOM_RENDERED: "CustomRendered",
    TAG_EXPOSURE_MODE: "ExposureMode",
    TAG_WHITE_BALANCE_MODE: "WhiteBalance",
    TAG_DIGITAL_ZOOM_RATIO: "DigitalZoomRatio",
    TAG_35MM_FILM_EQUIV_FOCAL_LENGTH: "FocalLengthIn35mmFilm",
    TAG_SCENE_CAPTURE_TYPE: "SceneCaptureType",
    TAG_GAIN_CONTROL: "GainControl",
    TAG_CONTRAST: "Contrast",
    TAG_SATURATION: "Saturation",
    TAG_SHARPNESS: "Sharpness",
    TAG_DEVICE_SETTING_DESCRIPTION: "DeviceSettingDescription",
    TAG_SUBJECT_DISTANCE_RANGE: "SubjectDistanceRange",
    TAG_IMAGE_UNIQUE_ID: "ImageUniqueID",
    TAG_CAMERA_OWNER_NAME: "CameraOwnerName",
    TAG_BODY_SERIAL_NUMBER: "BodySerialNumber",
    TAG_LENS_SPECIFICATION: "LensSpecification",
    TAG_LENS_MAKE: "LensMake",
    TAG_LENS_MODEL: "LensModel",
    TAG_LENS_SERIAL_NUMBER: "LensSerialNumber",
    TAG_GAMMA: "Gamma",
}

# ============================================================
# IFD1 (Thumbnail) tags
# ============================================================
# Same identifiers as IFD0, named after the thumbnail they describe
TAG_THUMBNAIL_IMAGE_WIDTH = 0x0100
TAG_THUMBNAIL_IMAGE_HEIGHT = 0x0101
TAG_THUMBNAIL_COMPRESSION = 0x0103
TAG_THUMBNAIL_OFFSET = 0x0201
TAG_THUMBNAIL_LENGTH = 0x0202

EXIF_THUMBNAIL_TAG_NAMES = {
    TAG_THUMBNAIL_IMAGE_WIDTH: "ThumbnailImageWidth",
    TAG_THUMBNAIL_IMAGE_HEIGHT: "ThumbnailImageLength",
    TAG_THUMBNAIL_COMPRESSION: "ThumbnailCompression",
    TAG_THUMBNAIL_OFFSET: "ThumbnailOffset",
    TAG_THUMBNAIL_LENGTH: "ThumbnailLength",
}

# ============================================================
# GPS IFD tags (0x0000 - 0x001F)
# ============================================================
TAG_GPS_VERSION_ID = 0x0000
TAG_GPS_LATITUDE_REF = 0x0001
TAG_GPS_LATITUDE = 0x0002
TAG_GPS_LONGITUDE_REF = 0x0003
TAG_GPS_LONGITUDE = 0x0004
TAG_GPS_ALTITUDE_REF = 0x0005
TAG_GPS_ALTITUDE = 0x0006
TAG_GPS_TIME_STAMP = 0x0007
TAG_GPS_SATELLITES = 0x0008
TAG_GPS_STATUS = 0x0009
TAG_GPS_MEASURE_MODE = 0x000A
TAG_GPS_DOP = 0x000B
TAG_GPS_SPEED_REF = 0x000C
TAG_GPS_SPEED = 0x000D
TAG_GPS_TRACK_REF = 0x000E
TAG_GPS_TRACK = 0x000F
TAG_GPS_IMG_DIRECTION_REF = 0x0010
TAG_GPS_IMG_DIRECTION = 0x0011
TAG_GPS_MAP_DATUM = 0x0012
TAG_GPS_DEST_LATITUDE_REF = 0x0013
TAG_GPS_DEST_LATITUDE = 0x0014
TAG_GPS_DEST_LONGITUDE_REF = 0x0015
TAG_GPS_DEST_LONGITUDE = 0x0016
TAG_GPS_DEST_BEARING_REF = 0x0017
TAG_GPS_DEST_BEARING = 0x0018
TAG_GPS_DEST_DISTANCE_REF = 0x0019
TAG_GPS_DEST_DISTANCE = 0x001A
TAG_GPS_PROCESSING_METHOD = 0x001B
TAG_GPS_AREA_INFORMATION = 0x001C
TAG_GPS_DATE_STAMP = 0x001D
TAG_GPS_DIFFERENTIAL = 0x001E
TAG_GPS_H_POSITIONING_ERROR = 0x001F

GPS_TAG_NAMES = {
    TAG_GPS_VERSION_ID: "GPSVersionID",
    TAG_GPS_LATITUDE_REF: "GPSLatitudeRef",
    TAG_GPS_LATITUDE: "GPSLatitude",
    TAG_GPS_LONGITUDE_REF: "GPSLongitudeRef",
    TAG_GPS_LONGITUDE: "GPSLongitude",
    TAG_GPS_ALTITUDE_REF: "GPSAltitudeRef",
    TAG_GPS_ALTITUDE: "GPSAltitude",
    TAG_GPS_TIME_STAMP: "GPSTimeStamp",
    TAG_GPS_SATELLITES: "GPSSatellites",
    TAG_GPS_STATUS: "GPSStatus",
    TAG_GPS_MEASURE_MODE: "GPSMeasureMode",
    TAG_GPS_DOP: "GPSDOP",
    TAG_GPS_SPEED_REF: "GPSSpeedRef",
    TAG_GPS_SPEED: "GPSSpeed",
    TAG_GPS_TRACK_REF: "GPSTrackRef",
    TAG_GPS_TRACK: "GPSTrack",
    TAG_GPS_IMG_DIRECTION_REF: "GPSImgDirectionRef",
    TAG_GPS_IMG_DIRECTION: "GPSImgDirection",
    TAG_GPS_MAP_DATUM: "GPSMapDatum",
    TAG_GPS_DEST_LATITUDE_REF: "GPSDestLatitudeRef",
    TAG_GPS_DEST_LATITUDE: "GPSDestLatitude",
    TAG_GPS_DEST_LONGITUDE_REF: "GPSDestLongitudeRef",
    TAG_GPS_DEST_LONGITUDE: "GPSDestLongitude",
    TAG_GPS_DEST_BEARING_REF: "GPSDestBearingRef",
    TAG_GPS_DEST_BEARING: "GPSDestBearing",
    TAG_GPS_DEST_DISTANCE_REF: "GPSDestDistanceRef",
    TAG_GPS_DEST_DISTANCE: "GPSDestDistance",
    TAG_GPS_PROCESSING_METHOD: "GPSProcessingMethod",
    TAG_GPS_AREA_INFORMATION: "GPSAreaInformation",
    TAG_GPS_DATE_STAMP: "GPSDateStamp",
    TAG_GPS_DIFFERENTIAL: "GPSDifferential",
    TAG_GPS_H_POSITIONING_ERROR: "GPSHPositioningError",
}

# ============================================================
# Olympus makernote tags
# ============================================================
TAG_OLYMPUS_THUMBNAIL_IMAGE = 0x0100

OLYMPUS_MAKERNOTE_TAG_NAMES = {
    0x0000: "MakerNoteVersion",
    TAG_OLYMPUS_THUMBNAIL_IMAGE: "ThumbnailImage",
    0x0104: "BodyFirmwareVersion",
    0x0200: "SpecialMode",
    0x0207: "CameraType",
}

TAG_OLYMPUS_PREVIEW_IMAGE_VALID = 0x0100
TAG_OLYMPUS_PREVIEW_IMAGE_START = 0x0101
TAG_OLYMPUS_PREVIEW_IMAGE_LENGTH = 0x0102

OLYMPUS_CAMERA_SETTINGS_TAG_NAMES = {
    0x0000: "CameraSettingsVersion",
    TAG_OLYMPUS_PREVIEW_IMAGE_VALID: "PreviewImageValid",
    TAG_OLYMPUS_PREVIEW_IMAGE_START: "PreviewImageStart",
    TAG_OLYMPUS_PREVIEW_IMAGE_LENGTH: "PreviewImageLength",
}

TAG_OLYMPUS_ASPECT_RATIO = 0x1112
TAG_OLYMPUS_ASPECT_FRAME = 0x1113

OLYMPUS_IMAGE_PROCESSING_TAG_NAMES = {
    0x0000: "ImageProcessingVersion",
    TAG_OLYMPUS_ASPECT_RATIO: "AspectRatio",
    TAG_OLYMPUS_ASPECT_FRAME: "AspectFrame",
}

# ============================================================
# Panasonic RW2 IFD0 tags
# ============================================================
TAG_PANASONIC_RAW_VERSION = 0x0001
TAG_PANASONIC_SENSOR_WIDTH = 0x0002
TAG_PANASONIC_SENSOR_HEIGHT = 0x0003
TAG_PANASONIC_SENSOR_TOP_BORDER = 0x0004
TAG_PANASONIC_SENSOR_LEFT_BORDER = 0x0005
TAG_PANASONIC_SENSOR_BOTTOM_BORDER = 0x0006
TAG_PANASONIC_SENSOR_RIGHT_BORDER = 0x0007
TAG_PANASONIC_ISO = 0x0017
TAG_PANASONIC_JPG_FROM_RAW = 0x002E

PANASONIC_RAW_IFD0_TAG_NAMES = {
    TAG_PANASONIC_RAW_VERSION: "PanasonicRawVersion",
    TAG_PANASONIC_SENSOR_WIDTH: "SensorWidth",
    TAG_PANASONIC_SENSOR_HEIGHT: "SensorHeight",
    TAG_PANASONIC_SENSOR_TOP_BORDER: "SensorTopBorder",
    TAG_PANASONIC_SENSOR_LEFT_BORDER: "SensorLeftBorder",
    TAG_PANASONIC_SENSOR_BOTTOM_BORDER: "SensorBottomBorder",
    TAG_PANASONIC_SENSOR_RIGHT_BORDER: "SensorRightBorder",
    TAG_PANASONIC_ISO: "ISO",
    TAG_PANASONIC_JPG_FROM_RAW: "JpgFromRaw",
}

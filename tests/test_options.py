"""
Tests for the options model

Tests:
- Parsing the JSON wire document
- Rejection of malformed documents
- Crop and resize decisions
"""

import json

import pytest

from imageformat.errors import MalformedOptionsError
from imageformat.models.options import (
    Crop,
    Options,
    Resize,
    Thumb,
    parse_options,
    resolve_size,
)


class TestParseOptions:
    """Test parsing of options documents"""

    def test_empty_document_is_default(self):
        """Should treat missing or empty documents as all-default options"""
        assert parse_options(None) == Options()
        assert parse_options("") == Options()
        assert parse_options("  ") == Options()
        assert parse_options("{}") == Options()

    def test_full_document(self):
        """Should parse every field"""
        options = parse_options(
            '{"crop": {"x": 1, "y": 2, "width": 30, "height": 40},'
            ' "rotate": 12.5, "fill": "w",'
            ' "resize": {"width": 100},'
            ' "thumbnails": [{"suffix": "-s", "width": 10, "height": 20},'
            '                {"suffix": "-m", "width": 50}]}'
        )

        assert options.crop == Crop(1, 2, 30, 40)
        assert options.rotate == 12.5
        assert options.fill == "w"
        assert options.resize == Resize(100, 0)
        assert options.thumbnails == (Thumb("-s", 10, 20), Thumb("-m", 50, 0))

    def test_integer_rotation_becomes_float(self):
        assert parse_options('{"rotate": 90}').rotate == 90.0

    def test_unknown_keys_ignored(self):
        """Should ignore keys that are not part of the model"""
        options = parse_options('{"sharpen": true, "crop": {"x": 3, "depth": 9}}')
        assert options.crop == Crop(x=3)

    def test_null_sections_are_defaults(self):
        options = parse_options('{"crop": null, "resize": null, "thumbnails": null, "fill": null}')
        assert options == Options()

    def test_invalid_json(self):
        """Should reject text that is not JSON"""
        with pytest.raises(MalformedOptionsError, match="Invalid options JSON"):
            parse_options("{not json")

    @pytest.mark.parametrize("document", [
        '[]',
        '"resize"',
        '{"crop": [1, 2, 3, 4]}',
        '{"crop": {"x": "10"}}',
        '{"crop": {"width": 1.5}}',
        '{"resize": {"width": true}}',
        '{"rotate": "90"}',
        '{"fill": 1}',
        '{"thumbnails": {"suffix": "-s"}}',
        '{"thumbnails": [{"suffix": 5}]}',
        '{"thumbnails": ["-s"]}',
    ])
    def test_wrong_types_rejected(self, document):
        """Should reject documents that do not fit the options shape"""
        with pytest.raises(MalformedOptionsError):
            parse_options(document)

    def test_negative_dimensions_rejected(self):
        with pytest.raises(MalformedOptionsError, match="crop.x"):
            parse_options('{"crop": {"x": -1}}')
        with pytest.raises(MalformedOptionsError, match=r"thumbnails\[1\].height"):
            parse_options('{"thumbnails": [{"width": 1}, {"height": -5}]}')

    @pytest.mark.parametrize("suffix", ["/../../escaped", "\\evil", "..", "-a/b"])
    def test_path_like_suffix_rejected(self, suffix):
        """A thumbnail suffix may only change the file name, not its directory"""
        document = json.dumps({"thumbnails": [{"suffix": suffix, "width": 10}]})
        with pytest.raises(MalformedOptionsError, match=r"thumbnails\[0\].suffix"):
            parse_options(document)

    def test_malformed_options_is_value_error(self):
        with pytest.raises(ValueError):
            parse_options('{"rotate": []}')


class TestOptionsModel:
    """Test the immutable options dataclasses"""

    def test_options_are_frozen(self):
        options = Options()
        with pytest.raises(AttributeError):
            options.rotate = 90

    def test_to_dict_omits_defaults(self):
        """Should omit zero values like the wire format does"""
        assert Options().to_dict() == {}

        options = Options(
            crop=Crop(x=5),
            resize=Resize(height=20),
            thumbnails=(Thumb("-t", 10, 10),),
        )
        assert options.to_dict() == {
            "crop": {"x": 5},
            "resize": {"height": 20},
            "thumbnails": [{"suffix": "-t", "width": 10, "height": 10}],
        }

    def test_from_dict_accepts_to_dict(self):
        options = Options(rotate=-45.0, fill="black", crop=Crop(1, 2, 3, 4))
        assert Options.from_dict(options.to_dict()) == options


class TestCropDecision:
    """Test when a crop actually runs"""

    def test_zero_crop_never_runs(self):
        assert Crop().should_crop((800, 600)) is False

    def test_full_frame_crop_is_noop(self):
        assert Crop(0, 0, 800, 600).should_crop((800, 600)) is False

    def test_offset_forces_crop(self):
        """Should crop whenever x or y is set, even with full-size dimensions"""
        assert Crop(x=1).should_crop((800, 600)) is True
        assert Crop(y=1, width=800, height=600).should_crop((800, 600)) is True

    def test_smaller_rectangle_crops(self):
        assert Crop(0, 0, 400, 600).should_crop((800, 600)) is True

    def test_single_dimension_without_offset_is_noop(self):
        """Should need both width and height when there is no offset"""
        assert Crop(width=400).should_crop((800, 600)) is False
        assert Crop(height=300).should_crop((800, 600)) is False

    def test_box(self):
        assert Crop(10, 20, 30, 40).box == (10, 20, 40, 60)


class TestResizeResolution:
    """Test the square-fill resize rule"""

    def test_both_zero_means_no_resize(self):
        assert Resize().resolve() is None
        assert resolve_size(-1, 0) is None

    def test_missing_height_copies_width(self):
        """Should fill the missing side with the other, not keep aspect ratio"""
        assert Resize(400, 0).resolve() == (400, 400)

    def test_missing_width_copies_height(self):
        assert Resize(0, 250).resolve() == (250, 250)

    def test_both_given(self):
        assert Resize(320, 200).resolve() == (320, 200)

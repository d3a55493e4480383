"""
Unit tests for the image, profile and article structural parsers.
"""

import pytest
from ogpextract.models import Image
from ogpextract.opengraph.structural import ArticleGate, ImageGrouper, ProfileGate, StructuralParser


@pytest.mark.unit
class TestImageGrouper:
    """Test grouping of og:image structures."""

    def test_implements_protocol(self):
        assert isinstance(ImageGrouper(), StructuralParser)

    def test_never_stores_in_property_table(self):
        grouper = ImageGrouper()

        assert grouper.consume("image", "a.jpg", {}) is False
        assert grouper.consume("image:width", "10", {}) is False

    def test_root_without_sub_properties(self):
        grouper = ImageGrouper()
        grouper.consume("image", "I1", {})
        grouper.finalize()

        assert grouper.get_images() == [Image(image="I1")]

    def test_sub_properties_attach_to_current_image(self):
        grouper = ImageGrouper()
        grouper.consume("image", "I1", {})
        grouper.consume("image:width", "100", {})
        grouper.consume("image", "I2", {})
        grouper.consume("image:width", "200", {})
        grouper.consume("image:height", "150", {})
        grouper.consume("image:type", "image/png", {})
        grouper.finalize()

        images = grouper.get_images()
        assert [image.image for image in images] == ["I1", "I2"]
        assert images[0].width == 100
        assert images[0].height == 0
        assert images[1] == Image(image="I2", type="image/png", width=200, height=150)

    def test_root_always_starts_new_entry(self):
        grouper = ImageGrouper()
        grouper.consume("image", "I1", {})
        grouper.consume("image", "I1", {})
        grouper.finalize()

        assert len(grouper.get_images()) == 2

    def test_orphan_is_pruned(self):
        grouper = ImageGrouper()
        grouper.consume("image:width", "50", {})
        grouper.consume("image", "I1", {})
        grouper.finalize()

        assert grouper.get_images() == [Image(image="I1")]

    def test_empty_root_is_pruned(self):
        grouper = ImageGrouper()
        grouper.consume("image", "", {})
        grouper.consume("image:url", "http://example.com/a.jpg", {})
        grouper.finalize()

        assert grouper.get_images() is None

    def test_unknown_sub_property_is_ignored(self):
        grouper = ImageGrouper()
        grouper.consume("image", "I1", {})
        grouper.consume("image:alt", "A picture", {})
        grouper.finalize()

        assert grouper.get_images() == [Image(image="I1")]

    def test_all_slots(self):
        grouper = ImageGrouper()
        grouper.consume("image", "I1", {})
        grouper.consume("image:url", "http://a/1.jpg", {})
        grouper.consume("image:secure_url", "https://a/1.jpg", {})
        grouper.consume("image:type", "image/jpeg", {})
        grouper.consume("image:width", "+40", {})
        grouper.consume("image:height", "-3", {})
        grouper.finalize()

        assert grouper.get_images() == [
            Image(
                image="I1",
                url="http://a/1.jpg",
                secure_url="https://a/1.jpg",
                type="image/jpeg",
                width=40,
                height=-3,
            )
        ]

    @pytest.mark.parametrize("value", ["", "abc", "12px", "1.5", " 12", "1_000", "0x10"])
    def test_malformed_dimensions_default_to_zero(self, value):
        grouper = ImageGrouper()
        grouper.consume("image", "I1", {})
        grouper.consume("image:width", value, {})
        grouper.finalize()

        assert grouper.get_images()[0].width == 0

    @pytest.mark.parametrize("value", ["2147483648", "-2147483649", "99999999999999999999"])
    def test_dimensions_outside_int32_default_to_zero(self, value):
        grouper = ImageGrouper()
        grouper.consume("image", "I1", {})
        grouper.consume("image:height", value, {})
        grouper.finalize()

        assert grouper.get_images()[0].height == 0

    def test_int32_bounds_are_accepted(self):
        grouper = ImageGrouper()
        grouper.consume("image", "I1", {})
        grouper.consume("image:width", "2147483647", {})
        grouper.consume("image:height", "-2147483648", {})
        grouper.finalize()

        image = grouper.get_images()[0]
        assert (image.width, image.height) == (2147483647, -2147483648)

    def test_no_images(self):
        grouper = ImageGrouper()
        grouper.finalize()

        assert grouper.get_images() is None


@pytest.mark.unit
class TestProfileGate:
    """Test the profile type gate."""

    def test_stores_when_type_is_profile(self):
        gate = ProfileGate()

        assert gate.consume("first_name", "Jane", {"type": "Profile"}) is True
        assert gate.is_profile is True

    def test_rejects_other_types(self):
        gate = ProfileGate()

        assert gate.consume("first_name", "Jane", {"type": "article"}) is False
        assert gate.get_full_name({"first_name": "Jane"}) is None

    def test_decision_is_frozen_after_first_call(self):
        gate = ProfileGate()

        assert gate.consume("first_name", "Jane", {}) is False
        assert gate.consume("last_name", "Doe", {"type": "profile"}) is False
        assert gate.is_profile is False

    def test_confirmed_decision_survives_type_change(self):
        gate = ProfileGate()
        gate.consume("first_name", "Jane", {"type": "profile"})

        assert gate.consume("last_name", "Doe", {"type": "article"}) is True

    @pytest.mark.parametrize(
        "properties, expected",
        [
            ({"first_name": "Jane", "last_name": "Doe"}, "Jane Doe"),
            ({"first_name": "Jane"}, "Jane"),
            ({"last_name": "Doe"}, "Doe"),
            ({"first_name": "", "last_name": "Doe"}, "Doe"),
            ({"first_name": "Jane", "last_name": ""}, "Jane"),
            ({}, ""),
        ],
    )
    def test_full_name(self, properties, expected):
        gate = ProfileGate()
        gate.consume("first_name", "", {"type": "profile"})

        assert gate.get_full_name(properties) == expected


@pytest.mark.unit
class TestArticleGate:
    """Test the article type gate."""

    def test_rejects_until_type_is_article(self):
        gate = ArticleGate()

        assert gate.consume("section", "Tech", {}) is False
        assert gate.consume("author", "http://a/1", {"type": "website"}) is False
        assert gate.get_authors() is None

    def test_rechecks_type_on_every_call(self):
        gate = ArticleGate()

        assert gate.consume("section", "Tech", {}) is False
        assert gate.consume("section", "Tech", {"type": "ARTICLE"}) is True
        assert gate.is_article is True

    def test_confirmed_decision_latches(self):
        gate = ArticleGate()
        gate.consume("section", "Tech", {"type": "article"})

        assert gate.consume("published_time", "2020-01-01", {"type": "website"}) is True

    def test_authors_are_collected_in_order(self):
        gate = ArticleGate()
        properties = {"type": "article"}

        assert gate.consume("author", "http://a/1", properties) is False
        assert gate.consume("author", "http://a/2", properties) is False
        assert gate.get_authors() == ("http://a/1", "http://a/2")

# SPDX-License-Identifier: MIT
"""Tests for deriving new versions from existing ones."""

from __future__ import annotations

import pytest

from semverkit import (
    IncompleteVersionPartError,
    InvalidArgumentError,
    InvalidVersionError,
    UnexpectedCharacterError,
    create,
    parse_version,
)


class TestWithNumbers:
    """Tests for with_major, with_minor and with_patch."""

    def test_with_major(self):
        v = parse_version("1.2.3-rc.1+b.5")
        assert str(v.with_major(7)) == "7.2.3-rc.1+b.5"

    def test_with_minor(self):
        assert str(create(1, 2, 3).with_minor(0)) == "1.0.3"

    def test_with_patch(self):
        assert str(create(1, 2, 3).with_patch(42)) == "1.2.42"

    def test_original_unchanged(self):
        v = create(1, 2, 3)
        v.with_major(2)
        assert str(v) == "1.2.3"

    @pytest.mark.parametrize("method", ["with_major", "with_minor", "with_patch"])
    def test_negative_rejected(self, method):
        with pytest.raises(InvalidArgumentError):
            getattr(create(1, 2, 3), method)(-1)

    def test_non_int_rejected(self):
        with pytest.raises(InvalidArgumentError):
            create(1, 2, 3).with_major("2")  # type: ignore


class TestWithIdentifiers:
    """Tests for with_prerelease and with_build_metadata."""

    def test_with_prerelease_string(self):
        v = create(1, 0, 0).with_prerelease("beta.2")
        assert v.prerelease_parts == ("beta", "2")
        assert str(v) == "1.0.0-beta.2"

    def test_with_prerelease_list(self):
        v = create(1, 0, 0).with_prerelease(["beta", "2"])
        assert str(v) == "1.0.0-beta.2"

    def test_with_prerelease_keeps_build(self):
        v = parse_version("1.0.0+b").with_prerelease("rc")
        assert str(v) == "1.0.0-rc+b"

    def test_remove_prerelease(self):
        v = parse_version("1.0.0-rc.1+b")
        assert str(v.with_prerelease("")) == "1.0.0+b"
        assert str(v.with_prerelease([])) == "1.0.0+b"

    def test_dotted_element_equals_split_elements(self):
        v = create(1, 2, 3)
        joined = v.with_prerelease(["12.a"])
        split = v.with_prerelease(["12", "a"])
        assert joined == split
        assert joined.prerelease_parts == ("12", "a")

    def test_plus_in_prerelease_rejected(self):
        with pytest.raises(UnexpectedCharacterError) as exc_info:
            create(1, 2, 3).with_prerelease("12+a")
        assert exc_info.value.char == "+"

    def test_leading_zero_in_prerelease_rejected(self):
        with pytest.raises(InvalidVersionError):
            create(1, 2, 3).with_prerelease(["01"])

    def test_none_rejected(self):
        with pytest.raises(InvalidArgumentError):
            create(1, 2, 3).with_prerelease(None)  # type: ignore
        with pytest.raises(InvalidArgumentError):
            create(1, 2, 3).with_build_metadata(None)  # type: ignore

    def test_non_string_element_rejected(self):
        with pytest.raises(InvalidArgumentError):
            create(1, 2, 3).with_prerelease(["a", 1])  # type: ignore

    def test_list_is_copied(self):
        parts = ["alpha", "1"]
        v = create(1, 0, 0).with_prerelease(parts)
        parts.append("2")
        parts[0] = "beta"
        assert str(v) == "1.0.0-alpha.1"

    def test_with_build_metadata(self):
        v = create(1, 0, 0, "rc").with_build_metadata("exp.sha.5114f85")
        assert str(v) == "1.0.0-rc+exp.sha.5114f85"

    def test_build_metadata_allows_leading_zero(self):
        assert str(create(1, 0, 0).with_build_metadata("001")) == "1.0.0+001"

    def test_remove_build_metadata(self):
        v = parse_version("1.0.0-rc+b")
        assert str(v.with_build_metadata("")) == "1.0.0-rc"

    def test_empty_identifier_rejected(self):
        with pytest.raises(InvalidVersionError):
            create(1, 0, 0).with_build_metadata("a..b")

    @pytest.mark.parametrize("parts", [[""], ["a", ""], ["", "a"]])
    def test_empty_element_rejected(self, parts):
        """An empty element is an empty identifier, not an empty list."""
        v = create(1, 2, 3)
        with pytest.raises(IncompleteVersionPartError):
            v.with_prerelease(parts)
        with pytest.raises(IncompleteVersionPartError):
            v.with_build_metadata(parts)

    def test_empty_element_rejected_by_create(self):
        with pytest.raises(IncompleteVersionPartError):
            create(1, 2, 3, [""])

    def test_empty_iterable_clears(self):
        v = parse_version("1.2.3-rc+b")
        assert v.with_prerelease(()).prerelease_parts == ()
        assert v.with_build_metadata(iter([])).build_parts == ()


class TestNextNumbers:
    """Tests for next_major, next_minor and next_patch."""

    def test_next_major(self):
        assert str(parse_version("1.2.3-rc.1+b").next_major()) == "2.0.0"

    def test_next_minor(self):
        assert str(parse_version("1.2.3-rc.1+b").next_minor()) == "1.3.0"

    def test_next_patch(self):
        assert str(parse_version("1.2.3-rc.1+b").next_patch()) == "1.2.4"

    def test_next_with_prerelease(self):
        v = create(1, 2, 3)
        assert str(v.next_major("rc.1")) == "2.0.0-rc.1"
        assert str(v.next_minor(["alpha"])) == "1.3.0-alpha"
        assert str(v.next_patch("SNAPSHOT")) == "1.2.4-SNAPSHOT"

    def test_next_with_invalid_prerelease(self):
        with pytest.raises(InvalidVersionError):
            create(1, 2, 3).next_major("01")

    def test_next_greater_than_current(self):
        v = parse_version("1.2.3")
        assert v.next_patch() > v
        assert v.next_minor() > v.next_patch()
        assert v.next_major() > v.next_minor()


class TestNextIdentifiers:
    """Tests for next_prerelease and next_build_metadata."""

    def test_next_prerelease_from_release(self):
        assert create(1, 2, 3).next_prerelease().prerelease_parts == ("1",)

    def test_next_prerelease_appends(self):
        assert str(create(1, 2, 3, "foo").next_prerelease()) == "1.2.3-foo.1"

    def test_next_prerelease_increments(self):
        assert str(create(1, 2, 3, "foo.1").next_prerelease()) == "1.2.3-foo.2"
        assert str(create(1, 2, 3, "rc.9").next_prerelease()) == "1.2.3-rc.10"

    def test_next_prerelease_keeps_build(self):
        v = parse_version("1.2.3-rc.1+build.5")
        assert str(v.next_prerelease()) == "1.2.3-rc.2+build.5"

    def test_next_build_metadata(self):
        assert str(create(1, 2, 3).next_build_metadata()) == "1.2.3+1"
        assert str(create(1, 2, 3, "", "b").next_build_metadata()) == "1.2.3+b.1"
        assert str(create(1, 2, 3, "rc", "b.9").next_build_metadata()) == "1.2.3-rc+b.10"

    def test_large_numbers(self):
        v = create(1, 2, 3, "99999999999999999999")
        assert v.next_prerelease().prerelease == "100000000000000000000"


class TestCaseConversion:
    """Tests for to_upper and to_lower."""

    def test_to_upper(self):
        v = parse_version("1.2.3-alpha.1+build.abc")
        assert str(v.to_upper()) == "1.2.3-ALPHA.1+BUILD.ABC"

    def test_to_lower(self):
        v = parse_version("1.2.3-Alpha.1+Build.ABC")
        assert str(v.to_lower()) == "1.2.3-alpha.1+build.abc"

    def test_changes_precedence(self):
        v = parse_version("1.0.0-a")
        assert v.to_upper() < v


class TestToStable:
    def test_drops_prerelease_and_build(self):
        v = parse_version("1.2.3-rc.1+build.5")
        stable = v.to_stable()
        assert str(stable) == "1.2.3"
        assert stable.is_stable
        assert not stable.has_build_metadata

    def test_stable_is_greater(self):
        v = parse_version("1.2.3-rc.1")
        assert v.to_stable() > v

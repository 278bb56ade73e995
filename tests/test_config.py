# SPDX-License-Identifier: MIT
"""Tests for the validation policy."""

import pytest

from semverkit import DEFAULT_POLICY, VersionPolicy


class TestVersionPolicy:
    """Tests for VersionPolicy class."""

    def test_defaults(self):
        assert VersionPolicy().allow_zero_version is True
        assert DEFAULT_POLICY == VersionPolicy()

    def test_frozen(self):
        with pytest.raises(AttributeError):
            DEFAULT_POLICY.allow_zero_version = False  # type: ignore


class TestVersionPolicyFromEnv:
    """Tests for VersionPolicy.from_env method."""

    def test_unset(self, monkeypatch):
        monkeypatch.delenv("SEMVERKIT_ALLOW_ZERO_VERSION", raising=False)
        assert VersionPolicy.from_env().allow_zero_version is True

    @pytest.mark.parametrize("value", ["false", "FALSE", "False"])
    def test_disabled(self, monkeypatch, value):
        monkeypatch.setenv("SEMVERKIT_ALLOW_ZERO_VERSION", value)
        assert VersionPolicy.from_env().allow_zero_version is False

    @pytest.mark.parametrize("value", ["true", "1", "yes"])
    def test_enabled(self, monkeypatch, value):
        monkeypatch.setenv("SEMVERKIT_ALLOW_ZERO_VERSION", value)
        assert VersionPolicy.from_env().allow_zero_version is True

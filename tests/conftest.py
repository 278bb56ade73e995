# SPDX-License-Identifier: MIT
"""Pytest configuration and shared fixtures."""

from __future__ import annotations

import pytest
from click.testing import CliRunner

from semverkit import Version, parse_version

# Example precedence chain from semver.org, lowest first
SEMVER_ORG_VERSIONS = [
    "1.0.0-alpha",
    "1.0.0-alpha.1",
    "1.0.0-alpha.beta",
    "1.0.0-beta",
    "1.0.0-beta.2",
    "1.0.0-beta.11",
    "1.0.0-rc.1",
    "1.0.0",
    "2.0.0",
    "2.1.0",
    "2.1.1",
]

# Same chain with the identifiers moved into build metadata, lowest first
SEMVER_ORG_BUILD_VERSIONS = [
    "1.0.0-rc.1+alpha",
    "1.0.0-rc.1+alpha.1",
    "1.0.0-rc.1+alpha.beta",
    "1.0.0-rc.1+beta",
    "1.0.0-rc.1+beta.2",
    "1.0.0-rc.1+beta.11",
    "1.0.0-rc.1+rc.1",
    "1.0.0-rc.1",
    "2.0.0-rc.1",
    "2.1.0-rc.1",
    "2.1.1",
]


@pytest.fixture
def semver_org_versions() -> list[Version]:
    """Parsed versions of the semver.org precedence example."""
    return [parse_version(v) for v in SEMVER_ORG_VERSIONS]


@pytest.fixture
def semver_org_build_versions() -> list[Version]:
    """Parsed versions ordered by build metadata aware precedence."""
    return [parse_version(v) for v in SEMVER_ORG_BUILD_VERSIONS]


@pytest.fixture
def cli_runner() -> CliRunner:
    """Create a Click CLI test runner."""
    return CliRunner()

"""
Tests for runtime version parsing.

Property values seen in the wild:
    "17.0.2"       GA release
    "17.0.2+8"     with build number
    "11.0.11-ea"   early access
    "1.8.0_292"    legacy scheme
    "17", "21-ea"  feature releases without minor/patch (not parsed)
"""

import logging

import pytest
from multirelease.config import ResolverConfig
from multirelease.core.runtime_version import (
    RuntimeVersion,
    parse_runtime_version,
    runtime_version,
)


class TestRuntimeVersion:
    """Tests for the RuntimeVersion value object."""

    def test_fields(self):
        version = RuntimeVersion(17, 0, 2)
        assert (version.major, version.minor, version.patch) == (17, 0, 2)
        assert version.as_tuple() == (17, 0, 2)

    def test_str(self):
        assert str(RuntimeVersion(11, 0, 11)) == "11.0.11"

    def test_immutable(self):
        version = RuntimeVersion(17, 0, 2)
        with pytest.raises(AttributeError):
            version.major = 18

    def test_equality(self):
        assert RuntimeVersion(17, 0, 2) == RuntimeVersion(17, 0, 2)
        assert RuntimeVersion(17, 0, 2) != RuntimeVersion(17, 0, 3)

    def test_lexicographic_ordering(self):
        """Ordering compares major, then minor, then patch."""
        assert RuntimeVersion(11, 0, 99) < RuntimeVersion(11, 1, 0)
        assert RuntimeVersion(11, 9, 9) < RuntimeVersion(14, 0, 0)
        assert RuntimeVersion(1, 8, 0) < RuntimeVersion(11, 0, 0)
        assert max(RuntimeVersion(13, 9, 9), RuntimeVersion(14, 0, 0)) == RuntimeVersion(14, 0, 0)

    def test_rejects_negative(self):
        with pytest.raises(ValueError, match="minor must be >= 0"):
            RuntimeVersion(17, -1, 0)

    def test_rejects_non_int(self):
        with pytest.raises(ValueError, match="patch must be an int"):
            RuntimeVersion(17, 0, "2")


class TestParseRuntimeVersion:
    """Tests for parse_runtime_version."""

    @pytest.mark.parametrize("text,expected", [
        ("17.0.2", (17, 0, 2)),
        ("17.0.2+8", (17, 0, 2)),
        ("11.0.11-ea", (11, 0, 11)),
        ("1.8.0_292", (1, 8, 0)),
        ("21.0.1.1", (21, 0, 1)),
        ("007.00.010", (7, 0, 10)),
    ])
    def test_matching_strings(self, text, expected, log):
        """Fields equal the captured groups as integers."""
        version = parse_runtime_version(text, log)
        assert version.as_tuple() == expected
        assert log.warnings == []
        assert log.errors == []
        assert f"parsed.version -> {version}" in log.debugs

    @pytest.mark.parametrize("text", [
        "17",
        "21-ea",
        "17.0",
        "",
        "v17.0.2",
        " 17.0.2",
        "17.0.x",
        "١٧.0.2",
    ])
    def test_non_matching_strings(self, text, log):
        """Non-matching values yield None and a warning."""
        assert parse_runtime_version(text, log) is None
        assert len(log.warnings) == 1
        assert "cannot be parsed" in log.warnings[0]
        assert log.errors == []

    def test_none_is_unparseable(self, log):
        assert parse_runtime_version(None, log) is None
        assert log.warnings == [
            r"The java version None cannot be parsed as ^(\d+)\.(\d+)\.(\d+).*"
        ]

    def test_component_overflow(self, log):
        """Components beyond 32-bit range are an error, not a warning."""
        assert parse_runtime_version("2147483648.0.0", log) is None
        assert log.warnings == []
        assert len(log.errors) == 1
        assert "has an invalid format" in log.errors[0]

    def test_largest_component(self, log):
        version = parse_runtime_version("2147483647.0.0", log)
        assert version.major == 2147483647

    def test_without_log(self):
        """Missing log collaborator is a no-op."""
        assert parse_runtime_version("garbage") is None
        assert parse_runtime_version("17.0.2") == RuntimeVersion(17, 0, 2)

    def test_stdlib_logger(self, caplog):
        """A logging.Logger is accepted as collaborator."""
        logger = logging.getLogger("multirelease.test")
        with caplog.at_level(logging.DEBUG, logger="multirelease.test"):
            parse_runtime_version("garbage", logger)
        assert [r.levelno for r in caplog.records] == [logging.WARNING]

    def test_custom_pattern(self, log):
        config = ResolverConfig(version_pattern=r"^jdk-(\d+)\.(\d+)\.(\d+)$")
        assert parse_runtime_version("jdk-17.0.2", log, config) == RuntimeVersion(17, 0, 2)
        assert parse_runtime_version("17.0.2", log, config) is None


class TestRuntimeVersionProperty:
    """Tests for reading the version property."""

    def test_from_mapping(self, log, jdk17_properties):
        assert runtime_version(log, properties=jdk17_properties) == RuntimeVersion(17, 0, 2)
        assert log.debugs[0] == "java.version -> 17.0.2"

    def test_from_environment(self, log, monkeypatch):
        monkeypatch.setenv("JAVA_VERSION", "11.0.12+7")
        assert runtime_version(log) == RuntimeVersion(11, 0, 12)

    def test_missing_property(self, log):
        """An unset property behaves like an unparseable one."""
        assert runtime_version(log, properties={}) is None
        assert log.debugs[0] == "java.version -> None"
        assert len(log.warnings) == 1

    def test_custom_property_name(self, log):
        config = ResolverConfig(property_name="runtime.version")
        properties = {"runtime.version": "14.0.1", "java.version": "1.8.0"}
        assert runtime_version(log, config, properties) == RuntimeVersion(14, 0, 1)

"""Tests for the top-level tai_app namespace."""

import importlib

import structlog

import tai_app


class TestPackage:
    """Test the public surface."""

    def test_version(self):
        assert tai_app.__version__ == "0.1.0"

    def test_available_returns_bool(self):
        """available() answers True or False whether or not TA-Lib is installed."""
        assert isinstance(tai_app.available(), bool)

    def test_available_follows_installed_library(self, fake_library, missing_library):
        """available() reflects the most recently installed library."""
        assert tai_app.available() is False

    def test_errors_exported(self):
        """Error classes are reachable from the package root."""
        for name in (
            "TAIError",
            "TAINotInstalledError",
            "NativeResultError",
            "DocumentationFetchError",
            "InvalidParameterError",
            "UnknownIndicatorError",
        ):
            assert name in tai_app.__all__
            assert issubclass(getattr(tai_app, name), Exception)

    def test_help_reachable_as_attribute(self):
        """tai_app.help is the documentation lookup, not the builtin."""
        assert tai_app.help is not help
        assert tai_app.help("rsi").indicator == "rsi"

    def test_star_import_keeps_builtin_help(self):
        """A star import does not shadow the builtin help."""
        assert "help" not in tai_app.__all__

        namespace = {}
        exec("from tai_app import *", namespace)

        assert "help" not in namespace
        assert "sma" in namespace

    def test_import_leaves_logging_unconfigured(self):
        """Importing the package does not touch the host's structlog setup."""
        structlog.reset_defaults()
        try:
            importlib.reload(tai_app)
            assert structlog.is_configured() is False
        finally:
            structlog.reset_defaults()

    def test_all_names_resolve(self):
        """Everything in __all__ exists."""
        for name in tai_app.__all__:
            assert hasattr(tai_app, name), name

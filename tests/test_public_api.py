"""Tests for the top-level package exports."""

from __future__ import annotations

import importlib

import pytest

import rangelink

SUBPACKAGES = (
    "rangelink.detection",
    "rangelink.diagnostics",
    "rangelink.selection",
    "rangelink.syntax",
    "rangelink.validation",
)


class TestPublicApi:
    def test_version_is_string(self) -> None:
        assert isinstance(rangelink.__version__, str)
        assert rangelink.__version__

    @pytest.mark.parametrize("name", rangelink.__all__)
    def test_exported_name_resolves(self, name: str) -> None:
        assert getattr(rangelink, name) is not None

    def test_all_sorted(self) -> None:
        assert list(rangelink.__all__) == sorted(rangelink.__all__)

    @pytest.mark.parametrize("module_name", SUBPACKAGES)
    def test_subpackage_exports_resolve(self, module_name: str) -> None:
        module = importlib.import_module(module_name)

        missing = [name for name in module.__all__ if not hasattr(module, name)]

        assert missing == []

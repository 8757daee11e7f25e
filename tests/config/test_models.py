"""Tests for the configuration section models."""

import pytest
from pydantic import ValidationError

from pdfmult.config.models import DefaultsConfig, ToolsConfig


class TestDefaultsConfig:
    def test_defaults(self) -> None:
        cfg = DefaultsConfig()
        assert cfg.number == 2
        assert cfg.force is False
        assert cfg.silent is False

    @pytest.mark.parametrize("number", [2, 4, 8, 9, 16])
    def test_supported_numbers(self, number: int) -> None:
        assert DefaultsConfig(number=number).number == number

    @pytest.mark.parametrize("number", [0, 3, 5, 32])
    def test_unsupported_number_rejected(self, number: int) -> None:
        with pytest.raises(ValidationError, match="number must be one of 2, 4, 8, 9, 16"):
            DefaultsConfig(number=number)

    def test_frozen(self) -> None:
        cfg = DefaultsConfig()
        with pytest.raises(ValidationError):
            cfg.number = 4  # type: ignore[misc]


class TestToolsConfig:
    def test_defaults(self) -> None:
        cfg = ToolsConfig()
        assert cfg.pdflatex == "pdflatex"
        assert cfg.kpsewhich == "kpsewhich"
        assert cfg.pdfinfo == "pdfinfo"

"""tests/unit/test_config.py"""

import dataclasses

import pytest

from wireform.config import SerializerOptions


class TestSerializerOptions:
    """Tests for SerializerOptions."""

    def test_default(self):
        """Test that protection is off by default."""
        options = SerializerOptions()
        assert options.enable_prototype_poisoning_protection is False
        assert options.protection_enabled is False

    @pytest.mark.parametrize(
        "mode, proto, constructor",
        [
            (False, False, False),
            (True, True, True),
            ("proto", True, False),
            ("constructor", False, True),
        ],
    )
    def test_modes(self, mode, proto, constructor):
        """Test which vectors each mode guards."""
        options = SerializerOptions(enable_prototype_poisoning_protection=mode)
        assert options.protects_proto is proto
        assert options.protects_constructor is constructor
        assert options.protection_enabled is (proto or constructor)

    @pytest.mark.parametrize("mode", [1, 0, "both", "", None, "PROTO"])
    def test_invalid_mode(self, mode):
        """Test that unknown modes are rejected."""
        with pytest.raises(ValueError, match="enable_prototype_poisoning_protection"):
            SerializerOptions(enable_prototype_poisoning_protection=mode)

    def test_from_value(self):
        """Test building options from a bare mode."""
        options = SerializerOptions.from_value("constructor")
        assert options == SerializerOptions(
            enable_prototype_poisoning_protection="constructor"
        )

    def test_frozen(self):
        """Test that options cannot be changed after construction."""
        options = SerializerOptions()
        with pytest.raises(dataclasses.FrozenInstanceError):
            options.enable_prototype_poisoning_protection = True

from __future__ import annotations

from core.keybindings import DEFAULT_ACCELERATORS, accelerator_env_key
from core.settings import ExtensionSettings, ExtensionSettingsManager
from shared.effect_catalog import EffectBackend, EffectLevel


def test_defaults_when_source_is_empty():
    assert ExtensionSettingsManager({}).read_settings() == ExtensionSettings()


def test_reads_valid_values():
    settings = ExtensionSettingsManager(
        {
            "KOLOUR_EFFECT_BACKEND": "BUILTIN",
            "KOLOUR_GLOBAL_LEVEL": "half",
            "KOLOUR_UNTITLED_LABEL": "Sin título",
            "KOLOUR_OVERLAY_WIDTH": "500",
        }
    ).read_settings()

    assert settings.effect_backend is EffectBackend.BUILTIN
    assert settings.global_level is EffectLevel.HALF
    assert settings.untitled_label == "Sin título"
    assert settings.overlay_width == 500
    assert settings.overlay_height == 600


def test_invalid_values_fall_back():
    settings = ExtensionSettingsManager(
        {
            "KOLOUR_EFFECT_BACKEND": "vulkan",
            "KOLOUR_GLOBAL_LEVEL": "sepia",
            "KOLOUR_OVERLAY_HEIGHT": "tall",
            "KOLOUR_UNTITLED_LABEL": "   ",
        }
    ).read_settings()

    assert settings.effect_backend is EffectBackend.SHADER
    assert settings.global_level is EffectLevel.FULL
    assert settings.overlay_height == 600
    assert settings.untitled_label == "Untitled"


def test_overlay_size_is_clamped():
    settings = ExtensionSettingsManager(
        {"KOLOUR_OVERLAY_WIDTH": "10", "KOLOUR_OVERLAY_HEIGHT": "99999"}
    ).read_settings()

    assert settings.overlay_width == 200
    assert settings.overlay_height == 2000


def test_accelerator_override_and_empty_override():
    settings = ExtensionSettingsManager(
        {
            accelerator_env_key("window-group"): "<Super>w",
            accelerator_env_key("global-grayscale"): " , ",
        }
    ).read_settings()

    assert settings.accelerators_for("window-group") == ("<Super>w",)
    assert settings.accelerators_for("global-grayscale") == DEFAULT_ACCELERATORS["global-grayscale"]


def test_accelerator_env_key_format():
    assert accelerator_env_key("grayscale-100") == "KOLOUR_ACCEL_GRAYSCALE_100"

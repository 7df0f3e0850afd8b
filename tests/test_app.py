from __future__ import annotations

import pytest

from core.app import ACTION_SCOPE, ExtensionController, KolourGroupsExtension
from core.effect_registry import SCRATCH_KEY
from core.host import ActionScope
from core.keybindings import ACTION_NAMES, DEFAULT_ACCELERATORS, GLOBAL_GRAYSCALE, WINDOW_GROUP
from core.settings import ExtensionSettingsManager
from shared.effect_catalog import GLOBAL_EFFECT_NAME, WINDOW_EFFECT_NAME, BuiltinDesaturate, EffectLevel


@pytest.fixture
def extension(services) -> KolourGroupsExtension:
    return KolourGroupsExtension(services, settings_manager=ExtensionSettingsManager({}))


def test_enable_registers_all_actions(host, extension):
    extension.enable()

    assert set(host.bindings) == set(ACTION_NAMES)
    accelerators, scope, _ = host.bindings["grayscale-50"]
    assert accelerators == DEFAULT_ACCELERATORS["grayscale-50"]
    assert scope == ActionScope.NORMAL | ActionScope.OVERVIEW == ACTION_SCOPE


def test_level_shortcut_applies_to_focused_window(host, extension):
    window = host.add_window("Editor")
    host.focused = window
    extension.enable()

    host.trigger("grayscale-75")

    assert extension.controller.registry.get(window).level is EffectLevel.THREE_QUARTER


def test_level_shortcut_without_focus_is_noop(host, extension):
    host.add_window("Editor")
    extension.enable()

    host.trigger("grayscale-100")

    assert len(extension.controller.registry) == 0


def test_remove_effects_shortcut(host, extension):
    window = host.add_window("Editor")
    host.focused = window
    extension.enable()
    host.trigger("grayscale-25")

    host.trigger("remove-effects")

    assert not host.has_effect(window, WINDOW_EFFECT_NAME)
    assert SCRATCH_KEY not in host.scratch[window]


def test_selector_and_global_shortcuts(host, extension):
    host.add_window("Editor")
    extension.enable()

    host.trigger(WINDOW_GROUP)
    assert extension.controller.selector.is_open
    host.trigger(WINDOW_GROUP)
    assert not extension.controller.selector.is_open

    host.trigger(GLOBAL_GRAYSCALE)
    assert host.has_effect(host.root, GLOBAL_EFFECT_NAME)


def test_failed_binding_does_not_block_others(host, extension):
    host.failing_bindings.add(WINDOW_GROUP)

    extension.enable()

    assert WINDOW_GROUP not in extension.controller.active_bindings
    assert len(extension.controller.active_bindings) == len(ACTION_NAMES) - 1

    extension.disable()
    assert host.bindings == {}


def test_lifecycle_round_trip_restores_single_attachment(host, extension):
    window = host.add_window("Editor")
    host.focused = window
    extension.enable()
    host.trigger("grayscale-25")

    extension.disable()
    assert not host.has_effect(window, WINDOW_EFFECT_NAME)
    assert host.scratch[window][SCRATCH_KEY] == "quarter"

    extension.enable()
    assert list(host.effects[window]) == [WINDOW_EFFECT_NAME]
    assert host.effect_on(window, WINDOW_EFFECT_NAME).uniform_value == 0.25
    assert extension.controller.registry.get(window).level is EffectLevel.QUARTER


def test_disable_tears_everything_down(host, extension):
    window = host.add_window("Editor")
    host.focused = window
    extension.enable()
    host.trigger("grayscale-100")
    host.trigger(GLOBAL_GRAYSCALE)
    host.trigger(WINDOW_GROUP)

    extension.disable()

    assert extension.controller is None
    assert host.bindings == {}
    assert host.surfaces == {}
    assert host.handlers == {}
    assert not host.has_effect(window, WINDOW_EFFECT_NAME)
    assert not host.has_effect(host.root, GLOBAL_EFFECT_NAME)
    assert host.scratch[window][SCRATCH_KEY] == "full"


def test_disable_before_enable_is_noop(extension):
    extension.disable()
    assert not extension.enabled


def test_each_enable_builds_a_fresh_controller(extension):
    extension.enable()
    first = extension.controller
    extension.disable()
    extension.enable()

    assert isinstance(extension.controller, ExtensionController)
    assert extension.controller is not first


def test_settings_drive_backend_and_accelerators(host, services):
    source = {
        "KOLOUR_EFFECT_BACKEND": "builtin",
        "KOLOUR_ACCEL_GRAYSCALE_25": "<Super>1, <Super>KP_1",
    }
    extension = KolourGroupsExtension(services, settings_manager=ExtensionSettingsManager(source))
    window = host.add_window("Editor")
    host.focused = window

    extension.enable()
    host.trigger("grayscale-25")

    assert host.bindings["grayscale-25"][0] == ("<Super>1", "<Super>KP_1")
    assert host.effect_on(window, WINDOW_EFFECT_NAME) == BuiltinDesaturate(intensity=0.25)

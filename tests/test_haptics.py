"""
Tests for the HapticsKit facade: gate, preference and shared instance.
"""

import pytest

import hapticskit
from hapticskit import (
    HapticsKit,
    HapticsKitConfiguration,
    HapticsKitNotConfiguredError,
    ImpactFeedbackStyle,
    InMemoryDefaults,
    NotificationFeedbackType,
    WatchHapticType,
)


def perform_every_action(haptics: HapticsKit) -> None:
    haptics.perform_notification(NotificationFeedbackType.SUCCESS)
    haptics.perform_impact()
    haptics.perform_selection()
    haptics.perform(WatchHapticType.CLICK)


class TestEnabledPreference:
    """Reading and writing the persisted enabled flag."""

    def test_fresh_store_reads_enabled(self, memory_store, recording_backend):
        config = HapticsKitConfiguration(store=memory_store, storage_key="k")
        haptics = HapticsKit(config, backend=recording_backend)

        assert haptics.haptic_feedback_enabled is True

    def test_missing_entry_reads_enabled_without_registered_default(
        self, recording_backend
    ):
        store = InMemoryDefaults()
        config = HapticsKitConfiguration(store=store, storage_key="k")
        haptics = HapticsKit(config, backend=recording_backend)
        store._registered.clear()

        assert haptics.haptic_feedback_enabled is True

    def test_write_false_then_read(self, memory_store, recording_backend):
        haptics = HapticsKit(
            HapticsKitConfiguration(store=memory_store, storage_key="k"),
            backend=recording_backend,
        )

        haptics.haptic_feedback_enabled = False

        assert haptics.haptic_feedback_enabled is False
        assert memory_store.object_for_key("k") is False

    def test_same_value_written_once(self, memory_store, recording_backend):
        haptics = HapticsKit(
            HapticsKitConfiguration(store=memory_store, storage_key="k"),
            backend=recording_backend,
        )

        haptics.haptic_feedback_enabled = False
        haptics.haptic_feedback_enabled = False

        assert memory_store.write_count == 1

    def test_first_write_persists_even_when_equal_to_default(
        self, memory_store, recording_backend
    ):
        haptics = HapticsKit(
            HapticsKitConfiguration(store=memory_store, storage_key="k"),
            backend=recording_backend,
        )

        haptics.haptic_feedback_enabled = True
        haptics.haptic_feedback_enabled = True

        assert memory_store.has_value("k")
        assert memory_store.write_count == 1

    def test_reads_are_not_cached(self, memory_store, recording_backend):
        haptics = HapticsKit(
            HapticsKitConfiguration(store=memory_store, storage_key="k"),
            backend=recording_backend,
        )
        assert haptics.haptic_feedback_enabled is True

        memory_store.set_bool(False, "k")

        assert haptics.haptic_feedback_enabled is False


class TestGate:
    """Actions reach the backend only when supported and enabled."""

    def test_supported_and_enabled_delegates(self, memory_store, recording_backend):
        haptics = HapticsKit(
            HapticsKitConfiguration(store=memory_store), backend=recording_backend
        )

        perform_every_action(haptics)

        assert recording_backend.calls == [
            ("notification_occurred", (NotificationFeedbackType.SUCCESS,)),
            ("impact_occurred", (ImpactFeedbackStyle.MEDIUM, 1.0)),
            ("selection_changed", ()),
            ("play_haptic", (WatchHapticType.CLICK,)),
        ]

    def test_disabled_preference_blocks_every_action(
        self, memory_store, recording_backend
    ):
        haptics = HapticsKit(
            HapticsKitConfiguration(store=memory_store), backend=recording_backend
        )
        haptics.haptic_feedback_enabled = False

        perform_every_action(haptics)

        assert haptics.should_perform_haptics is False
        assert recording_backend.calls == []

    def test_unsupported_platform_blocks_every_action(
        self, memory_store, unsupported_backend
    ):
        haptics = HapticsKit(
            HapticsKitConfiguration(store=memory_store), backend=unsupported_backend
        )

        perform_every_action(haptics)

        assert haptics.haptic_feedback_enabled is True
        assert haptics.should_perform_haptics is False
        assert unsupported_backend.calls == []

    def test_end_to_end_disable(self, recording_backend):
        store = InMemoryDefaults()
        config = HapticsKitConfiguration(store=store, storage_key="k")
        assert store.object_for_key("k") is True

        haptics = HapticsKit(config, backend=recording_backend)
        haptics.haptic_feedback_enabled = False

        assert store.object_for_key("k") is False
        assert haptics.supported is True
        assert haptics.should_perform_haptics is False


class TestActions:
    """Argument handling of the action methods."""

    @pytest.fixture
    def haptics(self, memory_store, recording_backend):
        return HapticsKit(
            HapticsKitConfiguration(store=memory_store), backend=recording_backend
        )

    def test_string_arguments_are_coerced(self, haptics, recording_backend):
        haptics.perform_notification("warning")
        haptics.perform_impact("heavy", 0.25)
        haptics.perform("directionUp")

        assert recording_backend.calls == [
            ("notification_occurred", (NotificationFeedbackType.WARNING,)),
            ("impact_occurred", (ImpactFeedbackStyle.HEAVY, 0.25)),
            ("play_haptic", (WatchHapticType.DIRECTION_UP,)),
        ]

    @pytest.mark.parametrize(
        "intensity, expected",
        [(1.7, 1.0), (-0.2, 0.0), (float("inf"), 1.0), (float("nan"), 0.0)],
    )
    def test_impact_intensity_is_clamped(
        self, haptics, recording_backend, intensity, expected
    ):
        haptics.perform_impact(ImpactFeedbackStyle.LIGHT, intensity)

        assert recording_backend.calls == [
            ("impact_occurred", (ImpactFeedbackStyle.LIGHT, expected))
        ]

    def test_unknown_type_raises_even_when_gated(self, haptics):
        haptics.haptic_feedback_enabled = False

        with pytest.raises(ValueError):
            haptics.perform_notification("celebration")
        with pytest.raises(ValueError):
            haptics.perform_impact("enormous")


class TestSharedInstance:
    """configure() creates one shared facade and reconfigures it in place."""

    def test_shared_before_configure_raises(self):
        with pytest.raises(HapticsKitNotConfiguredError) as exc_info:
            HapticsKit.shared("perform_selection")

        assert exc_info.value.recoverable is False
        assert "perform_selection" in str(exc_info.value)

    @pytest.mark.parametrize(
        "call",
        [
            lambda: hapticskit.perform_notification("success"),
            lambda: hapticskit.perform_impact(),
            lambda: hapticskit.perform_selection(),
            lambda: hapticskit.perform("click"),
            lambda: hapticskit.is_haptic_feedback_enabled(),
            lambda: hapticskit.set_haptic_feedback_enabled(False),
        ],
    )
    def test_module_functions_require_configure(self, call):
        assert not HapticsKit.is_configured()

        with pytest.raises(HapticsKitNotConfiguredError):
            call()

    def test_reconfigure_keeps_identity(self, recording_backend):
        store_a = InMemoryDefaults()
        store_b = InMemoryDefaults({"b": False})
        config_a = HapticsKitConfiguration(store=store_a, storage_key="a")
        config_b = HapticsKitConfiguration(store=store_b, storage_key="b")

        first = HapticsKit.configure(config_a, backend=recording_backend)
        second = HapticsKit.configure(config_b)

        assert first is second
        assert second.configuration is config_b
        assert second.backend is recording_backend
        assert second.haptic_feedback_enabled is False

        second.haptic_feedback_enabled = True
        assert store_b.object_for_key("b") is True
        assert not store_a.has_value("a")

    def test_module_functions_use_shared_instance(
        self, memory_store, recording_backend
    ):
        hapticskit.configure(
            HapticsKitConfiguration(store=memory_store), backend=recording_backend
        )

        hapticskit.perform_selection()
        hapticskit.set_haptic_feedback_enabled(False)
        hapticskit.perform_selection()

        assert hapticskit.is_haptic_feedback_enabled() is False
        assert recording_backend.calls == [("selection_changed", ())]

    def test_configure_without_configuration_uses_environment(
        self, monkeypatch, recording_backend
    ):
        monkeypatch.setenv("HAPTICSKIT_STORAGE_KEY", "EnvKey")

        haptics = hapticskit.configure(backend=recording_backend)

        assert haptics.configuration.storage_key == "EnvKey"

    def test_reset_forgets_shared_instance(self, memory_store, recording_backend):
        HapticsKit.configure(
            HapticsKitConfiguration(store=memory_store), backend=recording_backend
        )

        HapticsKit.reset()

        assert not HapticsKit.is_configured()

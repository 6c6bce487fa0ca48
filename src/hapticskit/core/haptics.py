"""
HapticsKit facade.

Every haptic goes through one gate: the host must support haptics and the
user preference stored in the configuration must be on. When either is
false the call is a silent no-op.

The facade can be used as an explicit handle (``HapticsKit(configuration)``)
or through the process-wide shared instance created by
``HapticsKit.configure``. Using the shared instance before it is configured
raises ``HapticsKitNotConfiguredError``.
"""

import logging
import math
from typing import Any, Callable, Optional, Union

from ..backends import HapticBackend, get_haptic_backend
from ..config.configuration import HapticsKitConfiguration
from ..exceptions import HapticsKitNotConfiguredError
from ..observation import ObservationRegistrar
from ..schemas.feedback import (
    ImpactFeedbackStyle,
    NotificationFeedbackType,
    WatchHapticType,
)
from ..utils.threading import run_on_main_thread

logger = logging.getLogger(__name__)

ENABLED_PROPERTY = "haptic_feedback_enabled"

_default_backend: Optional[HapticBackend] = None


def default_backend() -> HapticBackend:
    """Backend for the detected platform, created once per process."""
    global _default_backend
    if _default_backend is None:
        _default_backend = get_haptic_backend()
    return _default_backend


class HapticsKit:
    """
    Gatekeeper between callers and the host haptic engine.
    """

    _shared: Optional["HapticsKit"] = None

    def __init__(
        self,
        configuration: HapticsKitConfiguration,
        backend: Optional[HapticBackend] = None,
    ) -> None:
        """
        Initialize the facade.

        Args:
            configuration: Store and key of the enabled preference
            backend: Haptic backend. Defaults to the detected platform backend.
        """
        self._configuration = configuration
        self._backend = backend or default_backend()
        self._registrar = ObservationRegistrar()

    # Shared instance

    @classmethod
    def configure(
        cls,
        configuration: HapticsKitConfiguration,
        backend: Optional[HapticBackend] = None,
    ) -> "HapticsKit":
        """
        Create the shared instance, or reconfigure it in place.

        Args:
            configuration: Configuration to use from now on
            backend: Optional backend override

        Returns:
            The shared HapticsKit (same object on every call)
        """
        if cls._shared is None:
            cls._shared = cls(configuration, backend)
            logger.debug(
                f"HapticsKit configured (key={configuration.storage_key!r}, "
                f"backend={cls._shared.backend.name})"
            )
        else:
            cls._shared.reconfigure(configuration, backend)
        return cls._shared

    @classmethod
    def shared(cls, operation: Optional[str] = None) -> "HapticsKit":
        """
        Get the shared instance.

        Raises:
            HapticsKitNotConfiguredError: configure() has not been called
        """
        if cls._shared is None:
            raise HapticsKitNotConfiguredError(operation)
        return cls._shared

    @classmethod
    def is_configured(cls) -> bool:
        return cls._shared is not None

    @classmethod
    def reset(cls) -> None:
        """Drop the shared instance and the cached platform backend."""
        global _default_backend
        cls._shared = None
        _default_backend = None

    @staticmethod
    def haptic_feedback_supported() -> bool:
        """Whether the current platform supports haptic feedback."""
        return default_backend().supports_haptics()

    # Configuration

    @property
    def configuration(self) -> HapticsKitConfiguration:
        return self._configuration

    @property
    def backend(self) -> HapticBackend:
        return self._backend

    def reconfigure(
        self,
        configuration: HapticsKitConfiguration,
        backend: Optional[HapticBackend] = None,
    ) -> None:
        """
        Swap the configuration (and optionally the backend) in place.

        Observers of the enabled flag are notified when the effective value
        differs between the old and new configuration.
        """
        previous = self._read_enabled()
        self._configuration = configuration
        if backend is not None:
            self._backend = backend

        current = self._read_enabled()
        logger.debug(f"HapticsKit reconfigured (key={configuration.storage_key!r})")
        if current != previous:
            self._registrar.did_change(self, ENABLED_PROPERTY, current)

    # Enabled preference

    def _read_enabled(self) -> bool:
        value = self._configuration.store.object_for_key(
            self._configuration.storage_key
        )
        return True if value is None else bool(value)

    @property
    def haptic_feedback_enabled(self) -> bool:
        """User preference; reads True when nothing is stored."""
        self._registrar.access(self, ENABLED_PROPERTY)
        return self._read_enabled()

    @haptic_feedback_enabled.setter
    def haptic_feedback_enabled(self, enabled: bool) -> None:
        enabled = bool(enabled)
        store = self._configuration.store
        key = self._configuration.storage_key

        if store.has_value(key) and self._read_enabled() == enabled:
            return

        store.set_bool(enabled, key)
        logger.debug(f"Haptic feedback {'enabled' if enabled else 'disabled'}")
        self._registrar.did_change(self, ENABLED_PROPERTY, enabled)

    def observe_enabled(self, callback: Callable[[bool], None]) -> Callable[[], None]:
        """
        Subscribe to changes of the enabled preference.

        Returns:
            Callable removing the subscription
        """
        return self._registrar.subscribe(self, ENABLED_PROPERTY, callback)

    @property
    def registrar(self) -> ObservationRegistrar:
        return self._registrar

    # Gate

    @property
    def supported(self) -> bool:
        """Whether this instance's backend supports haptics."""
        return self._backend.supports_haptics()

    @property
    def should_perform_haptics(self) -> bool:
        return self.supported and self.haptic_feedback_enabled

    # Actions

    def perform_notification(
        self, feedback_type: Union[NotificationFeedbackType, str]
    ) -> None:
        """
        Play a notification haptic.

        Args:
            feedback_type: success, warning or error
        """
        feedback_type = NotificationFeedbackType(feedback_type)
        if not self.should_perform_haptics:
            return
        run_on_main_thread(
            self._backend.notification_occurred, feedback_type, wait=False
        )

    def perform_impact(
        self,
        style: Union[ImpactFeedbackStyle, str] = ImpactFeedbackStyle.MEDIUM,
        intensity: float = 1.0,
    ) -> None:
        """
        Play an impact haptic.

        Args:
            style: Impact style. Defaults to medium.
            intensity: Intensity, clamped to [0.0, 1.0] (NaN plays as 0.0).
                Defaults to 1.0.
        """
        style = ImpactFeedbackStyle(style)
        value = float(intensity)
        clamped = 0.0 if math.isnan(value) else min(max(value, 0.0), 1.0)
        if clamped != intensity:
            logger.debug(f"Impact intensity {intensity} clamped to {clamped}")

        if not self.should_perform_haptics:
            return
        run_on_main_thread(self._backend.impact_occurred, style, clamped, wait=False)

    def perform_selection(self) -> None:
        """Play a selection-changed haptic."""
        if not self.should_perform_haptics:
            return
        run_on_main_thread(self._backend.selection_changed, wait=False)

    def perform(self, haptic_type: Union[WatchHapticType, str]) -> None:
        """
        Play a watch haptic.

        Args:
            haptic_type: Watch haptic type
        """
        haptic_type = WatchHapticType(haptic_type)
        if not self.should_perform_haptics:
            return
        run_on_main_thread(self._backend.play_haptic, haptic_type, wait=False)


def configure(
    configuration: Optional[HapticsKitConfiguration] = None,
    backend: Optional[HapticBackend] = None,
) -> HapticsKit:
    """Configure the shared facade; defaults to the environment configuration."""
    return HapticsKit.configure(
        configuration or HapticsKitConfiguration.from_settings(), backend
    )


def haptic_feedback_supported() -> bool:
    return HapticsKit.haptic_feedback_supported()


def is_haptic_feedback_enabled() -> bool:
    return HapticsKit.shared("haptic_feedback_enabled").haptic_feedback_enabled


def set_haptic_feedback_enabled(enabled: bool) -> None:
    HapticsKit.shared("haptic_feedback_enabled").haptic_feedback_enabled = enabled


def perform_notification(feedback_type: Union[NotificationFeedbackType, str]) -> None:
    HapticsKit.shared("perform_notification").perform_notification(feedback_type)


def perform_impact(
    style: Union[ImpactFeedbackStyle, str] = ImpactFeedbackStyle.MEDIUM,
    intensity: float = 1.0,
) -> None:
    HapticsKit.shared("perform_impact").perform_impact(style, intensity)


def perform_selection() -> None:
    HapticsKit.shared("perform_selection").perform_selection()


def perform(haptic_type: Union[WatchHapticType, str]) -> None:
    HapticsKit.shared("perform").perform(haptic_type)


def observe_enabled(callback: Callable[[bool], Any]) -> Callable[[], None]:
    return HapticsKit.shared("observe_enabled").observe_enabled(callback)

"""
HapticsKit configuration: where the enabled preference lives.
"""

from typing import Any, ClassVar, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from ..storage import DefaultsStore, UserDefaultsStore, standard_defaults
from .settings import DEFAULT_STORAGE_KEY, HapticsKitSettings

_preview_configuration: Optional["HapticsKitConfiguration"] = None


class HapticsKitConfiguration(BaseModel):
    """
    Immutable pairing of a defaults store and the key of the enabled flag.

    Constructing a configuration registers ``True`` as the default for
    ``storage_key`` in ``store``, so the preference always reads as enabled
    until the user turns it off. Explicit values are never overwritten.
    """

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    DEFAULT_STORAGE_KEY: ClassVar[str] = DEFAULT_STORAGE_KEY

    store: DefaultsStore = Field(
        default=None,
        validate_default=True,
        description="Shared defaults store (not owned)",
    )
    storage_key: str = Field(
        default=DEFAULT_STORAGE_KEY, description="Key of the enabled preference"
    )

    @field_validator("store", mode="before")
    @classmethod
    def resolve_store(cls, value: Any) -> Any:
        return standard_defaults() if value is None else value

    def model_post_init(self, __context: Any) -> None:
        self.store.register_defaults({self.storage_key: True})

    @classmethod
    def preview(cls) -> "HapticsKitConfiguration":
        """Shared configuration for previews: standard store, default key."""
        global _preview_configuration
        if _preview_configuration is None:
            _preview_configuration = cls(
                store=standard_defaults(), storage_key=DEFAULT_STORAGE_KEY
            )
        return _preview_configuration

    @classmethod
    def from_settings(
        cls, settings: Optional[HapticsKitSettings] = None
    ) -> "HapticsKitConfiguration":
        """
        Build a configuration from environment settings.

        Args:
            settings: Settings to use. Defaults to HapticsKitSettings.from_env().

        Returns:
            Configuration using NSUserDefaults when available, else the JSON
            file at the configured defaults path, and the configured key
        """
        settings = settings or HapticsKitSettings.from_env()
        store = standard_defaults()
        if not isinstance(store, UserDefaultsStore) and (
            getattr(store, "path", None) != settings.defaults_path
        ):
            store = standard_defaults(settings.defaults_path)
        return cls(store=store, storage_key=settings.storage_key)

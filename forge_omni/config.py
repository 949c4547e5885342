"""
Configuration Settings.

This module defines the Omni integration configuration records and the
environment-driven `Settings` model. `OmniConfig` and `ForgeProjectSettings`
are plain data records: the host application stores and loads them, this
package only reads them. `Settings` binds the same values from environment
variables and a .env file through pydantic-settings.
"""

from enum import Enum
from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from forge_omni.schemas.base import BaseSchema


class RecipientType(str, Enum):
    """Which request field the configured recipient is sent in."""

    PHONE_NUMBER = "PhoneNumber"
    USER_ID = "UserId"


class OmniConfig(BaseSchema):
    """Omni notification configuration for a project or user."""

    enabled: bool = Field(default=False, description="Whether Omni notifications are sent at all")
    host: Optional[str] = Field(default=None, description="Omni gateway base URL")
    api_key: Optional[str] = Field(default=None, description="API key sent as X-API-Key")
    instance: Optional[str] = Field(default=None, description="Gateway instance used to deliver notifications")
    recipient: Optional[str] = Field(default=None, description="Phone number or user id of the recipient")
    recipient_type: Optional[RecipientType] = Field(
        default=None, description="How `recipient` is interpreted (PhoneNumber or UserId)"
    )

    @property
    def is_ready(self) -> bool:
        """True when enabled and every field needed to send a message is set."""
        return bool(self.enabled and self.host and self.instance and self.recipient)


class ForgeProjectSettings(BaseSchema):
    """Forge-specific project settings stored alongside a project."""

    omni_enabled: bool = Field(default=False, description="Enable Omni notifications for this project")
    omni_config: Optional[OmniConfig] = Field(default=None, description="Project-level Omni configuration")


# =====================================================================
# Main Settings Class
# =====================================================================


class Settings(BaseSettings):
    """
    Application settings model.

    All properties are automatically bound from environment variables and .env file.
    Pydantic's BaseSettings handles dotenv loading automatically via model_config.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        case_sensitive=True,
    )

    # =====================================================================
    # Omni Gateway Configuration
    # =====================================================================
    omni_enabled: bool = Field(default=False, alias="OMNI_ENABLED", description="Enable Omni notifications")
    omni_host: Optional[str] = Field(default=None, alias="OMNI_HOST", description="Omni gateway base URL")
    omni_api_key: Optional[str] = Field(default=None, alias="OMNI_API_KEY", description="Omni gateway API key")
    omni_instance: Optional[str] = Field(
        default=None, alias="OMNI_INSTANCE", description="Gateway instance used for notifications"
    )
    omni_recipient: Optional[str] = Field(
        default=None, alias="OMNI_RECIPIENT", description="Notification recipient (phone number or user id)"
    )
    omni_recipient_type: Optional[RecipientType] = Field(
        default=None, alias="OMNI_RECIPIENT_TYPE", description="Recipient type: PhoneNumber or UserId"
    )

    # =====================================================================
    # Logging Configuration
    # =====================================================================
    log_level: str = Field(
        default="INFO",
        alias="FORGE_OMNI_LOG_LEVEL",
        description="forge_omni logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)",
    )

    # =====================================================================
    # Computed Properties (Grouped Configurations)
    # =====================================================================

    @property
    def omni(self) -> OmniConfig:
        """Get Omni configuration from environment variables."""
        return OmniConfig(
            enabled=self.omni_enabled,
            host=self.omni_host,
            api_key=self.omni_api_key,
            instance=self.omni_instance,
            recipient=self.omni_recipient,
            recipient_type=self.omni_recipient_type,
        )

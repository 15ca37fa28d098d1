"""
Configuration management using Pydantic Settings.

Type-safe, validated configuration loaded from environment variables
prefixed with ``SECUREGUARD_`` (and an optional ``.env`` file).

Architecture:
- Flat Settings structure (no nesting)
- Secrets-free defaults (static salt, fixed second-factor code);
  bcrypt and TOTP are opt-in

Usage:
    from secureguard.core.config import get_settings

    settings = get_settings()
    config = settings.initial_policy_config()
"""

from functools import lru_cache
from typing import Literal

from pydantic import Field, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from secureguard.core.enums import Environment
from secureguard.domain.enums import Role
from secureguard.domain.value_objects import PolicyConfig


class Settings(BaseSettings):
    """
    Application settings (flat structure).

    Configuration precedence:
        1. Environment variables (SECUREGUARD_*)
        2. .env file
        3. Default values
    """

    # Environment detection
    environment: Environment = Field(
        default=Environment.DEVELOPMENT,
        description="Application environment (development, testing, ci, production)",
    )

    # Logging
    log_level: str = Field(
        default="INFO",
        description="Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)",
    )
    log_json: bool = Field(
        default=False,
        description="Render log lines as JSON instead of coloured console output",
    )

    # Authentication
    lockout_threshold: int = Field(
        default=3,
        ge=1,
        description="Consecutive failures that lock a subject",
    )
    credential_hasher: Literal["sha256", "bcrypt"] = Field(
        default="sha256",
        description="Password digest algorithm",
    )
    credential_salt: str = Field(
        default="salt",
        description="System-wide salt for the sha256 hasher",
    )
    bcrypt_rounds: int = Field(
        default=12,
        description="Bcrypt cost factor (10-20)",
    )
    second_factor_backend: Literal["static", "totp"] = Field(
        default="static",
        description="Second-factor verifier implementation",
    )
    static_second_factor_code: str = Field(
        default="123456",
        description="Accepted code for the static verifier",
    )
    totp_issuer: str = Field(
        default="SecureGuard",
        description="Issuer name embedded in TOTP provisioning URIs",
    )
    totp_valid_window: int = Field(
        default=1,
        ge=0,
        description="Accepted TOTP clock drift in 30s steps",
    )

    events_strict_mode: bool = Field(
        default=True,
        description="Fail at startup when a registered event lacks a handler method",
    )

    # Role access keys required to self-register a privileged role
    admin_access_key: str = Field(default="ROOT_ACCESS_2024")
    manager_access_key: str = Field(default="MANAGER_OPS_01")
    auditor_access_key: str = Field(default="AUDIT_VIEW_99")

    # Initial policy configuration
    enable_mac: bool = Field(default=True)
    enable_dac: bool = Field(default=True)
    enable_rbac: bool = Field(default=True)
    enable_rubac: bool = Field(default=False)
    enable_abac: bool = Field(default=True)
    working_hours_start: int = Field(default=9, ge=0, le=23)
    working_hours_end: int = Field(default=17, ge=0, le=23)

    model_config = SettingsConfigDict(
        env_prefix="SECUREGUARD_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    @field_validator("bcrypt_rounds")
    @classmethod
    def validate_bcrypt_rounds(cls, v: int) -> int:
        """
        Validate bcrypt rounds are within the accepted range.

        Raises:
            ValueError: If rounds are not between 10 and 20.
        """
        if not 10 <= v <= 20:
            raise ValueError("bcrypt_rounds must be between 10 and 20")
        return v

    @field_validator("log_level")
    @classmethod
    def normalize_log_level(cls, v: str) -> str:
        level = v.upper()
        if level not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
            raise ValueError(f"Unsupported log level: {v}")
        return level

    @model_validator(mode="after")
    def validate_policy_window(self) -> "Settings":
        # Fail at startup rather than on first evaluation.
        self.initial_policy_config()
        return self

    @property
    def is_development(self) -> bool:
        """Check if running in development environment."""
        return self.environment == Environment.DEVELOPMENT

    @property
    def is_testing(self) -> bool:
        """Check if running in testing environment."""
        return self.environment == Environment.TESTING

    @property
    def is_production(self) -> bool:
        """Check if running in production environment."""
        return self.environment == Environment.PRODUCTION

    @property
    def role_access_keys(self) -> dict[Role, str]:
        """Access key per role; roles absent from the mapping need none."""
        return {
            Role.ADMIN: self.admin_access_key,
            Role.MANAGER: self.manager_access_key,
            Role.AUDITOR: self.auditor_access_key,
        }

    def initial_policy_config(self) -> PolicyConfig:
        """
        Build the immutable PolicyConfig the system starts with.

        Returns:
            PolicyConfig: Toggles and working-hour window from settings.
        """
        return PolicyConfig(
            enable_mac=self.enable_mac,
            enable_dac=self.enable_dac,
            enable_rbac=self.enable_rbac,
            enable_rubac=self.enable_rubac,
            enable_abac=self.enable_abac,
            working_hours_start=self.working_hours_start,
            working_hours_end=self.working_hours_end,
        )


@lru_cache
def get_settings() -> Settings:
    """
    Get cached settings instance.

    Uses lru_cache so settings are loaded only once per process. Tests call
    ``get_settings.cache_clear()`` after changing the environment.

    Returns:
        Settings: Application settings.
    """
    return Settings()

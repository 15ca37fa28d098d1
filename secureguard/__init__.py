"""SecureGuard: multi-model access decisions and lockout-aware authentication."""

__version__ = "0.1.0"

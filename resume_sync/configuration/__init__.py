"""Configuration handling: environment settings, CLI reconciliation and the CLI itself."""

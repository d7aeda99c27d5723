"""Contains exceptions raised when reconciling sync configuration."""


class InvalidConfigurationError(Exception):
    """Raised when resolved settings contradict each other, e.g. a destination outside the git project."""


class RequiredConfigurationElementError(Exception):
    """Raised when a setting with no default was given neither on the command line nor in the environment."""

    def __init__(self, name: str, cli_name: str, env_name: str) -> None:
        super().__init__(f"Missing required configuration element: {name} (pass {cli_name} or set {env_name})")
        self.name = name
        self.cli_name = cli_name
        self.env_name = env_name

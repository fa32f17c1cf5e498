"""
Exceptions for the bucket_lister package.
"""


class ConfigurationError(RuntimeError):
    """Raised when the local AWS profile or region configuration is unusable."""


class ProfileConfigurationError(ConfigurationError):
    """Raised when a named profile is missing or its config files are malformed"""

    def __init__(self, profile, original_error):
        super().__init__(f"Unable to load AWS profile '{profile}': {original_error}")
        self.profile = profile


class RegionNotResolvedError(ConfigurationError):
    """Raised when no resolver in the region chain produced a value"""

    def __init__(self):
        super().__init__("No AWS region could be resolved from the configured providers")

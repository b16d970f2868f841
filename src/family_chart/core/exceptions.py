class FamilyChartError(Exception):
    """Base exception for family_chart failures."""


class ConfigError(FamilyChartError):
    """Raised when the configuration file cannot be used."""


class ChartLoadError(FamilyChartError):
    """Raised when chart text cannot be acquired (missing or unreadable file)."""

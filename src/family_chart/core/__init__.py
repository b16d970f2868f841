from family_chart.core.exceptions import ChartLoadError, ConfigError, FamilyChartError

__all__ = [
    "ChartLoadError",
    "ConfigError",
    "FamilyChartError",
]

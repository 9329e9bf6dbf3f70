"""Configuration models - Pure data structures.

These are domain models for configuration. The actual loading
(I/O) is handled by the shell layer.
"""

from dataclasses import dataclass, field


DEFAULT_LIGHTING_LEVELS = ("low", "medium", "high")

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass
class Config:
    """Application configuration.

    This is a pure data structure - no I/O or side effects.

    Attributes:
        properties_path: Path to the JSON property dataset
        lighting_levels: Lighting values offered by the lighting filter
        log_level: Logging level name
        show_summary: Print a 'Showing N of M' line after each result
    """
    properties_path: str = "properties.json"
    lighting_levels: tuple[str, ...] = field(default=DEFAULT_LIGHTING_LEVELS)
    log_level: str = "WARNING"
    show_summary: bool = True


@dataclass
class Issue:
    """Something wrong with a setting or a user-supplied value.

    Attributes:
        field: Setting or input the issue refers to (e.g. 'lighting_levels')
        message: What is wrong, phrased for the terminal
        severity: 'error' stops startup, 'warning' is only logged
    """
    field: str
    message: str
    severity: str = "error"


@dataclass
class IssueReport:
    """Issues found while checking the configuration."""
    issues: list[Issue] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        """True when nothing blocks startup."""
        return not self.errors

    @property
    def warnings(self) -> list[Issue]:
        return [i for i in self.issues if i.severity == "warning"]

    @property
    def errors(self) -> list[Issue]:
        return [i for i in self.issues if i.severity == "error"]


def check_origin(latitude: float, longitude: float) -> list[Issue]:
    """Flag a search origin that cannot be a point on Earth.

    Pure function. Out-of-range values are reported as warnings only;
    the distance filter still runs with them.
    """
    issues = []

    if not -90 <= latitude <= 90:
        issues.append(Issue(
            field="latitude",
            message=f"{latitude} is north or south of the poles (expected -90 to 90)",
            severity="warning",
        ))

    if not -180 <= longitude <= 180:
        issues.append(Issue(
            field="longitude",
            message=f"{longitude} wraps past the antimeridian (expected -180 to 180)",
            severity="warning",
        ))

    return issues


def validate_config(config: Config) -> IssueReport:
    """Check settings before the dataset is loaded.

    Pure function. A missing dataset path, an empty lighting menu or an
    unknown log level are errors; repeated lighting levels only warn.
    """
    issues: list[Issue] = []

    if not config.properties_path:
        issues.append(Issue(
            field="properties_path",
            message="no dataset file given; set properties_path or PROPERTIES_PATH",
        ))

    if not config.lighting_levels:
        issues.append(Issue(
            field="lighting_levels",
            message="the lighting filter needs at least one level to offer",
        ))
    elif len(set(config.lighting_levels)) != len(config.lighting_levels):
        issues.append(Issue(
            field="lighting_levels",
            message="repeated levels are listed once in the lighting menu",
            severity="warning",
        ))

    if config.log_level.upper() not in LOG_LEVELS:
        issues.append(Issue(
            field="log_level",
            message=f"'{config.log_level}' is not one of {', '.join(LOG_LEVELS)}",
        ))

    return IssueReport(issues=issues)

"""Request and result models for accessibility scans."""

from dataclasses import dataclass
from typing import Annotated, Any, Literal

from pydantic import (
    AnyUrl,
    BaseModel,
    ConfigDict,
    Field,
    StrictBool,
    StrictFloat,
    StrictInt,
    StrictStr,
    TypeAdapter,
    ValidationError,
    field_validator,
)
from pydantic.alias_generators import to_camel

BrowserName = Literal["chromium", "firefox", "webkit"]
WaitUntil = Literal["load", "domcontentloaded", "networkidle", "commit"]

DEFAULT_TAGS = ("wcag2a",)
DEFAULT_VIEWPORT_WIDTH = 1280
DEFAULT_VIEWPORT_HEIGHT = 720
DEFAULT_DEVICE_SCALE_FACTOR = 1.0

RESULT_GROUPS = ("violations", "passes", "incomplete", "inapplicable")

_URL_ADAPTER = TypeAdapter(AnyUrl)

# Tool arguments arrive as JSON: counts and flags are never coerced from strings.
StrictPositiveInt = Annotated[StrictInt, Field(gt=0)]
StrictNonNegativeInt = Annotated[StrictInt, Field(ge=0)]
StrictPositiveFloat = Annotated[StrictFloat, Field(gt=0)]


class _WireModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
        frozen=True,
    )


class Viewport(_WireModel):
    """Browser viewport overrides; every field falls back on its own."""

    width: StrictPositiveInt | None = None
    height: StrictPositiveInt | None = None
    device_scale_factor: StrictPositiveFloat | None = None
    user_agent: StrictStr | None = None


class ScanRequest(_WireModel):
    """Validated input of one ``axe_scan_url`` call."""

    url: StrictStr
    tags: list[StrictStr] = Field(default_factory=lambda: list(DEFAULT_TAGS))
    run_only_rules: list[StrictStr] | None = None
    disable_rules: list[StrictStr] | None = None
    include_selectors: list[StrictStr] | None = None
    exclude_selectors: list[StrictStr] | None = None
    wait_until: WaitUntil = "load"
    navigation_timeout_ms: StrictPositiveInt | None = None
    legacy_mode: StrictBool | None = None
    viewport: Viewport | None = None
    browser: BrowserName = "chromium"
    headless: StrictBool = True
    post_navigation_wait_ms: StrictNonNegativeInt = 1000
    wait_for_selector: StrictStr | None = None
    axe_options: dict[str, Any] | None = None
    include_summary: StrictBool = False

    @field_validator("url")
    @classmethod
    def _check_url(cls, value: str) -> str:
        value = value.strip()
        try:
            _URL_ADAPTER.validate_python(value)
        except ValidationError as exc:
            raise ValueError(f"Invalid url: {value!r}") from exc
        return value

    def context_options(self) -> dict[str, Any]:
        """Keyword arguments for ``Browser.new_context``."""
        viewport = self.viewport or Viewport()
        return {
            "viewport": {
                "width": viewport.width or DEFAULT_VIEWPORT_WIDTH,
                "height": viewport.height or DEFAULT_VIEWPORT_HEIGHT,
            },
            "device_scale_factor": viewport.device_scale_factor or DEFAULT_DEVICE_SCALE_FACTOR,
            "user_agent": viewport.user_agent,
        }


@dataclass(frozen=True)
class ScanSummary:
    """Counts of each axe result group."""

    violations: int
    passes: int
    incomplete: int
    inapplicable: int

    @classmethod
    def from_analysis(cls, analysis: dict[str, Any]) -> "ScanSummary":
        return cls(**{group: len(analysis.get(group) or []) for group in RESULT_GROUPS})

    def as_dict(self) -> dict[str, int]:
        return {
            "violations": self.violations,
            "passes": self.passes,
            "incomplete": self.incomplete,
            "inapplicable": self.inapplicable,
        }

    def describe(self, url: str) -> str:
        """Human readable one-line report."""
        return " ".join(
            [
                f"Axe scan completed for {url}.",
                f"Violations: {self.violations}.",
                f"Passed rules: {self.passes}.",
                f"Incomplete checks: {self.incomplete}.",
                f"Inapplicable rules: {self.inapplicable}.",
            ]
        )


@dataclass(frozen=True)
class ScanResult:
    """Raw axe analysis plus its derived summary."""

    url: str
    analysis: dict[str, Any]

    @property
    def summary(self) -> ScanSummary:
        return ScanSummary.from_analysis(self.analysis)

"""Immutable axe-core run configuration built from a scan request.

``build_run_config`` folds ``CONFIG_STEPS`` over an empty ``AxeRunConfig``.
The step order is the precedence order:

1. rule selection (explicit rule ids beat tags)
2. disabled rules (always win over the selection)
3. include / exclude selectors
4. legacy mode
5. raw ``axeOptions``, merged last
"""

from collections.abc import Callable, Mapping
from dataclasses import dataclass, field, replace
from functools import reduce
from types import MappingProxyType
from typing import Any

from .models import ScanRequest

SAME_ORIGIN = "<same_origin>"
ALL_ORIGINS = "<unsafe_all_origins>"


@dataclass(frozen=True)
class RunOnly:
    """``runOnly`` selector: either explicit rule ids or tags."""

    type: str
    values: tuple[str, ...]


@dataclass(frozen=True)
class AxeRunConfig:
    """Arguments for ``axe.run`` and ``axe.configure``.

    ``legacy_mode`` is applied through ``axe.configure({allowedOrigins})``
    rather than a separate runner. ``True`` restricts axe to same-origin
    frames, so cross-origin iframes are left untested. ``False`` lets axe
    message frames of any origin. ``None`` keeps the engine default.
    """

    run_only: RunOnly | None = None
    disabled_rules: tuple[str, ...] = ()
    include: tuple[str, ...] = ()
    exclude: tuple[str, ...] = ()
    legacy_mode: bool | None = None
    extra_options: Mapping[str, Any] = field(default_factory=lambda: MappingProxyType({}))

    def context(self) -> dict[str, Any] | None:
        """The axe context, or None to scan the whole document."""
        if not self.include and not self.exclude:
            return None
        context: dict[str, Any] = {}
        if self.include:
            context["include"] = list(self.include)
        if self.exclude:
            context["exclude"] = list(self.exclude)
        return context

    def options(self) -> dict[str, Any]:
        options: dict[str, Any] = {}
        if self.run_only is not None:
            options["runOnly"] = {"type": self.run_only.type, "values": list(self.run_only.values)}
        if self.disabled_rules:
            options["rules"] = {rule: {"enabled": False} for rule in self.disabled_rules}
        options.update(self.extra_options)
        return options

    def allowed_origins(self) -> list[str] | None:
        """Frame origins for ``axe.configure``; None leaves the engine default."""
        if self.legacy_mode is None:
            return None
        return [SAME_ORIGIN] if self.legacy_mode else [ALL_ORIGINS]

    def selects_nothing(self) -> bool:
        """True when the final ``runOnly`` is a rule list with no rules left."""
        run_only = self.options().get("runOnly")
        if not isinstance(run_only, dict) or run_only.get("type") not in ("rule", "rules"):
            return False
        return run_only.get("values") == []


ConfigStep = Callable[[AxeRunConfig, ScanRequest], AxeRunConfig]


def select_rules(config: AxeRunConfig, request: ScanRequest) -> AxeRunConfig:
    if request.run_only_rules:
        return replace(config, run_only=RunOnly("rule", tuple(request.run_only_rules)))
    if request.tags:
        return replace(config, run_only=RunOnly("tag", tuple(request.tags)))
    return config


def disable_rules(config: AxeRunConfig, request: ScanRequest) -> AxeRunConfig:
    if not request.disable_rules:
        return config
    disabled = tuple(dict.fromkeys(request.disable_rules))
    run_only = config.run_only
    if run_only is not None and run_only.type == "rule":
        kept = tuple(rule for rule in run_only.values if rule not in disabled)
        run_only = RunOnly("rule", kept)
    return replace(config, run_only=run_only, disabled_rules=disabled)


def scope_selectors(config: AxeRunConfig, request: ScanRequest) -> AxeRunConfig:
    include = config.include + tuple(request.include_selectors or ())
    exclude = config.exclude + tuple(request.exclude_selectors or ())
    return replace(config, include=include, exclude=exclude)


def set_legacy_mode(config: AxeRunConfig, request: ScanRequest) -> AxeRunConfig:
    if request.legacy_mode is None:
        return config
    return replace(config, legacy_mode=request.legacy_mode)


def merge_options(config: AxeRunConfig, request: ScanRequest) -> AxeRunConfig:
    if not request.axe_options:
        return config
    merged = {**config.extra_options, **request.axe_options}
    return replace(config, extra_options=MappingProxyType(merged))


CONFIG_STEPS: tuple[ConfigStep, ...] = (
    select_rules,
    disable_rules,
    scope_selectors,
    set_legacy_mode,
    merge_options,
)


def build_run_config(
    request: ScanRequest,
    steps: tuple[ConfigStep, ...] = CONFIG_STEPS,
) -> AxeRunConfig:
    """Apply each configuration step in order to an empty base config."""
    return reduce(lambda config, step: step(config, request), steps, AxeRunConfig())

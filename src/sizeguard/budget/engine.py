"""
Bundle Size Enforcement.

Runs once per completed build: every emitted artifact that is not excluded
by extension is resolved against the budget rules, measured when a rule
applies, and yields at most one diagnostic.
"""

from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterable, List, Optional, Union

from loguru import logger

from sizeguard.exceptions import ProbeIOError
from sizeguard.schemas import BundleConfig
from .config import EnforcementOptions, get_options
from .diagnostics import (
    CONFIG_AMBIGUITY,
    MISSING_CONFIG,
    PROBE_IO,
    SIZE_EXCEEDED,
    Diagnostic,
    DiagnosticKind,
    DiagnosticSink,
    emit,
)
from .matcher import BundleMatcher, MatchKind
from .probe import FileSizeProbe, SizeProbe
from .units import format_size


@dataclass
class ArtifactOutcome:
    """Result of evaluating one artifact."""

    file_name: str
    status: str  # "ok", "exceeded", "ambiguous", "missing", "probe_error"
    rule: Optional[str] = None
    size_in_bytes: Optional[int] = None
    diagnostic: Optional[Diagnostic] = None

    def to_dict(self) -> dict:
        return {
            "file": self.file_name,
            "status": self.status,
            "rule": self.rule,
            "size_in_bytes": self.size_in_bytes,
            "diagnostic": self.diagnostic.to_dict() if self.diagnostic else None,
        }


@dataclass
class EnforcementReport:
    """Everything one enforcement run decided, in artifact order."""

    outcomes: List[ArtifactOutcome] = field(default_factory=list)
    excluded: List[str] = field(default_factory=list)

    def count(self, status: str) -> int:
        return sum(1 for outcome in self.outcomes if outcome.status == status)

    @property
    def diagnostics(self) -> List[Diagnostic]:
        return [o.diagnostic for o in self.outcomes if o.diagnostic is not None]

    @property
    def has_errors(self) -> bool:
        return any(d.is_error for d in self.diagnostics)

    def to_dict(self) -> dict:
        return {
            "artifacts_seen": len(self.outcomes) + len(self.excluded),
            "artifacts_excluded": len(self.excluded),
            "within_budget": self.count("ok"),
            "exceeded": self.count("exceeded"),
            "ambiguous": self.count("ambiguous"),
            "missing": self.count("missing"),
            "probe_failures": self.count("probe_error"),
            "outcomes": [o.to_dict() for o in self.outcomes],
            "excluded": list(self.excluded),
        }


def size_exceeded_message(file_name: str, size: str, limit: str) -> str:
    return "\n".join([
        "Bundle size exceeded.",
        f"Bundle name:  {file_name}",
        f"Bundle size:  {size}",
        f"Bundle limit: {limit}",
    ])


class EnforcementEngine:
    """
    Enforces bundle size budgets for one build.

    The rule set is compiled when the engine is created; create one engine
    per build and call run() with the emitted artifact names.
    """

    def __init__(
        self,
        config: BundleConfig,
        options: Optional[EnforcementOptions] = None,
        probe: Optional[SizeProbe] = None,
    ):
        """
        Initialize engine.

        Args:
            config: Budget rules for this build
            options: Enforcement options (uses global if None)
            probe: Size probe (stats files on disk if None)
        """
        self.config = config
        self.options = options or get_options()
        self.probe = probe or FileSizeProbe()
        self.matcher = BundleMatcher(config.bundles)

    def evaluate(self, file_name: str, output_dir: Union[str, Path]) -> ArtifactOutcome:
        """
        Decide the outcome for a single artifact.

        Never raises for probe failures; they become an error outcome.
        """
        match = self.matcher.resolve(file_name)

        if match.kind is MatchKind.AMBIGUOUS:
            patterns = ", ".join(f'"{name}"' for name in match.candidates)
            return ArtifactOutcome(
                file_name=file_name,
                status="ambiguous",
                diagnostic=Diagnostic(
                    kind=DiagnosticKind.ERROR,
                    message=f'File "{file_name}" matches multiple patterns: {patterns}',
                    file_name=file_name,
                    code=CONFIG_AMBIGUITY,
                ),
            )

        if match.kind is MatchKind.MISSING:
            kind = DiagnosticKind.ERROR if self.options.enforce_for_all_bundles else DiagnosticKind.WARNING
            return ArtifactOutcome(
                file_name=file_name,
                status="missing",
                diagnostic=Diagnostic(
                    kind=kind,
                    message=f"No config entry for {file_name}",
                    file_name=file_name,
                    code=MISSING_CONFIG,
                ),
            )

        rule = match.rule
        try:
            size = self.probe.measure(file_name, output_dir)
        except (ProbeIOError, OSError) as e:
            error = e if isinstance(e, ProbeIOError) else ProbeIOError(file_name, str(e))
            logger.warning(str(error))
            return ArtifactOutcome(
                file_name=file_name,
                status="probe_error",
                rule=rule.name,
                diagnostic=Diagnostic(
                    kind=DiagnosticKind.ERROR,
                    message=str(error),
                    file_name=file_name,
                    code=PROBE_IO,
                ),
            )

        if size > rule.max_size_in_bytes:
            return ArtifactOutcome(
                file_name=file_name,
                status="exceeded",
                rule=rule.name,
                size_in_bytes=size,
                diagnostic=Diagnostic(
                    kind=DiagnosticKind.ERROR,
                    message=size_exceeded_message(file_name, format_size(size, rule.unit), rule.max_size),
                    file_name=file_name,
                    code=SIZE_EXCEEDED,
                ),
            )

        logger.debug(f"{file_name}: {size} bytes within '{rule.name}' limit of {rule.max_size}")
        return ArtifactOutcome(file_name=file_name, status="ok", rule=rule.name, size_in_bytes=size)

    def run(
        self,
        assets: Iterable[str],
        output_dir: Union[str, Path],
        sink: DiagnosticSink,
        workers: int = 1,
    ) -> EnforcementReport:
        """
        Enforce budgets over the emitted artifacts.

        Args:
            assets: Emitted artifact names (a mapping iterates its keys)
            output_dir: Directory the artifacts were written to
            sink: Host-owned diagnostics sink, appended to only
            workers: Evaluate artifacts on this many threads (1 = inline)

        Returns:
            EnforcementReport with one outcome per evaluated artifact
        """
        report = EnforcementReport()
        names: List[str] = []
        for name in assets:
            if self.options.is_excluded(name):
                report.excluded.append(name)
            else:
                names.append(name)

        if workers > 1 and len(names) > 1:
            with ThreadPoolExecutor(max_workers=min(workers, len(names))) as executor:
                # map() yields in submission order
                outcomes = list(executor.map(lambda name: self.evaluate(name, output_dir), names))
        else:
            outcomes = [self.evaluate(name, output_dir) for name in names]

        for outcome in outcomes:
            report.outcomes.append(outcome)
            if outcome.diagnostic is not None:
                emit(sink, outcome.diagnostic)

        self.log_summary(report)
        return report

    def log_summary(self, report: EnforcementReport) -> None:
        """Log enforcement summary."""
        stats = report.to_dict()
        if report.excluded:
            logger.debug(f"Excluded {stats['artifacts_excluded']} artifact(s) by extension")

        problems = stats["exceeded"] + stats["ambiguous"] + stats["probe_failures"]
        if problems:
            logger.warning(
                f"{problems} artifact(s) failed budget checks "
                f"({stats['exceeded']} over budget, {stats['ambiguous']} ambiguous, "
                f"{stats['probe_failures']} unmeasurable)"
            )
        logger.info(
            f"Checked {len(report.outcomes)} artifact(s): "
            f"{stats['within_budget']} within budget, {stats['missing']} without config"
        )

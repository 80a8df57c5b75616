"""Caller-owned orchestrator state."""

from dataclasses import dataclass, field

from tourweather.models.forecast import PipelineResult


@dataclass
class OrchestratorState:
    data: list[PipelineResult] = field(default_factory=list)
    loading: bool = False
    error: str = ""

    def begin(self) -> None:
        """Enter a run. A previous result stays visible; only its error is cleared."""
        if self.data:
            self.error = ""
        else:
            self.data = []
            self.loading = True
            self.error = ""

    def succeed(self, data: list[PipelineResult]) -> None:
        self.data = data
        self.loading = False
        self.error = ""

    def fail(self, message: str) -> None:
        """Keep the previous data and surface a single error message."""
        self.loading = False
        self.error = message

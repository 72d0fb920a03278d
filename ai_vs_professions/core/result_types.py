"""Data contracts shared by the services, the orchestrator and the HTTP adapter.

Architectural role:
    - `AnalysisResult`: validated, immutable verdict produced by the analysis service.
    - `ImageOutcome`: explicit three-state illustration value (pending, unavailable,
      ready) so the UI never has to infer a stuck call from a missing image.
    - `ViewState`: immutable snapshot of the UI state container owned by
      `ai_vs_professions.core.engine.Orchestrator`.

Determinism:
    The types are purely structural; snapshots are rebuilt on every transition and
    never mutated in place.
"""

from dataclasses import dataclass
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, StrictBool, StrictStr


class AnalysisResult(BaseModel):
    """Replaceability verdict for one profession.

    Attributes:
        replaceable: Whether AI is judged able to replace the profession.
        explanation: Human-readable rationale; tone depends on `replaceable`.
        image_prompt: Picture description fed verbatim to the image service.
            Serialized as `imagePrompt` on the wire.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    replaceable: StrictBool
    explanation: StrictStr
    image_prompt: StrictStr = Field(alias="imagePrompt")


PENDING = "pending"
UNAVAILABLE = "unavailable"
READY = "ready"


@dataclass(frozen=True)
class ImageOutcome:
    """Illustration status tied to the current analysis result."""

    status: str
    data_uri: str | None = None

    @classmethod
    def pending(cls) -> "ImageOutcome":
        return cls(PENDING)

    @classmethod
    def unavailable(cls) -> "ImageOutcome":
        return cls(UNAVAILABLE)

    @classmethod
    def ready(cls, data_uri: str) -> "ImageOutcome":
        return cls(READY, data_uri)

    @property
    def is_pending(self) -> bool:
        return self.status == PENDING

    @property
    def is_ready(self) -> bool:
        return self.status == READY


@dataclass(frozen=True)
class ViewState:
    """Snapshot of everything the page renders.

    Attributes:
        profession: Last submitted profession text (empty before the first run).
        loading: True while a pipeline run is in flight.
        error: Fixed user-facing message after an analysis failure.
        result: Analysis verdict of the latest run, if any.
        image: Illustration outcome; `None` until the analysis has succeeded.
        sequence: Run number that produced this snapshot (0 before any run).
    """

    profession: str = ""
    loading: bool = False
    error: str | None = None
    result: AnalysisResult | None = None
    image: ImageOutcome | None = None
    sequence: int = 0

    @property
    def phase(self) -> str:
        if self.error is not None:
            return "failed"
        if self.loading:
            return "loading"
        if self.result is not None:
            return "success"
        return "idle"

    def to_dict(self) -> dict[str, Any]:
        result = None
        if self.result is not None:
            result = self.result.model_dump(by_alias=True)

        image = None
        if self.image is not None:
            image = {"status": self.image.status, "dataUri": self.image.data_uri}

        return {
            "phase": self.phase,
            "profession": self.profession,
            "loading": self.loading,
            "error": self.error,
            "result": result,
            "image": image,
            "sequence": self.sequence,
        }

"""Analysis session: the state behind one interactive user.

Holds the current transcript, whether an analysis is in flight, and the last
result or error. Only the most recently issued analysis may change the
result/error; an older call that completes late is discarded.
"""

import logging
import threading
from dataclasses import dataclass
from typing import Optional, Protocol

from contracts import AnalysisResult
from exceptions import AnalysisError

logger = logging.getLogger(__name__)

GENERIC_ERROR_MESSAGE = "Failed to analyze transcript. Please check your API key and try again."


class TranscriptAnalyzer(Protocol):
    def analyze(self, transcript: str) -> AnalysisResult:
        ...


@dataclass(frozen=True)
class SessionState:
    """Immutable view of the session for rendering."""
    transcript: str
    is_analyzing: bool
    result: Optional[AnalysisResult]
    error: Optional[str]


class AnalysisSession:
    """Owns transcript, in-progress flag and result-or-error for one user.

    Thread-safe: state changes happen under a lock, the analyzer call does
    not. Each call to ``analyze`` takes a generation number; a completion is
    applied only if no newer call has been issued since.
    """

    def __init__(self, analyzer: TranscriptAnalyzer):
        self.analyzer = analyzer
        self.transcript = ""
        self.is_analyzing = False
        self.result: Optional[AnalysisResult] = None
        self.error: Optional[str] = None
        self._generation = 0
        self._lock = threading.Lock()

    def set_transcript(self, transcript: str) -> None:
        with self._lock:
            self.transcript = transcript

    def snapshot(self) -> SessionState:
        with self._lock:
            return SessionState(
                transcript=self.transcript,
                is_analyzing=self.is_analyzing,
                result=self.result,
                error=self.error,
            )

    def analyze(self, transcript: Optional[str] = None) -> bool:
        """Analyze the given transcript, or the stored one.

        An empty or whitespace-only transcript is a no-op: no call is made
        and no state changes.

        Returns:
            True if this call's outcome (result or error) was applied,
            False for a no-op or a stale completion.
        """
        with self._lock:
            if transcript is not None:
                self.transcript = transcript
            text = self.transcript
            if not text.strip():
                return False
            self._generation += 1
            generation = self._generation
            self.is_analyzing = True
            self.error = None

        try:
            result = self.analyzer.analyze(text)
        except AnalysisError as e:
            logger.error("Analysis %d failed: %s", generation, e)
            return self._complete(generation, error=GENERIC_ERROR_MESSAGE)
        except Exception:
            logger.exception("Analysis %d failed unexpectedly", generation)
            return self._complete(generation, error=GENERIC_ERROR_MESSAGE)
        return self._complete(generation, result=result)

    def _complete(
        self,
        generation: int,
        result: Optional[AnalysisResult] = None,
        error: Optional[str] = None,
    ) -> bool:
        with self._lock:
            if generation != self._generation:
                logger.debug(
                    "Discarding stale analysis %d (latest is %d)", generation, self._generation
                )
                return False
            if error is not None:
                # Prior result stays on screen
                self.error = error
            else:
                self.result = result
                self.error = None
            self.is_analyzing = False
            return True

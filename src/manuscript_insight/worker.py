"""Background worker channel.

A request is a plain mapping::

    {"chapter": {"id": ..., "content": ..., "wordCount": ..., "sections": [...]},
     "options": {"domain": "thriller"}}

and every reply is a plain JSON-compatible dict: any number of
``{"type": "progress", "step", "detail"}`` messages followed by exactly one
terminal ``{"type": "complete", "result"}`` or ``{"type": "error", "error",
"details"}`` message.
"""

import logging
import queue
import threading
import traceback
from collections.abc import Mapping
from typing import Any, Callable, Dict, Iterator, Optional

from .engine import AnalysisEngine, Stage
from .models import ManuscriptInput, Section, count_words, report_to_dict

logger = logging.getLogger(__name__)

Message = Dict[str, Any]
Post = Callable[[Message], None]

DEFAULT_DOMAIN = "general"
TERMINAL_TYPES = ("complete", "error")


def serialize_error(err: Any) -> Dict[str, Any]:
    """Convert any raised value into a plain dict.

    Exceptions become ``{name, message, stack, cause}``; mappings are
    shallow-copied; ``None`` becomes ``{"message": "Unknown error"}``.
    """
    if isinstance(err, BaseException):
        cause = err.__cause__
        return {
            "name": type(err).__name__,
            "message": str(err) or repr(err),
            "stack": "".join(traceback.format_exception(type(err), err, err.__traceback__)),
            "cause": serialize_error(cause) if cause is not None else None,
        }
    if isinstance(err, Mapping):
        return dict(err)
    if err is None:
        return {"message": "Unknown error"}
    return {"message": str(err)}


def _progress(step: str, detail: str) -> Message:
    return {"type": "progress", "step": step, "detail": detail}


def parse_request(request: Mapping) -> ManuscriptInput:
    """Build the manuscript input from a worker request.

    Raises:
        InvalidManuscriptError: If the chapter content or sections are invalid
        KeyError: If the request has no chapter
    """
    chapter = request["chapter"]
    options = request.get("options") or {}
    content = chapter.get("content", "")
    word_count = chapter.get("wordCount")
    if word_count is None:
        word_count = count_words(content) if isinstance(content, str) else 0
    sections = tuple(
        Section(
            heading=s.get("heading", ""),
            start_index=s.get("startPosition", 0),
            end_index=s.get("endPosition", 0),
        )
        for s in chapter.get("sections") or ()
    )
    return ManuscriptInput(
        id=str(chapter.get("id", "")),
        content=content,
        word_count=word_count,
        sections=sections,
        genre=options.get("domain") or DEFAULT_DOMAIN,
    )


class _PostingObserver:
    """Forwards engine stages to the channel as progress messages."""

    def __init__(self, post: Post):
        self._post = post

    def on_stage(self, stage: Stage, detail: str) -> None:
        self._post(_progress(stage.value, detail))

    def on_failure(self, stage: Stage, error: BaseException) -> None:
        logger.debug(f"Worker run failed at stage {stage.value}: {error}")


def handle_request(request: Mapping, post: Post, engine: Optional[AnalysisEngine] = None) -> None:
    """Run one analysis request, posting every message through ``post``.

    Never raises for analysis failures: they are reported as a terminal
    error message.
    """
    engine = engine or AnalysisEngine()
    post(_progress(Stage.RECEIVED.value, Stage.RECEIVED.detail))

    try:
        post(_progress("analysis-start", "Starting analysis pipeline"))
        manuscript = parse_request(request)
        report = engine.analyze_manuscript(manuscript, observer=_PostingObserver(post))
        post(_progress("analysis-complete", "Analysis complete"))
        post({"type": "complete", "result": report_to_dict(report)})
    except Exception as e:
        details = serialize_error(e)
        logger.error(f"Worker analysis error: {details['name']}: {details['message']}")
        post(
            {
                "type": "error",
                "error": details.get("message") or details.get("name") or "Unknown analysis error",
                "details": details,
            }
        )


class AnalysisWorker:
    """Runs requests off the calling thread and streams their messages.

    Example:
        >>> worker = AnalysisWorker()
        >>> for message in worker.messages({"chapter": {"id": "c1", "content": text}}):
        ...     print(message["type"])
    """

    def __init__(self, engine: Optional[AnalysisEngine] = None):
        self.engine = engine or AnalysisEngine()

    def submit(self, request: Mapping) -> "queue.Queue[Message]":
        """Start a request on a daemon thread; messages arrive on the returned queue."""
        channel: "queue.Queue[Message]" = queue.Queue()
        thread = threading.Thread(
            target=handle_request,
            args=(request, channel.put, self.engine),
            name="manuscript-analysis",
            daemon=True,
        )
        thread.start()
        return channel

    def messages(self, request: Mapping) -> Iterator[Message]:
        """Yield every message for ``request``, ending with the terminal one."""
        channel = self.submit(request)
        while True:
            message = channel.get()
            yield message
            if message["type"] in TERMINAL_TYPES:
                return

"""RenderAPI — background QR rendering for the PySide6 GUI.

Rasterising a large PSBT can take noticeable time, so rendering runs on a
``QThreadPool`` thread via ``RenderWorker``. Each request carries a token from
:class:`RequestSequencer`; results arriving for a superseded token are
dropped, so an older render can never overwrite a newer one.

    ┌─────────────┐  generate()  ┌───────────┐  run()   ┌──────────────┐
    │  Composer    │ ──────────► │ RenderAPI │ ───────► │ RenderWorker │
    │  panel       │ ◄────────── │ (tokens)  │ ◄─────── │ (pool thread)│
    └─────────────┘   signals    └───────────┘ signals  └──────────────┘
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from PySide6.QtCore import QObject, QRunnable, QThreadPool, Signal, Slot

from btc_qr.errors.qr_errors import QRError
from btc_qr.render.qr import MSG_FAILED
from btc_qr.render.sequencer import RequestSequencer

if TYPE_CHECKING:
    from btc_qr.encoders.results import EncodeResult
    from btc_qr.render.export import ExportMode
    from btc_qr.render.qr import ErrorCorrection
    from btc_qr.render.service import QRService

logger = logging.getLogger(__name__)


class _WorkerSignals(QObject):
    """Signals emitted by ``RenderWorker``."""

    finished = Signal(int, object)  # token, QRImage
    error = Signal(int, str)  # token, user-facing message


class RenderWorker(QRunnable):
    """Render one payload on a ``QThreadPool`` thread."""

    def __init__(
        self,
        token: int,
        service: QRService,
        mode: ExportMode,
        result: EncodeResult,
        error_correction: ErrorCorrection,
    ) -> None:
        super().__init__()
        self.token = token
        self._service = service
        self._mode = mode
        self._result = result
        self._error_correction = error_correction
        self.signals = _WorkerSignals()
        self.setAutoDelete(True)

    @Slot()
    def run(self) -> None:
        """Execute the render (called by QThreadPool)."""
        try:
            image = self._service.generate(self._mode, self._result, self._error_correction)
        except QRError as exc:
            self.signals.error.emit(self.token, exc.message)
            return
        except Exception:
            logger.exception("Unexpected failure rendering %s QR", self._mode)
            self.signals.error.emit(self.token, MSG_FAILED)
            return
        self.signals.finished.emit(self.token, image)


class RenderAPI(QObject):
    """Single-slot render queue for one composer panel.

    Signals:
        image_ready(object)  — the latest ``QRImage``
        render_failed(str)   — message for the latest request's failure
    """

    image_ready = Signal(object)
    render_failed = Signal(str)

    def __init__(
        self,
        service: QRService,
        parent: QObject | None = None,
        *,
        pool: QThreadPool | None = None,
    ) -> None:
        super().__init__(parent)
        self._service = service
        self._pool = pool or QThreadPool.globalInstance()
        self._sequencer = RequestSequencer()

    @property
    def service(self) -> QRService:
        return self._service

    def generate(
        self,
        mode: ExportMode,
        result: EncodeResult,
        error_correction: ErrorCorrection,
    ) -> int:
        """Queue a render and return its token."""
        token = self._sequencer.begin()
        worker = RenderWorker(token, self._service, mode, result, error_correction)
        worker.signals.finished.connect(self._on_finished)
        worker.signals.error.connect(self._on_error)
        self._pool.start(worker)
        return token

    def invalidate(self) -> None:
        """Drop the result of any render still in flight."""
        self._sequencer.invalidate()

    @Slot(int, object)
    def _on_finished(self, token: int, image: object) -> None:
        if self._sequencer.accept(token):
            self.image_ready.emit(image)

    @Slot(int, str)
    def _on_error(self, token: int, message: str) -> None:
        if self._sequencer.accept(token):
            self.render_failed.emit(message)

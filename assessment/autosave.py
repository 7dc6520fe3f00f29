# assessment/autosave.py
import logging
import threading
from config import Config
from questions.sections import get_section

logger = logging.getLogger(__name__)


class ProgressGateway:
    """
    Saves and loads the partial answers of one section.

    Saving is advisory: any failure is logged and reported as ``False``,
    never raised to the caller.
    """

    def __init__(self, client, section):
        self.client = client
        self.section = get_section(section)

    def save(self, snapshot):
        try:
            self.client.save_progress(self.section.name, snapshot['answers'], snapshot['currentIndex'])
            logger.info(f"💾 Autosaved {len(snapshot['answers'])} answers for {self.section.name}")
            return True
        except Exception as e:
            logger.warning(f"⚠️ Progress save failed for {self.section.name}: {e}")
            return False

    def load(self):
        """Saved snapshot for this section, or None when nothing usable exists."""
        try:
            test = self.client.get_or_create_test() or {}
        except Exception as e:
            logger.warning(f"⚠️ Could not load saved progress for {self.section.name}: {e}")
            return None

        saved = (test.get('progress') or {}).get(self.section.name)
        if not saved or not saved.get('responses'):
            return None
        return {
            'answers': saved['responses'],
            'currentIndex': saved.get('currentQuestionIndex', 0),
        }


class AutosaveTimer:
    """
    Periodically saves a TestSessionState through a ProgressGateway.

    A tick only saves when the answers changed since the last successful
    save (``watermark`` holds the accumulator revision saved last). Ticks and
    manual saves share one lock, and ``stop()`` waits for a running tick.
    """

    def __init__(self, gateway, state, interval=None):
        self.gateway = gateway
        self.state = state
        self.interval = interval if interval is not None else Config.AUTOSAVE_INTERVAL_SECONDS
        self.watermark = state.accumulator.revision
        self.saved_count = len(state.accumulator)
        self.save_attempts = 0
        self._lock = threading.Lock()
        self._timer = None
        self._running = False

    @property
    def running(self):
        return self._running

    def mark_saved(self):
        """Treat the current answers as already persisted (e.g. just restored)."""
        with self._lock:
            self.watermark = self.state.accumulator.revision
            self.saved_count = len(self.state.accumulator)

    def is_dirty(self):
        return self.state.accumulator.revision != self.watermark

    def start(self):
        with self._lock:
            if self._running:
                return
            self._running = True
            self._schedule()
        logger.debug(f"Autosave started for {self.gateway.section.name} every {self.interval}s")

    def _schedule(self):
        self._timer = threading.Timer(self.interval, self._tick)
        self._timer.daemon = True
        self._timer.start()

    def _tick(self):
        with self._lock:
            if not self._running:
                return
            self._save_locked()
            if self._running:
                self._schedule()

    def _save_locked(self):
        if not self.is_dirty():
            return False
        revision = self.state.accumulator.revision
        count = len(self.state.accumulator)
        self.save_attempts += 1
        if self.gateway.save(self.state.snapshot()):
            self.watermark = revision
            self.saved_count = count
            return True
        return False

    def save_if_dirty(self):
        """Save now if anything changed; returns whether a save succeeded."""
        with self._lock:
            return self._save_locked()

    def stop(self):
        """Cancel future ticks; waits for an in-flight tick to finish."""
        with self._lock:
            self._running = False
            timer, self._timer = self._timer, None
        if timer is not None:
            timer.cancel()
            if timer is not threading.current_thread():
                timer.join()

    def __enter__(self):
        self.start()
        return self

    def __exit__(self, exc_type, exc, tb):
        self.stop()
        return False

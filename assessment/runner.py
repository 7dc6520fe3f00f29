# assessment/runner.py
import logging
from assessment.autosave import AutosaveTimer, ProgressGateway
from assessment.errors import FailureKind
from assessment.session_state import TestSessionState, TestPhase
from assessment.submission import SubmissionPipeline, RetryPolicy

logger = logging.getLogger(__name__)


class TestRunner:
    """Drives one section from instructions to results for a signed-in user."""

    __test__ = False

    def __init__(self, app_state, section, autosave_interval=None, retry_policy=None,
                 remote_validation=True):
        self.app_state = app_state
        self.state = TestSessionState(section)
        self.gateway = ProgressGateway(app_state.client, self.state.section)
        self.autosave_interval = autosave_interval
        self.retry_policy = retry_policy or RetryPolicy()
        self.remote_validation = remote_validation
        self.autosave = None
        self.pipeline = None

    def begin(self):
        """Load saved progress, start the test and the autosave timer."""
        restored = self.state.restore(self.gateway.load())
        self.state.start()
        self.autosave = AutosaveTimer(self.gateway, self.state, self.autosave_interval)
        self.pipeline = SubmissionPipeline(
            self.app_state.client, self.state, self.autosave,
            retry_policy=self.retry_policy, remote_validation=self.remote_validation,
        )
        self.autosave.start()
        return restored

    def answer(self, value, question_id=None):
        self.state.answer(value, question_id)

    def toggle_review(self, question_id=None):
        return self.state.toggle_review(question_id)

    def save_and_exit(self):
        """Stop autosave, then make at most one final save."""
        if self.state.phase in (TestPhase.SUBMITTING, TestPhase.RESULTS):
            # the submission owns the answers now
            if self.autosave is not None:
                self.autosave.stop()
            return False
        if self.autosave is not None:
            self.autosave.stop()
            saved = self.autosave.save_if_dirty()
        else:
            saved = self.gateway.save(self.state.snapshot()) if len(self.state.accumulator) else False
        if self.state.phase != TestPhase.EXITED:
            self.state.exit()
        return saved

    def submit(self):
        outcome = self.pipeline.submit()
        self._after(outcome)
        return outcome

    def retry(self):
        outcome = self.pipeline.retry()
        self._after(outcome)
        return outcome

    def _after(self, outcome):
        if outcome.failure == FailureKind.AUTHENTICATION:
            self.app_state.sign_out()

    def close(self):
        if self.autosave is not None:
            self.autosave.stop()

    def __enter__(self):
        self.begin()
        return self

    def __exit__(self, exc_type, exc, tb):
        self.close()
        return False

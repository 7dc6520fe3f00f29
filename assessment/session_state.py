# assessment/session_state.py
import logging
import math
import time
from enum import Enum
from assessment.responses import ResponseAccumulator, ReviewMarkers

logger = logging.getLogger(__name__)


class SessionStatus(Enum):
    NOT_STARTED = 'not_started'
    IN_PROGRESS = 'in_progress'
    SUBMITTED = 'submitted'


class TestPhase(Enum):
    __test__ = False

    INSTRUCTIONS = 'instructions'
    TEST = 'test'
    SUBMITTING = 'submitting'
    RESULTS = 'results'
    EXITED = 'exited'


class InvalidTransitionError(RuntimeError):
    pass


TRANSITIONS = {
    TestPhase.INSTRUCTIONS: {TestPhase.TEST, TestPhase.EXITED},
    TestPhase.TEST: {TestPhase.SUBMITTING, TestPhase.EXITED},
    TestPhase.SUBMITTING: {TestPhase.RESULTS, TestPhase.TEST},
    TestPhase.RESULTS: set(),
    TestPhase.EXITED: set(),
}


class TestSessionState:
    """
    Everything the active test screen owns for one section: position,
    answers, review markers, timing and the screen phase.
    """

    # keep pytest from collecting this as a test class
    __test__ = False

    def __init__(self, section, clock=time.monotonic):
        self.accumulator = ResponseAccumulator(section, ReviewMarkers())
        self.section = self.accumulator.section
        self.current_index = 0
        self.status = SessionStatus.NOT_STARTED
        self.phase = TestPhase.INSTRUCTIONS
        self._clock = clock
        self._started_at = None
        self._elapsed = 0.0

    @property
    def markers(self):
        return self.accumulator.markers

    @property
    def question_count(self):
        return len(self.section)

    @property
    def current_question(self):
        return self.section.questions[self.current_index]

    # -------------------------
    # Phase machine
    # -------------------------
    def transition(self, phase):
        if phase not in TRANSITIONS[self.phase]:
            raise InvalidTransitionError(f"Cannot move from {self.phase.value} to {phase.value}")
        logger.debug(f"{self.section.name}: {self.phase.value} -> {phase.value}")
        self.phase = phase

    def start(self):
        self.transition(TestPhase.TEST)
        self.status = SessionStatus.IN_PROGRESS
        self._started_at = self._clock()

    def begin_submission(self):
        self.transition(TestPhase.SUBMITTING)

    def submission_failed(self):
        self.transition(TestPhase.TEST)

    def complete(self):
        self.transition(TestPhase.RESULTS)
        self._elapsed = self.elapsed_seconds()
        self._started_at = None
        self.status = SessionStatus.SUBMITTED

    def exit(self):
        self.transition(TestPhase.EXITED)

    # -------------------------
    # Navigation
    # -------------------------
    def go_to(self, index):
        self.current_index = min(max(0, int(index)), self.question_count - 1)
        return self.current_index

    def next(self):
        return self.go_to(self.current_index + 1)

    def previous(self):
        return self.go_to(self.current_index - 1)

    def is_last(self):
        return self.current_index == self.question_count - 1

    # -------------------------
    # Answers
    # -------------------------
    def answer(self, value, question_id=None, advance=True):
        """Record an answer (current question by default) and move on."""
        if self.status == SessionStatus.SUBMITTED:
            raise InvalidTransitionError("Section already submitted")
        if question_id is None:
            question_id = self.current_question.id
        self.accumulator.record(question_id, value)
        if advance and not self.is_last():
            self.next()

    def toggle_review(self, question_id=None):
        if question_id is None:
            question_id = self.current_question.id
        return self.accumulator.toggle_review(question_id)

    # -------------------------
    # Timing
    # -------------------------
    def elapsed_seconds(self):
        if self._started_at is None:
            return self._elapsed
        return self._elapsed + (self._clock() - self._started_at)

    def time_spent_minutes(self):
        return max(1, int(math.ceil(self.elapsed_seconds() / 60)))

    # -------------------------
    # Snapshot
    # -------------------------
    def snapshot(self):
        return {
            'answers': self.accumulator.to_payload(),
            'currentIndex': self.current_index,
        }

    def restore(self, snapshot):
        """Replace answers and position from a saved snapshot; markers stay empty."""
        if not snapshot:
            return False
        self.accumulator = ResponseAccumulator.from_payload(
            self.section, snapshot.get('answers') or {}, ReviewMarkers()
        )
        index = snapshot.get('currentIndex') or 0
        self.current_index = min(max(0, int(index)), self.question_count - 1)
        logger.info(f"🔄 Restored {len(self.accumulator)} answers for {self.section.name} "
                    f"at question {self.current_index + 1}")
        return True

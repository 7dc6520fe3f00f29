# assessment/submission.py
import logging
import re
import threading
import time
from enum import Enum
from config import Config
from services.scoring_service import ScoringService
from services.validation_service import validate_section
from assessment.errors import ApiError, FailureKind, FAILURE_MESSAGES, classify
from assessment.session_state import InvalidTransitionError, TestPhase

logger = logging.getLogger(__name__)

QUESTION_REF = re.compile(r"^Question (\d+)\b")


class PipelineState(Enum):
    IDLE = 'idle'
    VALIDATING = 'validating'
    SUBMITTING = 'submitting'
    COMPLETED = 'completed'
    FAILED = 'failed'


class SubmissionInProgressError(RuntimeError):
    pass


class RetryDecision:
    def __init__(self, should_retry, delay_seconds, action, message):
        self.should_retry = should_retry
        self.delay_seconds = delay_seconds
        self.action = action
        self.message = message

    def __repr__(self):
        return (f"RetryDecision(should_retry={self.should_retry}, "
                f"delay_seconds={self.delay_seconds}, action={self.action!r})")


class RetryPolicy:
    """
    Decides what to do after a failed submission; does not retry by itself.

    Network failures may be retried at once, server failures after a delay
    that doubles with every attempt. Session expiry and rejected answers are
    never retried automatically.
    """

    RESTART_SESSION = 'restart_session'
    RETRY = 'retry'
    RETRY_LATER = 'retry_later'
    REVIEW_ANSWERS = 'review_answers'
    GIVE_UP = 'save_and_exit'

    def __init__(self, max_attempts=None, base_delay=None):
        self.max_attempts = max_attempts if max_attempts is not None else Config.SUBMIT_MAX_ATTEMPTS
        self.base_delay = base_delay if base_delay is not None else Config.SUBMIT_RETRY_DELAY_SECONDS

    def decide(self, failure, attempt):
        message = FAILURE_MESSAGES[failure]

        if failure == FailureKind.AUTHENTICATION:
            return RetryDecision(False, 0, self.RESTART_SESSION, message)
        if failure == FailureKind.VALIDATION_REJECTED:
            return RetryDecision(False, 0, self.REVIEW_ANSWERS, message)

        if attempt >= self.max_attempts:
            return RetryDecision(False, 0, self.GIVE_UP,
                                 "We could not submit your answers. They are kept; "
                                 "please save and try again later.")
        if failure == FailureKind.NETWORK:
            return RetryDecision(True, 0, self.RETRY, message)
        return RetryDecision(True, self.base_delay * 2 ** (attempt - 1), self.RETRY_LATER, message)


class SubmissionOutcome:
    def __init__(self, state, result=None, score=None, errors=None, missing=None,
                 first_incomplete_index=None, failure=None, decision=None,
                 field_errors=None, message=None):
        self.state = state
        self.result = result
        self.score = score
        self.errors = list(errors or [])
        self.missing = list(missing or [])
        self.first_incomplete_index = first_incomplete_index
        self.failure = failure
        self.decision = decision
        self.field_errors = field_errors or {}
        self.message = message

    @property
    def succeeded(self):
        return self.state == PipelineState.COMPLETED

    def summary(self):
        if self.score is None:
            return None
        return self.score.to_dict()


def map_field_errors(section, errors):
    """Attach server error messages to question ids where they name one."""
    mapped = {}
    titles = {q.statement: q.id for q in section.questions if not isinstance(q.id, int)}
    for message in errors or []:
        match = QUESTION_REF.match(str(message))
        question_id = None
        if match and section.has_question(match.group(1)):
            question_id = section.question(match.group(1)).id
        else:
            for title, qid in titles.items():
                if str(message).startswith(title):
                    question_id = qid
                    break
        mapped.setdefault(question_id, []).append(message)
    return mapped


class SubmissionPipeline:
    """
    idle -> validating -> submitting -> completed | failed

    Local validation failures go back to idle with the list of missing
    answers. Autosave is stopped before the final write and never restarted.
    A failure leaves every answer in place; ``retry()`` submits again only
    when the last RetryDecision allows it, after its delay has passed.
    """

    def __init__(self, client, session_state, autosave=None, scoring_service=None,
                 retry_policy=None, remote_validation=True, clock=time.monotonic, sleep=time.sleep):
        self.client = client
        self.session_state = session_state
        self.autosave = autosave
        self.scoring = scoring_service or ScoringService()
        self.retry_policy = retry_policy or RetryPolicy()
        self.remote_validation = remote_validation
        self.state = PipelineState.IDLE
        self.attempts = 0
        self.last_outcome = None
        self._clock = clock
        self._sleep = sleep
        self._retry_not_before = None
        self._lock = threading.Lock()

    @property
    def section(self):
        return self.session_state.section

    def _enter(self, expected):
        with self._lock:
            if self.state in (PipelineState.VALIDATING, PipelineState.SUBMITTING):
                raise SubmissionInProgressError(f"{self.section.name} submission already in progress")
            if self.state not in expected:
                raise InvalidTransitionError(f"Cannot submit from state {self.state.value}")
            if self.session_state.phase != TestPhase.TEST:
                raise InvalidTransitionError(
                    f"Cannot submit {self.section.name} from phase {self.session_state.phase.value}")
            if self.state == PipelineState.FAILED:
                decision = self.last_outcome.decision if self.last_outcome else None
                if decision is None or not decision.should_retry:
                    action = decision.action if decision else 'none'
                    raise InvalidTransitionError(f"Retry not allowed (action: {action})")
            previous = self.state
            self.state = PipelineState.VALIDATING
            return previous

    def submit(self):
        previous = self._enter((PipelineState.IDLE,))
        return self._run(previous)

    def retry(self):
        """Re-run the submission after a retryable failure, waiting out its delay."""
        previous = self._enter((PipelineState.FAILED,))
        remaining = self.retry_wait_seconds()
        if remaining > 0:
            logger.info(f"⏳ Waiting {remaining:.1f}s before retrying {self.section.name}")
            self._sleep(remaining)
        return self._run(previous)

    def retry_wait_seconds(self):
        """Seconds left before the last failure may be retried."""
        if self._retry_not_before is None:
            return 0.0
        return max(0.0, self._retry_not_before - self._clock())

    def can_retry(self):
        decision = self.last_outcome.decision if self.last_outcome else None
        return self.state == PipelineState.FAILED and decision is not None and decision.should_retry

    def reset(self):
        with self._lock:
            if self.state == PipelineState.FAILED:
                self.state = PipelineState.IDLE
                self._retry_not_before = None

    def _finish(self, outcome):
        self.state = outcome.state
        self.last_outcome = outcome
        return outcome

    def _run(self, previous):
        payload = self.session_state.accumulator.to_payload()
        try:
            rejected = self._check(payload)
            if rejected is None:
                self.session_state.begin_submission()
        except Exception:
            self.state = previous
            raise
        if rejected is not None:
            return self._finish(rejected)

        if self.autosave is not None:
            self.autosave.stop()

        self.state = PipelineState.SUBMITTING
        self.attempts += 1
        try:
            result = self.client.submit_section_results(
                self.section.name, payload, self.session_state.time_spent_minutes()
            )
        except ApiError as e:
            return self._failed(e)
        except Exception:
            self.state = PipelineState.FAILED
            self.session_state.submission_failed()
            raise

        score = self.scoring.aggregate(self.section, payload) if self.section.scoring else None
        self.session_state.complete()
        self._retry_not_before = None
        logger.info(f"✅ {self.section.name} submitted after {self.attempts} attempt(s)")
        return self._finish(SubmissionOutcome(PipelineState.COMPLETED, result=result, score=score))

    def _check(self, payload):
        """Outcome sending the user back to editing, or None when the answers may be sent."""
        validation = validate_section(self.section, payload)
        if not validation.is_valid:
            index = self.session_state.accumulator.first_unanswered_index()
            if index is None and validation.invalid:
                index = self.section.index_of(validation.invalid[0])
            logger.info(f"⚠️ {self.section.name} incomplete: {len(validation.missing)} unanswered")
            return SubmissionOutcome(
                PipelineState.IDLE,
                errors=validation.validation_errors,
                missing=validation.missing,
                first_incomplete_index=index,
                message="Please answer all questions before submitting.",
            )

        remote_errors = self._remote_validation(payload)
        if remote_errors:
            return SubmissionOutcome(
                PipelineState.IDLE,
                errors=remote_errors,
                field_errors=map_field_errors(self.section, remote_errors),
                message=FAILURE_MESSAGES[FailureKind.VALIDATION_REJECTED],
            )
        return None

    def _remote_validation(self, payload):
        if not self.remote_validation:
            return []
        try:
            check = self.client.validate_section(self.section.name, payload) or {}
        except ApiError as e:
            # The local check already passed; an unreachable validator does not block
            logger.warning(f"⚠️ Remote validation unavailable for {self.section.name}: {e}")
            return []
        if check.get('isValid', True):
            return []
        return check.get('validationErrors') or []

    def _failed(self, error):
        failure = classify(error)
        decision = self.retry_policy.decide(failure, self.attempts)
        self._retry_not_before = self._clock() + decision.delay_seconds if decision.should_retry else None
        self.session_state.submission_failed()
        logger.error(f"❌ {self.section.name} submission failed ({failure.value}): {error}")
        return self._finish(SubmissionOutcome(
            PipelineState.FAILED,
            errors=error.errors,
            failure=failure,
            decision=decision,
            field_errors=map_field_errors(self.section, error.errors),
            message=decision.message,
        ))

import threading
from unittest.mock import MagicMock

import pytest

from assessment.autosave import AutosaveTimer, ProgressGateway
from assessment.errors import (
    AuthenticationError, FailureKind, NetworkError, ServerError, ValidationRejectedError,
)
from assessment.session_state import TestSessionState, TestPhase, SessionStatus, InvalidTransitionError
from assessment.submission import (
    PipelineState, RetryPolicy, SubmissionInProgressError, SubmissionPipeline, map_field_errors,
)
from questions.sections import get_section
from conftest import complete_responses


def _answered_state(section_name='riasec', skip=()):
    state = TestSessionState(section_name)
    state.start()
    for key, value in complete_responses(section_name).items():
        if key not in skip:
            state.answer(value, key, advance=False)
    return state


@pytest.fixture
def client():
    api = MagicMock()
    api.validate_section.return_value = {'isValid': True, 'validationErrors': []}
    api.submit_section_results.return_value = {'status': 'in_progress', 'completionPercentage': 25}
    return api


def test_incomplete_answers_are_never_sent(client):
    state = _answered_state(skip=('7',))
    outcome = SubmissionPipeline(client, state).submit()

    assert outcome.state == PipelineState.IDLE
    assert outcome.missing == [7]
    assert outcome.errors == ['Question 7 not answered']
    assert outcome.first_incomplete_index == 6
    client.submit_section_results.assert_not_called()
    assert state.phase == TestPhase.TEST


def test_successful_submission(client):
    state = _answered_state()
    pipeline = SubmissionPipeline(client, state)
    outcome = pipeline.submit()

    assert outcome.succeeded
    assert outcome.score.label == 'IAS'
    assert outcome.summary()['ranking'][:3] == ['I', 'A', 'S']
    assert state.status == SessionStatus.SUBMITTED
    assert state.phase == TestPhase.RESULTS
    section, payload, minutes = client.submit_section_results.call_args[0]
    assert section == 'riasec'
    assert len(payload) == 54
    assert minutes == 1


def test_remote_validation_errors_stop_submission(client):
    client.validate_section.return_value = {'isValid': False, 'validationErrors': ['Question 3 looks odd']}
    outcome = SubmissionPipeline(client, _answered_state()).submit()
    assert outcome.state == PipelineState.IDLE
    assert outcome.field_errors == {3: ['Question 3 looks odd']}
    client.submit_section_results.assert_not_called()


def test_unreachable_remote_validation_does_not_block(client):
    client.validate_section.side_effect = NetworkError('offline')
    assert SubmissionPipeline(client, _answered_state()).submit().succeeded


@pytest.mark.parametrize('error, kind, retry', [
    (AuthenticationError('jwt rejected by gateway', 401), FailureKind.AUTHENTICATION, False),
    (NetworkError('timeout'), FailureKind.NETWORK, True),
    (ValidationRejectedError('bad', 400, ['Question 2 not answered']), FailureKind.VALIDATION_REJECTED, False),
    (ServerError('boom', 500), FailureKind.SERVER, True),
])
def test_failures_are_classified_and_state_kept(client, error, kind, retry):
    state = _answered_state()
    before = state.accumulator.answers()
    client.submit_section_results.side_effect = error

    outcome = SubmissionPipeline(client, state).submit()

    assert outcome.state == PipelineState.FAILED
    assert outcome.failure == kind
    assert outcome.decision.should_retry is retry
    assert str(error) not in outcome.message
    assert state.accumulator.answers() == before
    assert state.phase == TestPhase.TEST


def test_rejected_field_errors_are_mapped(client):
    client.submit_section_results.side_effect = ValidationRejectedError(
        'bad', 400, ['Question 2 not answered', 'Something else'])
    outcome = SubmissionPipeline(client, _answered_state()).submit()
    assert outcome.field_errors == {2: ['Question 2 not answered'], None: ['Something else']}


def test_retry_after_failure(client):
    client.submit_section_results.side_effect = [NetworkError('timeout'), {'status': 'in_progress'}]
    pipeline = SubmissionPipeline(client, _answered_state())
    assert pipeline.submit().state == PipelineState.FAILED
    assert pipeline.retry().succeeded
    assert pipeline.attempts == 2


def test_retry_only_from_failed(client):
    pipeline = SubmissionPipeline(client, _answered_state())
    with pytest.raises(InvalidTransitionError):
        pipeline.retry()


def test_duplicate_submit_is_rejected(client):
    state = _answered_state()
    pipeline = SubmissionPipeline(client, state)
    entered = threading.Event()
    release = threading.Event()

    def slow_submit(*args):
        entered.set()
        release.wait(2)
        return {}

    client.submit_section_results.side_effect = slow_submit
    worker = threading.Thread(target=pipeline.submit)
    worker.start()
    assert entered.wait(2)
    with pytest.raises(SubmissionInProgressError):
        pipeline.submit()
    release.set()
    worker.join(2)
    assert pipeline.state == PipelineState.COMPLETED


def test_autosave_stopped_before_final_write(client):
    state = _answered_state()
    autosave = AutosaveTimer(ProgressGateway(client, 'riasec'), state, interval=0.01)
    autosave.start()

    def check_stopped(*args):
        assert not autosave.running
        return {}

    client.submit_section_results.side_effect = check_stopped
    assert SubmissionPipeline(client, state, autosave).submit().succeeded
    assert not autosave.running


def test_retry_policy_decisions():
    policy = RetryPolicy(max_attempts=3, base_delay=2)
    assert policy.decide(FailureKind.SERVER, 1).delay_seconds == 2
    assert policy.decide(FailureKind.SERVER, 2).delay_seconds == 4
    assert policy.decide(FailureKind.NETWORK, 1).action == RetryPolicy.RETRY
    assert policy.decide(FailureKind.NETWORK, 3).should_retry is False
    assert policy.decide(FailureKind.AUTHENTICATION, 1).action == RetryPolicy.RESTART_SESSION


def test_map_field_errors_for_titled_questions():
    section = get_section('personalInsights')
    mapped = map_field_errors(section, ['What are you good at? must be at least 10 characters'])
    assert list(mapped) == ['whatYouAreGoodAt']


def test_retry_waits_out_server_delay(client):
    client.submit_section_results.side_effect = [ServerError('boom', 503), {'status': 'in_progress'}]
    slept = []
    pipeline = SubmissionPipeline(
        client, _answered_state(), retry_policy=RetryPolicy(max_attempts=3, base_delay=2),
        clock=lambda: 100.0, sleep=slept.append,
    )

    outcome = pipeline.submit()
    assert outcome.decision.delay_seconds == 2
    assert pipeline.retry_wait_seconds() == 2
    assert pipeline.retry().succeeded
    assert slept == [2]
    assert pipeline.retry_wait_seconds() == 0


def test_retry_refused_when_decision_says_no(client):
    client.submit_section_results.side_effect = ValidationRejectedError('bad', 400, ['Question 2 not answered'])
    pipeline = SubmissionPipeline(client, _answered_state())
    pipeline.submit()

    assert not pipeline.can_retry()
    with pytest.raises(InvalidTransitionError):
        pipeline.retry()
    assert pipeline.state == PipelineState.FAILED
    assert client.submit_section_results.call_count == 1


def test_retry_refused_after_max_attempts(client):
    client.submit_section_results.side_effect = NetworkError('timeout')
    pipeline = SubmissionPipeline(client, _answered_state(), retry_policy=RetryPolicy(max_attempts=2))
    pipeline.submit()
    outcome = pipeline.retry()

    assert outcome.decision.action == RetryPolicy.GIVE_UP
    with pytest.raises(InvalidTransitionError):
        pipeline.retry()
    assert client.submit_section_results.call_count == 2


def test_unexpected_validation_error_restores_state(client):
    client.validate_section.side_effect = RuntimeError('decoder blew up')
    state = _answered_state()
    autosave = MagicMock()
    pipeline = SubmissionPipeline(client, state, autosave)

    with pytest.raises(RuntimeError):
        pipeline.submit()
    assert pipeline.state == PipelineState.IDLE
    assert state.phase == TestPhase.TEST
    autosave.stop.assert_not_called()

    client.validate_section.side_effect = None
    assert pipeline.submit().succeeded


def test_submit_requires_test_phase(client):
    state = _answered_state()
    state.exit()
    pipeline = SubmissionPipeline(client, state)

    with pytest.raises(InvalidTransitionError):
        pipeline.submit()
    assert pipeline.state == PipelineState.IDLE

import threading
from unittest.mock import MagicMock

import pytest

from assessment.autosave import AutosaveTimer, ProgressGateway
from assessment.errors import NetworkError
from assessment.session_state import TestSessionState


@pytest.fixture
def client():
    return MagicMock()


@pytest.fixture
def state():
    session = TestSessionState('riasec')
    session.start()
    return session


@pytest.fixture
def timer(client, state):
    return AutosaveTimer(ProgressGateway(client, 'riasec'), state, interval=60)


def test_gateway_swallows_save_failures(client):
    client.save_progress.side_effect = NetworkError('offline')
    assert ProgressGateway(client, 'riasec').save({'answers': {'1': True}, 'currentIndex': 1}) is False


def test_gateway_load_reads_section_progress(client):
    client.get_or_create_test.return_value = {
        'progress': {'riasec': {'responses': {'1': True}, 'currentQuestionIndex': 1}}
    }
    assert ProgressGateway(client, 'riasec').load() == {'answers': {'1': True}, 'currentIndex': 1}
    assert ProgressGateway(client, 'employability').load() is None


def test_gateway_load_failure_means_no_snapshot(client):
    client.get_or_create_test.side_effect = NetworkError('offline')
    assert ProgressGateway(client, 'riasec').load() is None


def test_many_records_give_one_save(timer, state, client):
    for question_id in (1, 2, 3):
        state.answer(True, question_id)
    timer._running = True
    timer._tick()
    timer.stop()
    client.save_progress.assert_called_once_with('riasec', {'1': True, '2': True, '3': True}, 3)
    assert timer.watermark == state.accumulator.revision
    assert timer.saved_count == 3


def test_no_save_without_new_answers(timer, state, client):
    state.answer(True)
    assert timer.save_if_dirty() is True
    assert timer.save_if_dirty() is False
    assert client.save_progress.call_count == 1


def test_revised_answer_counts_as_change(timer, state, client):
    state.answer(True, 1)
    timer.save_if_dirty()
    state.answer(False, 1)
    assert timer.is_dirty()
    assert timer.save_if_dirty() is True
    assert client.save_progress.call_count == 2


def test_failed_save_keeps_watermark(timer, state, client):
    state.answer(True)
    client.save_progress.side_effect = NetworkError('offline')
    assert timer.save_if_dirty() is False
    assert timer.watermark == 0

    client.save_progress.side_effect = None
    assert timer.save_if_dirty() is True
    assert client.save_progress.call_count == 2


def test_timer_fires_in_background(client, state):
    saved = threading.Event()
    client.save_progress.side_effect = lambda *args: saved.set()
    timer = AutosaveTimer(ProgressGateway(client, 'riasec'), state, interval=0.01)
    state.answer(True)

    with timer:
        assert saved.wait(2)
    assert not timer.running


def test_stop_prevents_further_ticks(timer, state, client):
    timer.start()
    timer.stop()
    state.answer(True)
    timer._tick()
    client.save_progress.assert_not_called()

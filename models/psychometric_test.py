# models/psychometric_test.py
import time
import uuid
from copy import deepcopy
from datetime import datetime, timezone
from questions.sections import SECTION_ORDER

IN_PROGRESS = 'in_progress'
COMPLETED = 'completed'
ABANDONED = 'abandoned'


def generate_test_id():
    return f"PSY_{int(time.time() * 1000)}_{uuid.uuid4().hex[:9]}"


def utcnow():
    return datetime.now(timezone.utc)


def _iso(value):
    return value.isoformat() if isinstance(value, datetime) else value


def _iso_result(result):
    if not result:
        return None
    data = deepcopy(result)
    if 'completedAt' in data:
        data['completedAt'] = _iso(data['completedAt'])
    return data


class PsychometricTest:
    """
    One user's run through the four assessment sections.

    Section results are kept under ``results[section]``; partial answers saved
    by autosave live under ``progress[section]`` until the section is submitted.
    """

    def __init__(self, test_data):
        self.test_id = test_data.get('test_id') or generate_test_id()
        self.user_id = test_data.get('user_id')
        self.status = test_data.get('status', IN_PROGRESS)
        self.started_at = test_data.get('started_at') or utcnow()
        self.completed_at = test_data.get('completed_at')
        self.total_time_spent = test_data.get('total_time_spent', 0)
        self.sections_completed = {
            section: bool((test_data.get('sections_completed') or {}).get(section, False))
            for section in SECTION_ORDER
        }
        self.results = deepcopy(test_data.get('results') or {})
        self.progress = deepcopy(test_data.get('progress') or {})
        self.overall_results = deepcopy(test_data.get('overall_results'))
        self.created_at = test_data.get('created_at') or self.started_at
        self.updated_at = test_data.get('updated_at') or self.created_at

    # -------------------------
    # Derived state
    # -------------------------
    @property
    def completion_percentage(self):
        completed = sum(1 for done in self.sections_completed.values() if done)
        return round(completed / len(SECTION_ORDER) * 100)

    def next_section(self):
        for section in SECTION_ORDER:
            if not self.sections_completed.get(section):
                return section
        return None

    def is_complete(self):
        return all(self.sections_completed.get(section) and self.results.get(section)
                   for section in SECTION_ORDER)

    def section_result(self, section):
        return self.results.get(section)

    def section_scores(self, section):
        return (self.results.get(section) or {}).get('scores') or {}

    # -------------------------
    # Mutation helpers (persisted by PsychometricService)
    # -------------------------
    def record_section_result(self, section, result, time_spent):
        self.results[section] = result
        self.sections_completed[section] = True
        self.total_time_spent += time_spent
        self.progress.pop(section, None)
        self.updated_at = utcnow()

    def mark_completed(self, overall_results):
        self.status = COMPLETED
        self.completed_at = utcnow()
        self.overall_results = overall_results

    # -------------------------
    # Serialization
    # -------------------------
    def to_dict(self):
        return {
            'test_id': self.test_id,
            'user_id': self.user_id,
            'status': self.status,
            'started_at': self.started_at,
            'completed_at': self.completed_at,
            'total_time_spent': self.total_time_spent,
            'sections_completed': dict(self.sections_completed),
            'results': deepcopy(self.results),
            'progress': deepcopy(self.progress),
            'overall_results': deepcopy(self.overall_results),
            'created_at': self.created_at,
            'updated_at': self.updated_at,
        }

    def to_api_dict(self, include_progress=True):
        data = {
            'testId': self.test_id,
            'status': self.status,
            'completionPercentage': self.completion_percentage,
            'sectionsCompleted': dict(self.sections_completed),
            'nextSection': self.next_section(),
            'startedAt': _iso(self.started_at),
            'completedAt': _iso(self.completed_at),
            'totalTimeSpent': self.total_time_spent,
            'overallResults': deepcopy(self.overall_results),
            'isComplete': self.is_complete(),
        }
        for section in SECTION_ORDER:
            data[f'{section}Result'] = _iso_result(self.results.get(section))
        if include_progress:
            data['progress'] = {
                section: {
                    'responses': deepcopy(saved.get('responses') or {}),
                    'currentQuestionIndex': saved.get('currentQuestionIndex', 0),
                    'savedAt': _iso(saved.get('savedAt')),
                }
                for section, saved in self.progress.items()
            }
        return data

    def to_history_dict(self):
        overall = self.overall_results or {}
        return {
            'testId': self.test_id,
            'status': self.status,
            'completionPercentage': self.completion_percentage,
            'startedAt': _iso(self.started_at),
            'completedAt': _iso(self.completed_at),
            'totalTimeSpent': self.total_time_spent,
            'hollandCode': overall.get('hollandCode'),
            'employabilityQuotient': overall.get('employabilityQuotient'),
        }

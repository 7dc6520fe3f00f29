# assessment/responses.py
from enum import Enum
from models.question import BOOLEAN
from questions.sections import get_section
from services.validation_service import is_answered


class QuestionStatus(Enum):
    UNANSWERED = 'unanswered'
    ANSWERED_POSITIVE = 'answered-positive'
    ANSWERED_NEGATIVE = 'answered-negative'
    ANSWERED_VALUE = 'answered-value'
    MARKED_FOR_REVIEW = 'marked-for-review'


class ReviewMarkers:
    """Question ids the user flagged to come back to. Not persisted."""

    def __init__(self):
        self._ids = set()

    def mark(self, question_id):
        self._ids.add(str(question_id))

    def unmark(self, question_id):
        self._ids.discard(str(question_id))

    def toggle(self, question_id):
        key = str(question_id)
        if key in self._ids:
            self._ids.discard(key)
            return False
        self._ids.add(key)
        return True

    def clear(self):
        self._ids.clear()

    def __contains__(self, question_id):
        return str(question_id) in self._ids

    def __len__(self):
        return len(self._ids)

    def __iter__(self):
        return iter(sorted(self._ids))


class ResponseAccumulator:
    """
    Answers given so far in one section, keyed by question id.

    ``revision`` grows by one on every change (new answer, revised answer or
    cleared answer) and is what the autosave watermark is compared against.
    """

    def __init__(self, section, markers=None):
        self.section = get_section(section)
        self.markers = markers if markers is not None else ReviewMarkers()
        self._answers = {}
        self.revision = 0

    def _key(self, question_id):
        # Raises UnknownQuestionError for ids outside the bank
        return self.section.question(question_id).id

    def record(self, question_id, value):
        key = self._key(question_id)
        self._answers[key] = value
        self.markers.unmark(key)
        self.revision += 1

    def clear(self, question_id):
        key = self._key(question_id)
        if key in self._answers:
            del self._answers[key]
            self.revision += 1

    def get(self, question_id, default=None):
        return self._answers.get(self._key(question_id), default)

    def mark_for_review(self, question_id):
        self.markers.mark(self._key(question_id))

    def unmark(self, question_id):
        self.markers.unmark(self._key(question_id))

    def toggle_review(self, question_id):
        return self.markers.toggle(self._key(question_id))

    def is_answered(self, question_id):
        question = self.section.question(question_id)
        return question.id in self._answers and is_answered(question, self._answers[question.id])

    def status(self, question_id):
        """Review marker wins over any answer."""
        question = self.section.question(question_id)
        if question.id in self.markers:
            return QuestionStatus.MARKED_FOR_REVIEW
        if not self.is_answered(question.id):
            return QuestionStatus.UNANSWERED
        if question.kind == BOOLEAN:
            if self._answers[question.id]:
                return QuestionStatus.ANSWERED_POSITIVE
            return QuestionStatus.ANSWERED_NEGATIVE
        return QuestionStatus.ANSWERED_VALUE

    def completion_count(self):
        return sum(1 for question_id in self._answers if self.is_answered(question_id))

    def progress_percentage(self):
        total = len(self.section)
        return self.completion_count() / total * 100 if total else 0.0

    def first_unanswered_index(self):
        for index, question in enumerate(self.section.questions):
            if not self.is_answered(question.id):
                return index
        return None

    def unanswered_ids(self):
        return [q.id for q in self.section.questions if not self.is_answered(q.id)]

    def answers(self):
        return dict(self._answers)

    def to_payload(self):
        """Wire form: JSON object keys are strings."""
        return {str(question_id): value for question_id, value in self._answers.items()}

    @classmethod
    def from_payload(cls, section, payload, markers=None):
        accumulator = cls(section, markers)
        for key, value in (payload or {}).items():
            if accumulator.section.has_question(key):
                accumulator._answers[accumulator._key(key)] = value
        return accumulator

    def __len__(self):
        return len(self._answers)

    def __contains__(self, question_id):
        return self.section.has_question(question_id) and self._key(question_id) in self._answers

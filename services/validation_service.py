# services/validation_service.py
from models.question import (
    BOOLEAN, LIKERT, RANKING, TEXT, MULTISELECT, LIKERT_MIN, LIKERT_MAX,
)
from questions.personal_insights_questions import TEXT_MAX_LENGTH
from questions.sections import get_section


class ValidationResult:
    def __init__(self, is_valid, validation_errors, response_count, missing=None, invalid=None):
        self.is_valid = is_valid
        self.validation_errors = validation_errors
        self.response_count = response_count
        self.missing = missing or []
        self.invalid = invalid or []

    def to_dict(self):
        return {
            'isValid': self.is_valid,
            'validationErrors': list(self.validation_errors),
            'responseCount': self.response_count,
        }

    def __bool__(self):
        return self.is_valid


def _question_label(question):
    # Numbered banks read "Question 5", free-form ones use their title
    if isinstance(question.id, int):
        return f"Question {question.id}"
    return question.statement


def check_value(question, value):
    """Return an error message for an unacceptable answer, or None."""
    label = _question_label(question)

    if question.kind == BOOLEAN:
        if not isinstance(value, bool):
            return f"{label} must be answered yes or no"

    elif question.kind == LIKERT:
        if isinstance(value, bool) or not isinstance(value, int) or not LIKERT_MIN <= value <= LIKERT_MAX:
            return f"{label} must be a rating between {LIKERT_MIN} and {LIKERT_MAX}"

    elif question.kind == RANKING:
        positions = len(question.options or [])
        if (not isinstance(value, (list, tuple))
                or any(isinstance(v, bool) or not isinstance(v, int) for v in value)
                or sorted(value) != list(range(1, positions + 1))):
            return f"{label} must rank all {positions} statements from 1 to {positions}"

    elif question.kind == TEXT:
        if not isinstance(value, str) or len(value.strip()) < (question.min_length or 1):
            return f"{label} must be at least {question.min_length} characters"
        if len(value) > TEXT_MAX_LENGTH:
            return f"{label} must be at most {TEXT_MAX_LENGTH} characters"

    elif question.kind == MULTISELECT:
        if (not isinstance(value, (list, tuple))
                or len(set(value)) != len(value)
                or len(value) != question.selections
                or any(v not in question.options for v in value)):
            return f"{label} requires exactly {question.selections} selections"

    return None


def is_answered(question, value):
    """Whether a stored value counts as an answer for progress purposes."""
    if value is None:
        return False
    if question.kind == TEXT:
        return isinstance(value, str) and bool(value.strip())
    if question.kind in (MULTISELECT, RANKING):
        return bool(value)
    return True


def validate_section(section, responses):
    """
    Completeness and value check of a section's responses.

    Valid iff every question of the bank has an acceptable answer and no
    answer refers to a question outside the bank.
    """
    section = get_section(section)
    responses = responses or {}
    errors = []
    missing = []
    invalid = []

    given = {str(key): value for key, value in responses.items()}

    for question in section.questions:
        key = str(question.id)
        if key not in given or not is_answered(question, given[key]):
            missing.append(question.id)
            errors.append(f"{_question_label(question)} not answered")
            continue
        problem = check_value(question, given[key])
        if problem:
            invalid.append(question.id)
            errors.append(problem)

    for key in given:
        if not section.has_question(key):
            errors.append(f"Unknown question {key}")

    return ValidationResult(
        is_valid=not errors,
        validation_errors=errors,
        response_count=len(responses),
        missing=missing,
        invalid=invalid,
    )

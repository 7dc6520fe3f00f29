import pytest

from models.question import Question, Section, BOOLEAN, COUNT_TRUE, UnknownSectionError
from services.validation_service import validate_section, check_value
from questions.sections import get_section
from conftest import complete_responses


@pytest.fixture
def five_questions():
    return Section('five', 'Five', BOOLEAN,
                   [Question(i, f"q{i}", category='R') for i in range(1, 6)],
                   categories=('R',), scoring=COUNT_TRUE)


def test_missing_answer_is_reported_by_number(five_questions):
    result = validate_section(five_questions, {1: True, 2: False, 3: True, 4: True})
    assert not result.is_valid
    assert result.validation_errors == ["Question 5 not answered"]
    assert result.missing == [5]
    assert result.to_dict() == {
        'isValid': False,
        'validationErrors': ["Question 5 not answered"],
        'responseCount': 4,
    }


def test_complete_answers_are_valid(five_questions):
    result = validate_section(five_questions, {str(i): False for i in range(1, 6)})
    assert result.is_valid
    assert bool(result)


def test_unknown_question_is_rejected(five_questions):
    responses = {i: True for i in range(1, 6)}
    responses[99] = True
    result = validate_section(five_questions, responses)
    assert result.validation_errors == ["Unknown question 99"]


@pytest.mark.parametrize('section_name', ['riasec', 'brainProfile', 'employability', 'personalInsights'])
def test_full_sections_validate(section_name):
    assert validate_section(section_name, complete_responses(section_name)).is_valid


def test_unknown_section():
    with pytest.raises(UnknownSectionError):
        validate_section('astrology', {})


@pytest.mark.parametrize('value', [0, 6, True, '3', 2.5])
def test_likert_rejects_bad_values(value):
    question = get_section('employability').question(1)
    assert check_value(question, value) is not None


@pytest.mark.parametrize('value', [[1, 2, 3], [1, 1, 2, 3], [1, 2, 3, 5], 'abcd'])
def test_ranking_must_be_a_permutation(value):
    question = get_section('brainProfile').question(1)
    assert check_value(question, value) is not None


def test_ranking_accepts_permutation():
    assert check_value(get_section('brainProfile').question(1), [3, 1, 4, 2]) is None


def test_personal_insights_text_and_selections():
    section = get_section('personalInsights')
    responses = complete_responses('personalInsights')
    responses['whatYouLike'] = 'short'
    responses['valuesInLife'] = responses['valuesInLife'][:2]
    result = validate_section(section, responses)
    assert result.invalid == ['whatYouLike', 'valuesInLife']
    assert result.validation_errors[0].startswith('What do you like')


def test_personal_insights_missing_uses_title():
    responses = complete_responses('personalInsights')
    del responses['recentProjects']
    result = validate_section('personalInsights', responses)
    assert result.validation_errors == [
        "Mention any projects or initiatives that you have taken in recent past not answered"
    ]

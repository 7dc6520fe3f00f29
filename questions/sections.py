# questions/sections.py
from models.question import (
    Question, Section, UnknownSectionError,
    BOOLEAN, LIKERT, RANKING, TEXT, MULTISELECT,
    COUNT_TRUE, MEAN, RANK_POINTS,
)
from questions.riasec_questions import RIASEC_QUESTIONS, RIASEC_CATEGORIES
from questions.brain_profile_questions import BRAIN_PROFILE_QUESTIONS, BRAIN_QUADRANTS
from questions.employability_questions import EMPLOYABILITY_QUESTIONS, STEPS_CATEGORIES
from questions.personal_insights_questions import (
    PERSONAL_INSIGHTS_QUESTIONS, TEXT_MIN_LENGTH, REQUIRED_SELECTIONS,
)

RIASEC = 'riasec'
BRAIN_PROFILE = 'brainProfile'
EMPLOYABILITY = 'employability'
PERSONAL_INSIGHTS = 'personalInsights'

# Order in which sections are offered; also the order used by next_section()
SECTION_ORDER = [RIASEC, BRAIN_PROFILE, EMPLOYABILITY, PERSONAL_INSIGHTS]

# URL slugs used by the submit endpoints
SECTION_SLUGS = {
    RIASEC: 'riasec',
    BRAIN_PROFILE: 'brain-profile',
    EMPLOYABILITY: 'employability',
    PERSONAL_INSIGHTS: 'personal-insights',
}


def _build_riasec():
    questions = [
        Question(q['id'], q['statement'], category=q['tag'], kind=BOOLEAN)
        for q in RIASEC_QUESTIONS
    ]
    return Section(RIASEC, 'Interest Inventory (RIASEC)', BOOLEAN, questions,
                   categories=RIASEC_CATEGORIES, scoring=COUNT_TRUE)


def _build_brain_profile():
    # A ranking question feeds every quadrant, so it has no single category
    questions = [
        Question(q['id'], f"Set {q['id']}", kind=RANKING,
                 options=[q['statements'][quadrant] for quadrant in BRAIN_QUADRANTS])
        for q in BRAIN_PROFILE_QUESTIONS
    ]
    return Section(BRAIN_PROFILE, 'Brain Profile Test', RANKING, questions,
                   categories=BRAIN_QUADRANTS, scoring=RANK_POINTS)


def _build_employability():
    questions = [
        Question(q['id'], q['question'], category=q['category'], kind=LIKERT, hint=q.get('hint'))
        for q in EMPLOYABILITY_QUESTIONS
    ]
    return Section(EMPLOYABILITY, 'Employability Test (STEPS)', LIKERT, questions,
                   categories=STEPS_CATEGORIES, scoring=MEAN)


def _build_personal_insights():
    questions = []
    for q in PERSONAL_INSIGHTS_QUESTIONS:
        if q['type'] == 'text':
            questions.append(Question(q['id'], q['title'], kind=TEXT, min_length=TEXT_MIN_LENGTH))
        else:
            questions.append(Question(q['id'], q['title'], kind=MULTISELECT,
                                      options=list(q['options']), selections=REQUIRED_SELECTIONS))
    return Section(PERSONAL_INSIGHTS, 'Personal Insights', TEXT, questions)


SECTIONS = {
    RIASEC: _build_riasec(),
    BRAIN_PROFILE: _build_brain_profile(),
    EMPLOYABILITY: _build_employability(),
    PERSONAL_INSIGHTS: _build_personal_insights(),
}


def get_section(name):
    """Return the Section for a section name, raising UnknownSectionError."""
    if isinstance(name, Section):
        return name
    try:
        return SECTIONS[name]
    except KeyError:
        raise UnknownSectionError(f"Unknown test section: {name}")

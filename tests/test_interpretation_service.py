from services.interpretation_service import InterpretationService, employability_level
from services.scoring_service import ScoringService
from conftest import complete_responses


def _scores(section_name):
    return ScoringService().aggregate(section_name, complete_responses(section_name))


def test_riasec_interpretation_names_holland_code():
    text, recommendations = InterpretationService().interpret(_scores('riasec'))
    assert text.startswith("Your Holland Code is IAS.")
    assert 'Research' in recommendations
    assert len(recommendations) <= 8


def test_career_recommendations_deduplicates_and_limits():
    data = InterpretationService().career_recommendations('ias', limit=5)
    assert data['hollandCode'] == 'IAS'
    assert data['careers'] == ['Researcher', 'Scientist', 'Analyst', 'Doctor', 'Mathematician']
    assert data['totalRecommendations'] == 5
    assert len(data['industries']) == len(set(data['industries']))


def test_career_recommendations_ignores_unknown_letters():
    data = InterpretationService().career_recommendations('XZ')
    assert data['careers'] == []


def test_steps_recommendations_flag_weak_areas():
    service = InterpretationService()
    text, recommendations = service.interpret(_scores('employability'))
    assert '7.2/10' in text
    # E scored 3.0 and Speaking 2.0, both under 3.5
    assert len(recommendations) == 2
    assert service.skill_development_areas({'S': 4, 'T': 4, 'E': 4, 'P': 4, 'Speaking': 4}) == [
        'Continue developing all skill areas'
    ]


def test_employability_level_bands():
    assert employability_level(8.0) == 'excellent'
    assert employability_level(6.5) == 'good'
    assert employability_level(4.0) == 'moderate'
    assert employability_level(1.2) == 'developing'


def test_overall_results():
    overall = InterpretationService().overall_results(
        _scores('riasec').scores, _scores('brainProfile').scores, _scores('employability').scores,
    )
    assert overall['hollandCode'] == 'IAS'
    assert overall['dominantBrainQuadrants'] == ['R1', 'L1']
    assert overall['employabilityQuotient'] == 7.2
    assert 'IAS' in overall['overallInterpretation']
    assert len(overall['careerRecommendations']) == 10

# services/interpretation_service.py
import logging
from questions.riasec_questions import RIASEC_NAMES
from questions.brain_profile_questions import BRAIN_QUADRANT_NAMES
from questions.employability_questions import STEPS_NAMES
from services.scoring_service import ScoringService

logger = logging.getLogger(__name__)

RIASEC_DESCRIPTIONS = {
    'R': 'You prefer hands-on work and practical activities',
    'I': 'You enjoy research, analysis, and intellectual challenges',
    'A': 'You are drawn to creative and expressive activities',
    'S': 'You like working with and helping people',
    'E': 'You enjoy leadership and business activities',
    'C': 'You prefer structured, detail-oriented work',
}

RIASEC_TRAITS = {
    'R': 'hands-on and practical',
    'I': 'analytical and research-oriented',
    'A': 'creative and expressive',
    'S': 'people-focused and helpful',
    'E': 'leadership-oriented and persuasive',
    'C': 'organized and detail-oriented',
}

RIASEC_FIELDS = {
    'R': ['Engineering', 'Agriculture', 'Construction', 'Mechanics', 'Outdoor Work'],
    'I': ['Research', 'Science', 'Medicine', 'Technology', 'Analysis'],
    'A': ['Design', 'Writing', 'Music', 'Theatre', 'Visual Arts'],
    'S': ['Teaching', 'Counseling', 'Healthcare', 'Social Work', 'Human Resources'],
    'E': ['Business', 'Sales', 'Management', 'Entrepreneurship', 'Politics'],
    'C': ['Accounting', 'Administration', 'Banking', 'Data Management', 'Operations'],
}

CAREER_MAPPINGS = {
    'R': ['Engineer', 'Technician', 'Mechanic', 'Farmer', 'Construction Worker', 'Pilot', 'Electrician', 'Carpenter'],
    'I': ['Researcher', 'Scientist', 'Analyst', 'Doctor', 'Mathematician', 'Psychologist', 'Veterinarian', 'Pharmacist'],
    'A': ['Artist', 'Designer', 'Writer', 'Musician', 'Photographer', 'Actor', 'Architect', 'Fashion Designer'],
    'S': ['Teacher', 'Counselor', 'Social Worker', 'Nurse', 'Coach', 'Therapist', 'HR Manager', 'Community Worker'],
    'E': ['Manager', 'Entrepreneur', 'Sales Representative', 'Lawyer', 'Politician', 'Marketing Manager', 'Real Estate Agent', 'Investment Banker'],
    'C': ['Accountant', 'Administrator', 'Data Analyst', 'Librarian', 'Secretary', 'Banker', 'Insurance Agent', 'Tax Preparer'],
}

INDUSTRY_MAPPINGS = {
    'R': ['Manufacturing', 'Construction', 'Agriculture', 'Transportation'],
    'I': ['Healthcare', 'Research', 'Technology', 'Education'],
    'A': ['Media & Entertainment', 'Design', 'Publishing', 'Advertising'],
    'S': ['Education', 'Healthcare', 'Social Services', 'Human Resources'],
    'E': ['Business', 'Finance', 'Sales & Marketing', 'Legal'],
    'C': ['Finance', 'Administration', 'Data Management', 'Government'],
}

BRAIN_TRAITS = {
    'L1': 'logical and analytical',
    'L2': 'organized and systematic',
    'R1': 'creative and strategic',
    'R2': 'empathetic and collaborative',
}

BRAIN_DESCRIPTIONS = {
    'L1': 'You are logical, practical, and fact-based',
    'L2': 'You are structured, detailed, and systematic',
    'R1': 'You are creative, innovative, and big-picture focused',
    'R2': 'You are people-oriented, emotional, and collaborative',
}

LEARNING_MAPPINGS = {
    'L1': ['Use logical frameworks and step-by-step approaches', 'Focus on facts and data-driven learning'],
    'L2': ['Create structured study schedules', 'Use detailed notes and organized materials'],
    'R1': ['Engage in creative problem-solving', 'Use visual aids and mind maps'],
    'R2': ['Learn through group discussions', 'Seek mentors who provide emotional support'],
}

STEPS_IMPROVEMENTS = {
    'S': 'Focus on self-management skills: time management, grooming, emotional control',
    'T': 'Develop teamwork skills: empathy, adaptability, conflict resolution',
    'E': 'Build enterprising skills: leadership, networking, risk management',
    'P': 'Enhance problem-solving: critical thinking, creativity, resilience',
    'Speaking': 'Improve communication: verbal skills, listening, body language',
}

SKILL_AREAS = {
    'S': 'Self-management skills',
    'T': 'Teamwork and collaboration',
    'E': 'Enterprising and leadership',
    'P': 'Problem-solving abilities',
    'Speaking': 'Communication skills',
}

MAX_SECTION_RECOMMENDATIONS = 8
MAX_OVERALL_CAREERS = 10
MAX_CAREER_RECOMMENDATIONS = 15


def employability_level(quotient):
    if quotient >= 8:
        return 'excellent'
    if quotient >= 6:
        return 'good'
    if quotient >= 4:
        return 'moderate'
    return 'developing'


def _unique(items, limit=None):
    seen = []
    for item in items:
        if item not in seen:
            seen.append(item)
    return seen[:limit] if limit else seen


class InterpretationService:
    """Human readable interpretation and recommendations for section scores."""

    def __init__(self, scoring_service=None, development_threshold=3.5):
        self.scoring = scoring_service or ScoringService()
        self.development_threshold = development_threshold

    # -------------------------
    # Interest inventory
    # -------------------------
    def riasec_interpretation(self, section_score):
        top = section_score.ranking[:3]
        descriptions = [
            f"{RIASEC_NAMES[letter]} - {RIASEC_DESCRIPTIONS[letter]} ({section_score.scores[letter]} points)"
            for letter in top
        ]
        return f"Your Holland Code is {''.join(top)}. Your top interests are: {', '.join(descriptions)}"

    def riasec_recommendations(self, section_score):
        fields = []
        for letter in section_score.ranking[:3]:
            fields.extend(RIASEC_FIELDS[letter])
        return _unique(fields, MAX_SECTION_RECOMMENDATIONS)

    def career_recommendations(self, holland_code, limit=MAX_CAREER_RECOMMENDATIONS):
        """Careers and industries for each letter of a Holland code (unknown letters ignored)."""
        code = (holland_code or '').upper()
        careers = []
        industries = []
        for letter in code:
            careers.extend(CAREER_MAPPINGS.get(letter, []))
            industries.extend(INDUSTRY_MAPPINGS.get(letter, []))
        careers = _unique(careers, limit)
        return {
            'hollandCode': code,
            'careers': careers,
            'industries': _unique(industries),
            'totalRecommendations': len(careers),
        }

    # -------------------------
    # Brain profile
    # -------------------------
    def brain_interpretation(self, section_score):
        percentages = self.scoring.calculate_percentages(section_score.scores)
        descriptions = [
            f"{BRAIN_QUADRANT_NAMES[quadrant]} - {BRAIN_DESCRIPTIONS[quadrant]} ({percentages[quadrant]}%)"
            for quadrant in section_score.ranking[:2]
        ]
        return f"Your dominant brain quadrants are {' and '.join(descriptions)}"

    def learning_recommendations(self, quadrants):
        recommendations = []
        for quadrant in quadrants:
            recommendations.extend(LEARNING_MAPPINGS.get(quadrant, []))
        return recommendations

    # -------------------------
    # Employability
    # -------------------------
    def steps_interpretation(self, section_score):
        quotient = section_score.quotient or 0.0
        if quotient >= 8:
            assessment = 'Excellent job readiness!'
        elif quotient >= 6:
            assessment = 'Good potential with room for improvement.'
        elif quotient >= 4:
            assessment = 'Moderate job readiness - focus on skill development.'
        else:
            assessment = 'Significant improvement needed in key employability skills.'
        return f"Your Employability Quotient is {quotient:.1f}/10. {assessment}"

    def weak_steps_areas(self, steps_scores):
        return [
            category for category in STEPS_NAMES
            if steps_scores.get(category, 0) < self.development_threshold
        ]

    def steps_recommendations(self, section_score):
        weak = self.weak_steps_areas(section_score.scores)
        if weak:
            return [STEPS_IMPROVEMENTS[area] for area in weak]
        return ['Continue developing all areas to maintain high employability']

    def skill_development_areas(self, steps_scores):
        weak = self.weak_steps_areas(steps_scores)
        if weak:
            return [SKILL_AREAS[area] for area in weak]
        return ['Continue developing all skill areas']

    # -------------------------
    # Dispatch and overall results
    # -------------------------
    def interpret(self, section_score):
        """Return (interpretation, recommendations) for a scored section."""
        if section_score.section == 'riasec':
            return self.riasec_interpretation(section_score), self.riasec_recommendations(section_score)
        if section_score.section == 'brainProfile':
            quadrants = section_score.ranking[:1]
            return self.brain_interpretation(section_score), self.learning_recommendations(quadrants)
        if section_score.section == 'employability':
            return self.steps_interpretation(section_score), self.steps_recommendations(section_score)
        return '', []

    def overall_results(self, riasec_scores, brain_scores, steps_scores):
        """Combined results once every section of a test has been submitted."""
        holland_code = self.scoring.holland_code(riasec_scores)
        quadrants = self.scoring.dominant_quadrants(brain_scores)
        quotient = self.scoring.employability_quotient(steps_scores)

        level = employability_level(quotient)
        readiness = 'strong job readiness' if quotient >= 7 else 'areas for professional development'
        interpretation = (
            f"Based on your assessment, you have a {RIASEC_TRAITS[holland_code[0]]} personality "
            f"with {BRAIN_TRAITS[quadrants[0]]} thinking preferences. Your Holland Code {holland_code} "
            f"suggests you thrive in environments that match these characteristics. Your employability "
            f"skills are at a {level} level ({quotient}/10), indicating {readiness}."
        )

        careers = self.career_recommendations(holland_code, MAX_OVERALL_CAREERS)['careers']
        logger.info(f"Overall results calculated: {holland_code}, {quadrants}, EQ={quotient}")

        return {
            'hollandCode': holland_code,
            'dominantBrainQuadrants': quadrants,
            'employabilityQuotient': quotient,
            'overallInterpretation': interpretation,
            'careerRecommendations': careers,
            'learningStyleRecommendations': self.learning_recommendations(quadrants),
            'skillDevelopmentAreas': self.skill_development_areas(steps_scores),
        }

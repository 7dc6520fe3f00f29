# services/scoring_service.py
from collections import defaultdict
from models.question import (
    COUNT_TRUE, MEAN, RANK_POINTS, LIKERT_MIN, LIKERT_MAX,
)
from questions.sections import get_section, RIASEC, BRAIN_PROFILE, EMPLOYABILITY

QUOTIENT_SCALE = 10
RANKING_POSITIONS = 4


class SectionScore:
    """Score Vector of one section plus the ranking and label derived from it."""

    def __init__(self, section, scores, ranking, answered_counts, label=None, quotient=None):
        self.section = section
        self.scores = scores
        self.ranking = ranking
        self.answered_counts = answered_counts
        self.label = label
        self.quotient = quotient

    def to_dict(self):
        data = {
            'section': self.section,
            'scores': dict(self.scores),
            'ranking': list(self.ranking),
        }
        if self.label is not None:
            data['label'] = self.label
        if self.quotient is not None:
            data['quotient'] = self.quotient
        return data

    def __eq__(self, other):
        if not isinstance(other, SectionScore):
            return NotImplemented
        return self.to_dict() == other.to_dict()


def _is_likert(value):
    return isinstance(value, int) and not isinstance(value, bool) and LIKERT_MIN <= value <= LIKERT_MAX


class ScoringService:
    """
    Pure aggregation of section responses into Score Vectors.

    Every category declared by the section appears in the vector. Ties between
    equal scores are broken by the section's category declaration order.
    """

    # -------------------------
    # Score vectors
    # -------------------------
    def score_vector(self, section, responses):
        """Return (scores, answered_counts) for any scored section."""
        section = get_section(section)
        if section.scoring == COUNT_TRUE:
            return self._count_true(section, responses)
        if section.scoring == MEAN:
            return self._category_means(section, responses)
        if section.scoring == RANK_POINTS:
            return self._rank_points(section, responses)
        return {}, {}

    def _count_true(self, section, responses):
        scores = {category: 0 for category in section.categories}
        answered = {category: 0 for category in section.categories}

        for question_id, answer in (responses or {}).items():
            if not section.has_question(question_id):
                continue
            category = section.category_of(question_id)
            if isinstance(answer, bool):
                answered[category] += 1
                if answer:
                    scores[category] += 1

        return scores, answered

    def _category_means(self, section, responses):
        totals = defaultdict(int)
        answered = {category: 0 for category in section.categories}

        for question_id, value in (responses or {}).items():
            if not section.has_question(question_id) or not _is_likert(value):
                continue
            category = section.category_of(question_id)
            totals[category] += value
            answered[category] += 1

        scores = {}
        for category in section.categories:
            count = answered[category]
            scores[category] = round(totals[category] / count, 1) if count else 0.0
        return scores, answered

    def _rank_points(self, section, responses):
        # Rank 1 (most like me) earns 4 points, rank 4 earns 1
        scores = {category: 0 for category in section.categories}
        answered = {category: 0 for category in section.categories}

        for question_id, rankings in (responses or {}).items():
            if not section.has_question(question_id):
                continue
            if not isinstance(rankings, (list, tuple)) or len(rankings) != len(section.categories):
                continue
            for category, rank in zip(section.categories, rankings):
                if isinstance(rank, int) and not isinstance(rank, bool) and 1 <= rank <= RANKING_POSITIONS:
                    scores[category] += RANKING_POSITIONS + 1 - rank
                    answered[category] += 1

        return scores, answered

    # -------------------------
    # Ranking and derived labels
    # -------------------------
    def rank_categories(self, section, scores, answered_counts=None):
        """
        Categories by descending score, ties resolved by declaration order.
        Categories with no answered questions are left out when counts are given.
        """
        section = get_section(section)
        order = {category: index for index, category in enumerate(section.categories)}
        candidates = [
            category for category in section.categories
            if answered_counts is None or answered_counts.get(category, 0) > 0
        ]
        return sorted(candidates, key=lambda c: (-scores.get(c, 0), order[c]))

    def get_top(self, section, scores, n, answered_counts=None):
        return self.rank_categories(section, scores, answered_counts)[:n]

    def holland_code(self, riasec_scores, answered_counts=None):
        """Standard 3-letter Holland code from RIASEC scores"""
        return ''.join(self.get_top(RIASEC, riasec_scores, 3, answered_counts))

    def dominant_quadrants(self, brain_scores, answered_counts=None):
        """Top 2 brain quadrants"""
        return self.get_top(BRAIN_PROFILE, brain_scores, 2, answered_counts)

    def employability_quotient(self, steps_scores, answered_counts=None):
        """
        Mean of the STEPS category averages scaled onto 0-10, one decimal.
        Only categories with at least one answer take part when counts are given.
        """
        categories = [
            category for category in get_section(EMPLOYABILITY).categories
            if answered_counts is None or answered_counts.get(category, 0) > 0
        ]
        if not categories:
            return 0.0
        average = sum(steps_scores.get(c, 0) for c in categories) / len(categories)
        return round(average / LIKERT_MAX * QUOTIENT_SCALE, 1)

    def aggregate(self, section, responses):
        """Score Vector, ranking and summary label for a section's responses."""
        section = get_section(section)
        scores, answered = self.score_vector(section, responses)
        ranking = self.rank_categories(section, scores, answered)

        label = None
        quotient = None
        if section.name == RIASEC:
            label = ''.join(ranking[:3])
        elif section.name == BRAIN_PROFILE:
            label = '-'.join(ranking[:2])
        elif section.name == EMPLOYABILITY:
            quotient = self.employability_quotient(scores, answered)
            label = f"{quotient}/{QUOTIENT_SCALE}"

        return SectionScore(section.name, scores, ranking, answered, label=label, quotient=quotient)

    def calculate_percentages(self, score_dict):
        """
        Share of each category in the total (0-100 integers).
        Returns zeros when nothing was scored.
        """
        total = sum(score_dict.values())
        if not total:
            return {key: 0 for key in score_dict}
        return {key: int(round(value / total * 100)) for key, value in score_dict.items()}

# models/question.py
from copy import deepcopy

# Answer kinds
BOOLEAN = 'boolean'
LIKERT = 'likert'
RANKING = 'ranking'
TEXT = 'text'
MULTISELECT = 'multiselect'

# Scoring rules
COUNT_TRUE = 'count_true'
MEAN = 'mean'
RANK_POINTS = 'rank_points'

LIKERT_MIN = 1
LIKERT_MAX = 5


class UnknownSectionError(KeyError):
    """Raised when a section name is not one of the known test sections."""


class UnknownQuestionError(KeyError):
    """Raised when a question id does not belong to the section's question bank."""


class Question:
    def __init__(self, question_id, statement, category=None, kind=BOOLEAN,
                 hint=None, options=None, min_length=None, selections=None):
        self.id = question_id
        self.statement = statement
        self.category = category
        self.kind = kind
        self.hint = hint
        self.options = options
        self.min_length = min_length
        self.selections = selections

    def to_dict(self):
        data = {
            'id': self.id,
            'statement': self.statement,
            'category': self.category,
            'kind': self.kind,
        }
        if self.hint:
            data['hint'] = self.hint
        if self.options is not None:
            data['options'] = deepcopy(self.options)
        if self.min_length is not None:
            data['minLength'] = self.min_length
        if self.selections is not None:
            data['selections'] = self.selections
        return data

    def __repr__(self):
        return f"Question({self.id!r}, category={self.category!r}, kind={self.kind!r})"


class Section:
    """
    A self-assessment section: its ordered question bank, the categories it
    scores into (in declaration order) and the scoring rule.
    """

    def __init__(self, name, title, kind, questions, categories=(), scoring=None):
        self.name = name
        self.title = title
        self.kind = kind
        self.questions = tuple(questions)
        self.categories = tuple(categories)
        self.scoring = scoring
        self._lookup = {str(q.id): q for q in self.questions}

    def __len__(self):
        return len(self.questions)

    def __iter__(self):
        return iter(self.questions)

    def has_question(self, question_id):
        return str(question_id) in self._lookup

    def question(self, question_id):
        """Look a question up by id or by its JSON (string) form."""
        try:
            return self._lookup[str(question_id)]
        except KeyError:
            raise UnknownQuestionError(f"Question {question_id} is not part of section '{self.name}'")

    def index_of(self, question_id):
        target = str(question_id)
        for index, q in enumerate(self.questions):
            if str(q.id) == target:
                return index
        raise UnknownQuestionError(f"Question {question_id} is not part of section '{self.name}'")

    def category_of(self, question_id):
        return self.question(question_id).category

    def question_ids(self):
        return [q.id for q in self.questions]

    def to_dict(self):
        return {
            'section': self.name,
            'title': self.title,
            'kind': self.kind,
            'categories': list(self.categories),
            'questions': [q.to_dict() for q in self.questions],
        }

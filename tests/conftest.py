from copy import deepcopy
from types import SimpleNamespace

import pytest

from config import TestingConfig
from questions.sections import get_section
from questions.personal_insights_questions import CHARACTER_STRENGTH_OPTIONS, VALUES_OPTIONS


class FakeCursor:
    def __init__(self, docs):
        self._docs = docs

    def sort(self, key, direction=1):
        self._docs = sorted(self._docs, key=lambda d: d.get(key), reverse=direction < 0)
        return self

    def limit(self, n):
        if n:
            self._docs = self._docs[:n]
        return self

    def __iter__(self):
        return iter(deepcopy(self._docs))


class FakeCollection:
    """In-memory stand-in for the handful of pymongo calls the services make."""

    def __init__(self):
        self.docs = []
        self.indexes = []

    @staticmethod
    def _matches(doc, query):
        return all(doc.get(k) == v for k, v in query.items())

    def find_one(self, query):
        for doc in self.docs:
            if self._matches(doc, query):
                return deepcopy(doc)
        return None

    def find(self, query=None):
        return FakeCursor([d for d in self.docs if self._matches(d, query or {})])

    def insert_one(self, doc):
        self.docs.append(deepcopy(doc))
        return SimpleNamespace(inserted_id=len(self.docs))

    def replace_one(self, query, doc, upsert=False):
        for i, existing in enumerate(self.docs):
            if self._matches(existing, query):
                self.docs[i] = deepcopy(doc)
                return SimpleNamespace(matched_count=1, upserted_id=None)
        if upsert:
            self.docs.append(deepcopy(doc))
        return SimpleNamespace(matched_count=0, upserted_id=doc.get('test_id') if upsert else None)

    def update_one(self, query, update):
        for doc in self.docs:
            if self._matches(doc, query):
                for path, value in update.get('$set', {}).items():
                    target = doc
                    *parents, leaf = path.split('.')
                    for part in parents:
                        target = target.setdefault(part, {})
                    target[leaf] = deepcopy(value)
                return SimpleNamespace(matched_count=1, modified_count=1)
        return SimpleNamespace(matched_count=0, modified_count=0)

    def delete_one(self, query):
        for i, doc in enumerate(self.docs):
            if self._matches(doc, query):
                del self.docs[i]
                return SimpleNamespace(deleted_count=1)
        return SimpleNamespace(deleted_count=0)

    def count_documents(self, query):
        return sum(1 for d in self.docs if self._matches(d, query))

    def create_index(self, keys, **kwargs):
        self.indexes.append((keys, kwargs))


def complete_responses(section_name):
    """A full, valid answer set for a section, keyed the way JSON delivers it."""
    section = get_section(section_name)
    if section_name == 'riasec':
        return {str(q.id): q.category in ('I', 'A', 'S') for q in section}
    if section_name == 'brainProfile':
        # R1 first, then L1, R2, L2
        return {str(q.id): [2, 4, 1, 3] for q in section}
    if section_name == 'employability':
        values = {'S': 4, 'T': 5, 'E': 3, 'P': 4, 'Speaking': 2}
        return {str(q.id): values[q.category] for q in section}
    return {
        'whatYouLike': 'Building small robots at the weekend',
        'whatYouAreGoodAt': 'Explaining maths to my classmates',
        'recentProjects': 'Organised a science fair stall for my school',
        'characterStrengths': CHARACTER_STRENGTH_OPTIONS[:3],
        'valuesInLife': VALUES_OPTIONS[:3],
    }


@pytest.fixture
def tests_collection():
    return FakeCollection()


@pytest.fixture
def users_collection():
    return FakeCollection()


@pytest.fixture
def service(tests_collection):
    from services.psychometric_service import PsychometricService
    return PsychometricService(collection=tests_collection)


@pytest.fixture
def app(service):
    from app import create_app
    return create_app(TestingConfig, psychometric_service=service)


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def auth_client(client):
    with client.session_transaction() as sess:
        sess['user_id'] = 'user-1'
    return client

# services/psychometric_service.py
import logging
from collections import Counter
from config import Config
from database.mongodb import mongo_db
from models.psychometric_test import PsychometricTest, IN_PROGRESS, COMPLETED, utcnow
from questions.sections import get_section, SECTION_ORDER, PERSONAL_INSIGHTS
from services.interpretation_service import InterpretationService
from services.scoring_service import ScoringService
from services.validation_service import validate_section

logger = logging.getLogger(__name__)


class SectionValidationError(ValueError):
    """Submitted responses failed validation; ``errors`` lists the problems."""

    def __init__(self, message, errors=None):
        super().__init__(message)
        self.errors = list(errors or [])


class TestNotFoundError(LookupError):
    __test__ = False


class PsychometricService:
    """
    Stores psychometric tests and section results for users.

    Each user has at most one ``in_progress`` test; partial answers are kept
    per (user, section) and overwritten by every save (last writer wins).
    """

    def __init__(self, collection=None, scoring_service=None, interpretation_service=None):
        self._collection = collection
        self.scoring = scoring_service or ScoringService()
        self.interpretation = interpretation_service or InterpretationService(
            self.scoring, Config.SKILL_DEVELOPMENT_THRESHOLD
        )

    @property
    def collection(self):
        if self._collection is None:
            self._collection = mongo_db.get_tests_collection()
        return self._collection

    def _save(self, test):
        test.updated_at = utcnow()
        self.collection.replace_one({"test_id": test.test_id}, test.to_dict(), upsert=True)

    # -------------------------
    # Test lifecycle
    # -------------------------
    def get_or_create_test(self, user_id):
        """Return the user's in-progress test, creating one if needed."""
        data = self.collection.find_one({"user_id": user_id, "status": IN_PROGRESS})
        if data:
            return PsychometricTest(data)

        test = PsychometricTest({"user_id": user_id})
        self.collection.insert_one(test.to_dict())
        logger.info(f"🧠 Created psychometric test {test.test_id} for user {user_id}")
        return test

    def get_test_results(self, user_id, test_id=None):
        """Test by id (TestNotFoundError if missing), or the user's latest test, or None."""
        if test_id:
            data = self.collection.find_one({"user_id": user_id, "test_id": test_id})
            if not data:
                raise TestNotFoundError(f"Test {test_id} not found for user {user_id}")
            return PsychometricTest(data)

        latest = list(self.collection.find({"user_id": user_id}).sort("created_at", -1).limit(1))
        return PsychometricTest(latest[0]) if latest else None

    def get_test_history(self, user_id, limit=10):
        cursor = self.collection.find({"user_id": user_id}).sort("created_at", -1).limit(limit)
        return [PsychometricTest(data) for data in cursor]

    def delete_test(self, user_id, test_id):
        """Delete an in-progress test (restart). Completed tests are kept."""
        result = self.collection.delete_one({
            "user_id": user_id,
            "test_id": test_id,
            "status": IN_PROGRESS,
        })
        deleted = result.deleted_count > 0
        if deleted:
            logger.info(f"🗑️ Deleted test {test_id} for user {user_id}")
        return deleted

    # -------------------------
    # Progress (autosave)
    # -------------------------
    def save_progress(self, user_id, section, responses, current_question_index=0):
        section = get_section(section)
        if not isinstance(responses, dict):
            raise SectionValidationError("Responses must be an object", ["Responses must be an object"])

        try:
            index = max(0, int(current_question_index or 0))
        except (TypeError, ValueError):
            raise SectionValidationError("Current question index must be a number",
                                         ["Current question index must be a number"])

        test = self.get_or_create_test(user_id)
        snapshot = {
            "responses": {str(k): v for k, v in responses.items()},
            "currentQuestionIndex": index,
            "savedAt": utcnow(),
        }
        self.collection.update_one(
            {"test_id": test.test_id},
            {"$set": {f"progress.{section.name}": snapshot, "updated_at": utcnow()}}
        )
        test.progress[section.name] = snapshot

        logger.info(f"💾 Progress saved for user {user_id}, section {section.name}: "
                    f"{len(responses)} responses at index {index}")
        return test

    def get_progress(self, user_id, section):
        section = get_section(section)
        test = self.get_or_create_test(user_id)
        return test.progress.get(section.name)

    # -------------------------
    # Section submission
    # -------------------------
    def submit_section(self, user_id, section, responses, time_spent):
        section = get_section(section)
        if not isinstance(responses, dict):
            raise SectionValidationError("Responses must be an object", ["Responses must be an object"])

        validation = validate_section(section, responses)
        if not validation.is_valid:
            raise SectionValidationError(f"Validation failed for {section.name}", validation.validation_errors)

        minutes = max(1, int(round(float(time_spent or 0))))
        stored_responses = {str(k): v for k, v in responses.items()}
        test = self.get_or_create_test(user_id)

        result = {
            "sectionId": section.name,
            "sectionName": section.title,
            "completedAt": utcnow(),
            "timeSpent": minutes,
            "responses": stored_responses,
        }
        if section.name != PERSONAL_INSIGHTS:
            section_score = self.scoring.aggregate(section, stored_responses)
            interpretation, recommendations = self.interpretation.interpret(section_score)
            result.update({
                "scores": section_score.scores,
                "ranking": section_score.ranking,
                "label": section_score.label,
                "interpretation": interpretation,
                "recommendations": recommendations,
            })

        test.record_section_result(section.name, result, minutes)

        if test.is_complete() and test.status == IN_PROGRESS:
            overall = self.interpretation.overall_results(
                test.section_scores('riasec'),
                test.section_scores('brainProfile'),
                test.section_scores('employability'),
            )
            test.mark_completed(overall)
            logger.info(f"🎉 Test {test.test_id} completed for user {user_id}")

        self._save(test)
        logger.info(f"📝 Saved {section.name} results for user {user_id}")
        return test

    # -------------------------
    # Access and statistics
    # -------------------------
    def check_section_access(self, user_id, section):
        """A completed section can only be retaken once every section is done."""
        section = get_section(section)
        test = self.get_or_create_test(user_id)
        completed = test.sections_completed.get(section.name, False)
        all_completed = all(test.sections_completed.get(s) for s in SECTION_ORDER)
        can_access = not completed or all_completed

        if not completed:
            message = 'Section available'
        elif all_completed:
            message = 'Section completed - available for retake'
        else:
            message = 'Section completed - finish the remaining sections to retake'

        return {
            'canAccess': can_access,
            'sectionCompleted': completed,
            'allSectionsCompleted': all_completed,
            'message': message,
        }

    def get_platform_stats(self, top=10):
        total_tests = self.collection.count_documents({})
        completed = list(self.collection.find({"status": COMPLETED}))
        completed_tests = len(completed)

        times = [doc.get('total_time_spent', 0) for doc in completed]
        codes = Counter(
            (doc.get('overall_results') or {}).get('hollandCode')
            for doc in completed
            if (doc.get('overall_results') or {}).get('hollandCode')
        )

        return {
            'totalTests': total_tests,
            'completedTests': completed_tests,
            'completionRate': (completed_tests / total_tests * 100) if total_tests else 0,
            'avgCompletionTime': (sum(times) / len(times)) if times else 0,
            'topHollandCodes': [
                {'code': code, 'count': count} for code, count in codes.most_common(top)
            ],
        }

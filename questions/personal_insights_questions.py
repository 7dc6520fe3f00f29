# Personal Insights - open-ended answers, not scored
CHARACTER_STRENGTH_OPTIONS = [
    'Leadership', 'Creativity', 'Empathy', 'Communication', 'Problem-solving',
    'Teamwork', 'Adaptability', 'Integrity', 'Perseverance', 'Critical thinking',
    'Innovation', 'Resilience'
]

VALUES_OPTIONS = [
    'Family', 'Success', 'Learning', 'Freedom', 'Security',
    'Adventure', 'Helping others', 'Creativity', 'Independence', 'Achievement',
    'Health', 'Happiness'
]

TEXT_MIN_LENGTH = 10
TEXT_MAX_LENGTH = 500
REQUIRED_SELECTIONS = 3

PERSONAL_INSIGHTS_QUESTIONS = [
    {
        "id": "whatYouLike",
        "title": "What do you like / enjoy doing?",
        "type": "text",
    },
    {
        "id": "whatYouAreGoodAt",
        "title": "What are you good at?",
        "type": "text",
    },
    {
        "id": "recentProjects",
        "title": "Mention any projects or initiatives that you have taken in recent past",
        "type": "text",
    },
    {
        "id": "characterStrengths",
        "title": "Select your top 3 character strengths",
        "type": "multiselect",
        "options": CHARACTER_STRENGTH_OPTIONS,
    },
    {
        "id": "valuesInLife",
        "title": "Select top 3 things you value in your life",
        "type": "multiselect",
        "options": VALUES_OPTIONS,
    },
]

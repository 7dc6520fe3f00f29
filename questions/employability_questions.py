# Employability Test (STEPS framework) - self ratings on a 1-5 scale
STEPS_CATEGORIES = ['S', 'T', 'E', 'P', 'Speaking']

STEPS_NAMES = {
    'S': 'Self Management',
    'T': 'Team Work',
    'E': 'Enterprising',
    'P': 'Problem Solving',
    'Speaking': 'Speaking & Listening',
}

EMPLOYABILITY_QUESTIONS = [
    # Self Management (S) - Questions 1-5
    {
        "id": 1,
        "category": "S",
        "question": "How good are you in managing your time?",
        "hint": "Think what others say about your Punctuality, Multi-tasking skills and ability to prioritize tasks when you have multiple things to do"
    },
    {
        "id": 2,
        "category": "S",
        "question": "How well groomed are you?",
        "hint": "Think what your friends or colleagues say about your dressing and what your parents say about your hygiene and grooming (including hair style, nails, dress, body odour, etc.)"
    },
    {
        "id": 3,
        "category": "S",
        "question": "How good are you in Managing Emotions?",
        "hint": "Think about times when you feel Anger, Frustration or Jealousy or when you experience stress, Bullying, Workplace Harassment or Personal insecurity; how do you cope with it? How quickly do you become normal?"
    },
    {
        "id": 4,
        "category": "S",
        "question": "How would you rate your confidence level?",
        "hint": "Think of situations when you faced challenging situations or had to do things you had never done before. Do you get easily discouraged? How is your self-esteem and self-image?"
    },
    {
        "id": 5,
        "category": "S",
        "question": "How would you rate your ability to manage finance and/or any other resources?",
        "hint": "Think if you often borrow from friends or family. Do you know how to prioritize your expenses? Are you able to make regular savings?"
    },

    # Team Work (T) - Questions 6-10
    {
        "id": 6,
        "category": "T",
        "question": "How would you rate your adaptability?",
        "hint": "Given an ambiguous situation or an unfamiliar space, how easily do you adjust to the new environment or people?"
    },
    {
        "id": 7,
        "category": "T",
        "question": "How would you rate your Decision Making skills?",
        "hint": "Given a dilemma or a choice, how easily do you make a decision? Do you regret your decisions often?"
    },
    {
        "id": 8,
        "category": "T",
        "question": "How would you rate your ability to Empathize with others?",
        "hint": "How far do you go to understand how others feel and why they act the way they do?"
    },
    {
        "id": 9,
        "category": "T",
        "question": "How effectively are you able to Promote Others?",
        "hint": "Do you like to give others credit for your success or your team's success? Does it give you pleasure to see others do well?"
    },
    {
        "id": 10,
        "category": "T",
        "question": "How effectively do you Manage Interpersonal Conflict?",
        "hint": "In a situation of conflict, how efficiently and effectively do you manage the situation? Can you work with people you do not agree with?"
    },

    # Enterprising (E) - Questions 11-15
    {
        "id": 11,
        "category": "E",
        "question": "How would you rate your ability to Build a Network?",
        "hint": "How comfortable are you in talking to new people. Do you make friends easily? Do you like to keep in touch with people."
    },
    {
        "id": 12,
        "category": "E",
        "question": "How good are you at Leading Others?",
        "hint": "Do others look up to you for directions? Do others trust you that you will do the best for them?"
    },
    {
        "id": 13,
        "category": "E",
        "question": "How would you rate your ability to Manage Risks?",
        "hint": "How comfortable are you with uncertainty? Can you handle unexpected challenges well?"
    },
    {
        "id": 14,
        "category": "E",
        "question": "How would you rate your ability to Stay motivated?",
        "hint": "How well do you maintain your enthusiasm during difficult times? Do you bounce back quickly from setbacks?"
    },
    {
        "id": 15,
        "category": "E",
        "question": "How good are you in Taking Initiative?",
        "hint": "Do you proactively identify and address problems? Do you take action without being asked?"
    },

    # Problem Solving (P) - Questions 16-20
    {
        "id": 16,
        "category": "P",
        "question": "Rate your ability to Spot Problems & Think critically",
        "hint": "How quickly can you identify issues or potential problems? Do you question assumptions and look at situations from multiple angles?"
    },
    {
        "id": 17,
        "category": "P",
        "question": "Rate your ability to ask the right questions to gather the required information",
        "hint": "Do you know what questions to ask to get the information you need? Are you good at clarifying unclear situations?"
    },
    {
        "id": 18,
        "category": "P",
        "question": "How easily do you admit your mistakes and learn from them?",
        "hint": "Are you comfortable acknowledging when you're wrong? Can you turn mistakes into learning opportunities?"
    },
    {
        "id": 19,
        "category": "P",
        "question": "How would you rate your Creativity?",
        "hint": "Can you come up with innovative solutions to problems? Are you good at generating new ideas and approaches?"
    },
    {
        "id": 20,
        "category": "P",
        "question": "How would you rate your Resilience?",
        "hint": "How well do you handle stress and pressure? Do you recover quickly from disappointments or failures?"
    },

    # Speaking & Listening - Questions 21-25
    {
        "id": 21,
        "category": "Speaking",
        "question": "How effective are you in Expressing Yourself / Sharing your story?",
        "hint": "Can you clearly communicate your thoughts and ideas? Are you comfortable speaking in front of others?"
    },
    {
        "id": 22,
        "category": "Speaking",
        "question": "Rate your Listening ability",
        "hint": "Do you pay full attention when others are speaking? Do you ask clarifying questions when needed?"
    },
    {
        "id": 23,
        "category": "Speaking",
        "question": "Rate your Body Language",
        "hint": "Are you aware of your non-verbal communication? Is your posture confident and open?"
    },
    {
        "id": 24,
        "category": "Speaking",
        "question": "Rate your articulation skills / verbal skills",
        "hint": "How clearly do you speak? Can you organize your thoughts logically when speaking?"
    },
    {
        "id": 25,
        "category": "Speaking",
        "question": "Rate your Digital Communication Skills",
        "hint": "How effectively do you communicate through emails, messages, and video calls? Can you convey your message clearly in written digital formats?"
    },
]

# Brain Profile Test - each set ranks four statements (1 = most like me, 4 = least like me)
BRAIN_QUADRANTS = ['L1', 'L2', 'R1', 'R2']

BRAIN_QUADRANT_NAMES = {
    'L1': 'Analyst and Realist',
    'L2': 'Conservative/Organizer',
    'R1': 'Strategist and Imaginative',
    'R2': 'Socializer and Empathic',
}

BRAIN_PROFILE_QUESTIONS = [
    {
        "id": 1,
        "statements": {
            "L1": "I am a practical person",
            "L2": "I am a disciplined person",
            "R1": "I am a creative person",
            "R2": "I am a friendly person"
        }
    },
    {
        "id": 2,
        "statements": {
            "L1": "I am motivated by achievements",
            "L2": "I am motivated by presenting my work as the best",
            "R1": "I am motivated by the fun involved in the process",
            "R2": "I am motivated by the new people I meet"
        }
    },
    {
        "id": 3,
        "statements": {
            "L1": "When talking, my arms are usually folded",
            "L2": "When talking, I usually point out my fingers on people or objects",
            "R1": "When talking, I move my arms a lot to emphasize my points",
            "R2": "When talking, I often touch other people"
        }
    },
    {
        "id": 4,
        "statements": {
            "L1": "I notice mistakes easily",
            "L2": "I notice details and remember facts",
            "R1": "I notice anything new or different",
            "R2": "I notice changes in behaviour"
        }
    },
    {
        "id": 5,
        "statements": {
            "L1": "I value logic and common sense",
            "L2": "I value realism fairness and structure",
            "R1": "I value new efforts and ideas",
            "R2": "I value harmony, forgiveness and caring"
        }
    },
    {
        "id": 6,
        "statements": {
            "L1": "I prefer magazines that have factual, figures and point to point information",
            "L2": "I prefer magazines that have detailed information, that can make me knowledgeable",
            "R1": "I prefer magazines that have interesting facts and with some cartoons or images",
            "R2": "I prefer magazines that have interesting stories about people and are colourful"
        }
    },
    {
        "id": 7,
        "statements": {
            "L1": "In a conflict situation I prefer to have all the facts and I stick to them",
            "L2": "In a conflict situation I ask questions and I want clear answers",
            "R1": "In a conflict situation I follow my gut feeling and solve it as quickly as possible",
            "R2": "In a conflict situation I listen to others to find a solution. I hate conflict"
        }
    },
    {
        "id": 8,
        "statements": {
            "L1": "I prefer not to be surprised or waste time",
            "L2": "Time management is important and every minute counts",
            "R1": "I love surprises and time management is not one of my strength",
            "R2": "I love to spend time with people and do not feel controlled by time"
        }
    },
    {
        "id": 9,
        "statements": {
            "L1": "My way or high way",
            "L2": "Practice makes a man perfect",
            "R1": "What is the purpose of life without fun",
            "R2": "If you don't have good friends, you have no existence"
        }
    },
    {
        "id": 10,
        "statements": {
            "L1": "I am a Perfectionist, neat and goal Oriented",
            "L2": "I am Organized Systematic and Precise",
            "R1": "I am innovative, creative and enthusiastic",
            "R2": "I am nurturing, supportive and empathetic"
        }
    },
]

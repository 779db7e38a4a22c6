# skillswap/modules/chat/mentor_replies.py
"""
Canned mentor answers used when no remote model is configured.
Rules are checked in order and the first keyword hit wins.
"""
from typing import Optional

HELP_REPLY = (
    "I can help you with:\n\n"
    "- Finding skill exchange partners\n"
    "- Suggesting learning resources\n"
    "- Planning your learning schedule\n"
    "- Tracking your progress\n"
    "- Personalized recommendations\n\n"
    "What specific area would you like help with?"
)

REACT_REPLY = (
    "React Study Materials & Learning Path\n\n"
    "**Essential Resources:**\n"
    "- Official React Documentation (react.dev)\n"
    "- React Tutorial for Beginners\n"
    "- Modern React with Hooks & Context\n"
    "- React Router for Navigation\n"
    "- State Management (Redux/Zustand)\n\n"
    "**Recommended Learning Path:**\n"
    "1. JavaScript ES6+ fundamentals\n"
    "2. React components & JSX\n"
    "3. Props & State management\n"
    "4. Hooks (useState, useEffect, custom hooks)\n"
    "5. React Router & Navigation\n"
    "6. API integration & data fetching\n"
    "7. Testing with Jest & React Testing Library\n\n"
    "**Practice Projects:**\n"
    "- Todo App with local storage\n"
    "- Weather App with API integration\n"
    "- E-commerce product catalog\n"
    "- Social media dashboard\n\n"
    "Would you like me to help you find a React teacher on SkillSwap?"
)

RESOURCES_REPLY = (
    "Looking for study materials? I can suggest resources for popular skills!\n\n"
    "Try asking me about specific technologies like:\n"
    "- \"React study materials\"\n"
    "- \"Python learning resources\"\n"
    "- \"JavaScript fundamentals\"\n"
    "- \"UI/UX design guides\"\n"
    "- \"Data science materials\"\n\n"
    "What specific skill would you like study materials for?"
)

LEARN_REPLY = (
    "Great! Learning new skills is exciting!\n\n"
    "Here's how I can help:\n"
    "- Browse available teachers in your area\n"
    "- Match you with compatible learning partners\n"
    "- Suggest structured learning paths\n"
    "- Help you schedule sessions\n\n"
    "What skill are you most interested in learning?"
)

TEACHER_REPLY = (
    "Looking for teachers? Perfect!\n\n"
    "I can help you:\n"
    "- Find teachers for specific skills\n"
    "- Check their availability and ratings\n"
    "- Connect you with compatible learning styles\n"
    "- Schedule your first session\n\n"
    "Try visiting the 'Find Teachers' section or tell me what skill you want to learn!"
)

SCHEDULE_REPLY = (
    "Ready to schedule a learning session?\n\n"
    "Here's what you can do:\n"
    "- Browse available time slots\n"
    "- Book video or in-person sessions\n"
    "- Set up recurring learning schedules\n"
    "- Get automatic reminders\n\n"
    "Would you like me to guide you through the booking process?"
)

DEFAULT_REPLY = (
    "Thanks for your message! I'm your AI Learning Mentor, and I'm here to help you make the most of SkillSwap.\n\n"
    "I can assist with finding teachers, scheduling sessions, tracking progress, and much more. "
    "What would you like to explore today?\n\n"
    "Try asking me about:\n"
    "- \"Help me find a teacher\"\n"
    "- \"How do I schedule a session?\"\n"
    "- \"What skills can I learn?\""
)

# (keywords, reply); substring match on the lower-cased message
KEYWORD_REPLIES = [
    (("help",), HELP_REPLY),
    (("react",), REACT_REPLY),
    (("study materials", "resources"), RESOURCES_REPLY),
    (("skill", "learn"), LEARN_REPLY),
    (("teacher", "find"), TEACHER_REPLY),
    (("schedule", "book"), SCHEDULE_REPLY),
]


def greeting_reply(user_name: Optional[str] = None) -> str:
    return (
        f"Hello {user_name or 'there'}! I'm your AI Learning Mentor. I'm here to help you find skill "
        "exchange partners, suggest learning paths, and guide you through your SkillSwap journey. "
        "What would you like to learn today?"
    )


def generate_local_reply(message: str, user_name: Optional[str] = None) -> str:
    lowered = message.lower()

    if "hello" in lowered or "hi" in lowered:
        return greeting_reply(user_name)

    for keywords, reply in KEYWORD_REPLIES:
        if any(keyword in lowered for keyword in keywords):
            return reply

    return DEFAULT_REPLY

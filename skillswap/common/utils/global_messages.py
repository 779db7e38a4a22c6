class GlobalMessages:
    # Booking Messages
    SESSION_SCHEDULED = "Session scheduled successfully!"
    SESSION_CANCELLED = "Session cancelled successfully"
    MISSING_REQUIRED_FIELDS = "Please fill in all required fields"
    SESSIONS_UNAVAILABLE = "We couldn't load your sessions right now."

    # Achievement Messages
    ACHIEVEMENT_UNLOCKED = "Amazing work! You've just earned the '{name}' achievement. Keep up the momentum!"

    # Profile Messages
    PROFILE_UPDATED = "Profile updated successfully."
    SKILL_ADDED = "Added \"{skill}\" to your {kind} skills."
    SKILL_REMOVED = "Removed \"{skill}\" from your {kind} skills."
    SKILL_ALREADY_EXISTS = "This skill is already in your {kind} list."

    # Teacher Messages
    TEACHER_PROFILE_CREATED = "Your teacher profile has been created successfully!"

    # Chat Messages
    CHAT_GREETING = (
        "Hello! I'm your AI learning mentor. I can help you find study resources, suggest "
        "learning paths, and connect you with the perfect skill exchange partners. "
        "What would you like to learn today?"
    )
    CHAT_UNAVAILABLE = (
        "I'm having trouble connecting right now. Please try again in a moment. In the meantime, "
        "feel free to explore your profile and browse available skills!"
    )

    # Auth Messages
    INVALID_CREDENTIALS = "Could not validate credentials"

# skillswap/router/routers.py

from fastapi import FastAPI
from skillswap.modules.achievements.achievement_controller import router as achievements_router
from skillswap.modules.chat.chat_controller import router as chat_router
from skillswap.modules.notifications.notification_controller import router as notification_router
from skillswap.modules.sessions.session_controller import router as session_router
from skillswap.modules.teachers.teacher_controller import router as teacher_router
from skillswap.modules.user.user_controller import router as user_router

def include_routers(app: FastAPI) -> None:
    app.include_router(achievements_router)
    app.include_router(chat_router)
    app.include_router(notification_router)
    app.include_router(session_router)
    app.include_router(teacher_router)
    app.include_router(user_router)

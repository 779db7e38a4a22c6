# skillswap/modules/teachers/teacher_controller.py

from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query, status
from sqlalchemy.ext.asyncio import AsyncSession

from skillswap.modules.teachers import teacher_service, schemas
from skillswap.common.database.database import get_db_session
from skillswap.common.exceptions import MissingFieldError
from skillswap.common.utils.global_messages import GlobalMessages
from skillswap.auth.dependencies import CurrentUser, get_current_user

router = APIRouter(prefix="/teachers", tags=["teachers"])

@router.get("", response_model=List[schemas.TeacherResponse])
async def list_teachers(
    search: Optional[str] = Query(None, description="Matches name, skills or bio"),
    skill: Optional[str] = Query(None, description="Matches any listed skill"),
    db: AsyncSession = Depends(get_db_session)
):
    """
    Browse the teacher directory.
    """
    return await teacher_service.list_teachers(db, search=search, skill=skill)

@router.get("/skills", response_model=List[str])
async def list_teacher_skills(db: AsyncSession = Depends(get_db_session)):
    return teacher_service.all_skills(await teacher_service.get_teachers(db))

@router.post("", response_model=schemas.BecomeTeacherResponse, status_code=status.HTTP_201_CREATED)
async def become_teacher(
    payload: schemas.BecomeTeacherRequest,
    current_user: CurrentUser = Depends(get_current_user),
    db: AsyncSession = Depends(get_db_session)
):
    """
    Create a teacher listing for the current user.

    - **skills**, **hourly_rate** and **bio** are required.
    - **location** defaults to Remote, **experience** to "New teacher".
    """
    try:
        listing = await teacher_service.create_teacher_listing(current_user, payload.model_dump(), db)
    except MissingFieldError as e:
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            detail={"message": GlobalMessages.MISSING_REQUIRED_FIELDS, "missing_fields": e.fields}
        )
    return {"message": GlobalMessages.TEACHER_PROFILE_CREATED, "teacher": listing}

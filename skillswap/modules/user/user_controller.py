# skillswap/modules/user/user_controller.py

from fastapi import APIRouter, BackgroundTasks, Depends, HTTPException, status
from sqlalchemy.ext.asyncio import AsyncSession

from skillswap.modules.user import user_service, schemas
from skillswap.common.database.database import get_db_session
from skillswap.common.exceptions import ValidationError
from skillswap.common.utils.global_functions import resPayloadData
from skillswap.common.utils.global_messages import GlobalMessages
from skillswap.events.dispatcher import dispatcher
from skillswap.auth.dependencies import CurrentUser, get_current_user

router = APIRouter(prefix="/user", tags=["user"])

@router.get("/profile", response_model=schemas.ProfileResponse)
async def get_profile(
    current_user: CurrentUser = Depends(get_current_user),
    db: AsyncSession = Depends(get_db_session)
):
    """
    Retrieve the profile for the currently authenticated user.
    """
    return await user_service.get_profile(current_user, db)

@router.put("/profile", response_model=schemas.ProfileResponse)
async def update_profile(
    profile_data: schemas.UpdateProfileRequest,
    current_user: CurrentUser = Depends(get_current_user),
    db: AsyncSession = Depends(get_db_session)
):
    """
    Update the profile of the currently authenticated user.

    Only the provided fields will be updated.
    """
    return await user_service.update_profile(current_user, profile_data.model_dump(), db)

@router.get("/skills", response_model=schemas.UserSkillsResponse)
async def get_skills(
    current_user: CurrentUser = Depends(get_current_user),
    db: AsyncSession = Depends(get_db_session)
):
    """
    Skills the user can teach and skills they want to learn.
    """
    return await user_service.get_skills(current_user.id, db)

@router.post("/skills", status_code=status.HTTP_201_CREATED)
async def add_skill(
    payload: schemas.AddSkillRequest,
    background_tasks: BackgroundTasks,
    current_user: CurrentUser = Depends(get_current_user),
    db: AsyncSession = Depends(get_db_session)
):
    try:
        skills = await user_service.add_skill(current_user.id, payload.kind.value, payload.name, db)
    except user_service.DuplicateSkillError as e:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(e))
    except ValidationError as e:
        raise HTTPException(status_code=status.HTTP_422_UNPROCESSABLE_ENTITY, detail=str(e))

    if payload.kind == schemas.SkillKind.TEACH:
        background_tasks.add_task(dispatcher.dispatch, "skill_added", user_id=current_user.id)

    message = GlobalMessages.SKILL_ADDED.format(skill=payload.name, kind=payload.kind.value)
    return resPayloadData(status.HTTP_201_CREATED, False, message, data=skills)

@router.delete("/skills/{kind}/{name}")
async def remove_skill(
    kind: schemas.SkillKind,
    name: str,
    current_user: CurrentUser = Depends(get_current_user),
    db: AsyncSession = Depends(get_db_session)
):
    skills = await user_service.remove_skill(current_user.id, kind.value, name, db)
    if skills is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Skill not found in your list")

    message = GlobalMessages.SKILL_REMOVED.format(skill=name, kind=kind.value)
    return resPayloadData(status.HTTP_200_OK, False, message, data=skills)

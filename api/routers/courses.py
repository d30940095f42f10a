"""Course API endpoints."""

import logging
from typing import List

from bson import ObjectId
from fastapi import APIRouter, Depends, HTTPException

from api.dependencies import get_current_user_id, get_db, object_id_path
from api.schemas import CreateCourseRequest, CreatedCourseResponse, MessageResponse
from database.db_manager import DatabaseManager
from models import Course
from models.course import LEGEND_MARKER

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/courses", response_model=List[Course])
@router.get("/golfcourses", response_model=List[Course], include_in_schema=False)
async def list_courses(db: DatabaseManager = Depends(get_db)):
    return await db.courses.list_courses()


@router.get("/courses/{id}", response_model=Course)
@router.get("/golfcourses/{id}", response_model=Course, include_in_schema=False)
async def get_course(
    course_id: ObjectId = Depends(object_id_path),
    db: DatabaseManager = Depends(get_db),
):
    course = await db.courses.get_course(course_id)
    if not course:
        raise HTTPException(404, "Course not found")
    return course


@router.post(
    "/golfcourses",
    response_model=CreatedCourseResponse,
    response_model_exclude_none=True,
    status_code=201,
)
async def create_course(
    req: CreateCourseRequest,
    user_id: str = Depends(get_current_user_id),
    db: DatabaseManager = Depends(get_db),
):
    """Create a course. Names containing "augusta" get a rating floor of 4.9."""
    course = Course(**req.model_dump())
    is_legend = course.apply_legend_floor()
    created = await db.courses.create_course(course)
    logger.info("Course %s created by user %s", created.id, user_id)
    return CreatedCourseResponse(
        **created.model_dump(),
        easter_egg=LEGEND_MARKER if is_legend else None,
    )


@router.delete("/golfcourses/{id}", response_model=MessageResponse)
async def delete_course(
    user_id: str = Depends(get_current_user_id),
    course_id: ObjectId = Depends(object_id_path),
    db: DatabaseManager = Depends(get_db),
):
    deleted = await db.courses.delete_course(course_id)
    if not deleted:
        raise HTTPException(404, "Course not found")
    logger.info("Course %s deleted by user %s", course_id, user_id)
    return MessageResponse(message="Deleted")

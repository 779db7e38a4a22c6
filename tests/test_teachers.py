import pytest

from skillswap.common.exceptions import MissingFieldError
from skillswap.models.models import TeacherListing
from skillswap.modules.teachers import teacher_service
from skillswap.seed.seed import SAMPLE_TEACHERS


@pytest.fixture
def teachers():
    return [TeacherListing(**row) for row in SAMPLE_TEACHERS]


def names(listings):
    return [t.name for t in listings]


def test_no_filters_returns_everyone(teachers):
    assert names(teacher_service.filter_teachers(teachers)) == [
        "Sarah Chen", "Michael Rodriguez", "Emily Johnson",
    ]


def test_search_matches_name_skill_or_bio(teachers):
    assert names(teacher_service.filter_teachers(teachers, search="sarah")) == ["Sarah Chen"]
    assert names(teacher_service.filter_teachers(teachers, search="FIGMA")) == ["Emily Johnson"]
    assert names(teacher_service.filter_teachers(teachers, search="data scientist")) == ["Michael Rodriguez"]


def test_skill_filter_is_substring(teachers):
    assert names(teacher_service.filter_teachers(teachers, skill="script")) == ["Sarah Chen"]
    assert names(teacher_service.filter_teachers(teachers, skill="design")) == ["Emily Johnson"]


def test_search_and_skill_combine(teachers):
    assert teacher_service.filter_teachers(teachers, search="sarah", skill="python") == []


def test_all_skills_sorted_unique(teachers):
    teachers.append(TeacherListing(name="Dup", skills=["React"], bio="", hourly_rate=10))
    skills = teacher_service.all_skills(teachers)
    assert skills == sorted(skills)
    assert skills.count("React") == 1
    assert "Machine Learning" in skills


def test_parse_skills():
    assert teacher_service.parse_skills(" Go, Rust ,, ") == ["Go", "Rust"]
    assert teacher_service.parse_skills("") == []


async def test_create_listing_requires_fields(user):
    with pytest.raises(MissingFieldError) as exc:
        await teacher_service.create_teacher_listing(user, {"skills": " , ", "bio": ""}, db=None)
    assert exc.value.fields == ["skills", "hourly_rate", "bio"]


def test_become_teacher_endpoint_missing_fields(client):
    res = client.post("/teachers", json={"skills": "Go", "bio": "Gopher"})
    assert res.status_code == 422
    assert res.json()["detail"]["missing_fields"] == ["hourly_rate"]

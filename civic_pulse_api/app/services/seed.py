"""
Demo dataset for a freshly started store.

``seed_storage`` loads a small, internally consistent set of records
that touches every relationship: officials with committees, activities
that citizen issues are matched to, vote records linking officials to
activities and action plans linking issues to officials and
activities.  Records are created through the regular storage
operations, so seeded records look exactly like created ones.
"""

from __future__ import annotations

import logging
from datetime import datetime, timezone

from civic_pulse_api.app.schemas.action_plan import ActionPlanCreate
from civic_pulse_api.app.schemas.activity import GovernmentActivityCreate
from civic_pulse_api.app.schemas.issue import CitizenIssueCreate, CitizenIssueUpdate
from civic_pulse_api.app.schemas.official import OfficialCreate
from civic_pulse_api.app.schemas.statistic import StatisticCreate
from civic_pulse_api.app.schemas.vote_record import VoteRecordCreate
from civic_pulse_api.app.services.storage import Storage

logger = logging.getLogger(__name__)


class SeedError(RuntimeError):
    """Raised when the demo dataset cannot be loaded."""


def _day(year: int, month: int, day: int) -> datetime:
    return datetime(year, month, day, tzinfo=timezone.utc)


def seed_storage(storage: Storage) -> None:
    """Populate ``storage`` with the demo dataset.

    Any failure is logged and re-raised as :class:`SeedError`; the
    application must not start serving with a half-loaded store.
    """
    try:
        _load(storage)
    except Exception as exc:
        logger.critical("Failed to seed storage: %s", exc)
        raise SeedError("failed to seed storage") from exc
    logger.info(
        "Seeded storage: %d officials, %d activities, %d issues, %d vote records, "
        "%d statistics, %d action plans",
        len(storage.get_all_officials()),
        len(storage.get_all_government_activities()),
        len(storage.get_all_citizen_issues()),
        len(storage.get_all_vote_records()),
        len(storage.get_all_statistics()),
        len(storage.get_all_action_plans()),
    )


def _load(storage: Storage) -> None:
    # Officials
    johnson = storage.create_official(OfficialCreate(
        name="Sarah Johnson",
        role="City Council Member",
        district="District 5",
        party="Democratic",
        phone="(555) 123-4567",
        email="sarah.johnson@citycouncil.gov",
        committees=["Transportation Committee", "Public Safety Committee"],
    ))
    chen = storage.create_official(OfficialCreate(
        name="Michael Chen",
        role="State Senator",
        district="District 11",
        party="Democratic",
        phone="(555) 234-5678",
        email="michael.chen@senate.gov",
        committees=["Health & Human Services", "Education"],
    ))
    rodriguez = storage.create_official(OfficialCreate(
        name="Emily Rodriguez",
        role="Mayor",
        party="Independent",
        phone="(555) 345-6789",
        email="mayor@city.gov",
        committees=["Executive Office"],
    ))

    # Government activities
    safe_streets = storage.create_government_activity(GovernmentActivityCreate(
        type="bill",
        title="Safe Streets Initiative - HB 2847",
        description=(
            "Comprehensive bill to improve pedestrian safety through enhanced crosswalks, "
            "traffic calming measures, and increased penalties for reckless driving in "
            "residential areas."
        ),
        category="infrastructure",
        date=_day(2025, 11, 15),
        status="in-progress",
        location="State Capitol",
        vote_result="pending",
    ))
    health_meeting = storage.create_government_activity(GovernmentActivityCreate(
        type="meeting",
        title="City Council Public Health Committee Meeting",
        description=(
            "Discussion on expanding access to healthy food options in underserved "
            "neighborhoods, including farmers market subsidies and grocery store incentives."
        ),
        category="health",
        date=_day(2025, 11, 5),
        status="upcoming",
        location="City Hall, Room 400",
        agenda_items=[
            "Farmers market expansion proposal",
            "Grocery store tax incentives",
            "Community health metrics review",
            "Public comment period",
        ],
    ))
    safety_budget = storage.create_government_activity(GovernmentActivityCreate(
        type="vote",
        title="Public Safety Budget Allocation - Resolution 2024-089",
        description=(
            "Vote on allocating $2.5M to community policing programs, mental health crisis "
            "response teams, and neighborhood watch support."
        ),
        category="safety",
        date=_day(2025, 10, 20),
        status="completed",
        location="City Council Chambers",
        vote_result="passed",
    ))
    storage.create_government_activity(GovernmentActivityCreate(
        type="budget",
        title="FY 2026 Education Budget Proposal",
        description=(
            "Proposed $450M budget for public schools including teacher salary increases, "
            "facility upgrades, and expanded after-school programs."
        ),
        category="education",
        date=_day(2025, 12, 1),
        status="upcoming",
        location="School Board Office",
        agenda_items=[
            "Budget overview",
            "Revenue projections",
            "Expenditure breakdown",
            "Public input session",
        ],
    ))
    storage.create_government_activity(GovernmentActivityCreate(
        type="meeting",
        title="Environmental Committee: Climate Action Plan",
        description=(
            "Review and discussion of the city's 2025-2030 climate action plan, including "
            "renewable energy targets and emissions reduction strategies."
        ),
        category="environment",
        date=_day(2025, 11, 12),
        status="upcoming",
        location="Virtual Meeting",
        agenda_items=[
            "Renewable energy goals",
            "Public transit expansion",
            "Green building requirements",
            "Community feedback",
        ],
    ))

    # Citizen issues; the first two are already matched to activities
    intersection = storage.create_citizen_issue(CitizenIssueCreate(
        title="Dangerous intersection at Main St and 5th Ave",
        description=(
            "This intersection has had 3 accidents in the past month. There are no traffic "
            "lights and visibility is poor. We need a stop light or at least stop signs on "
            "all corners."
        ),
        category="infrastructure",
        location="Downtown District",
        zipcode="94102",
    ))
    storage.update_citizen_issue(intersection.id, CitizenIssueUpdate(
        votes=127, status="matched", matched_activity_id=safe_streets.id,
    ))

    grocery = storage.create_citizen_issue(CitizenIssueCreate(
        title="No grocery stores within walking distance",
        description=(
            "Our neighborhood doesn't have a single grocery store selling fresh produce. "
            "The nearest one is 2 miles away, making it difficult for elderly residents and "
            "those without cars to access healthy food."
        ),
        category="health",
        location="Sunset District",
        zipcode="94103",
    ))
    storage.update_citizen_issue(grocery.id, CitizenIssueUpdate(
        votes=89, status="matched", matched_activity_id=health_meeting.id,
    ))

    pending_issues = [
        (CitizenIssueCreate(
            title="Inadequate street lighting in residential area",
            description=(
                "Our street has very poor lighting at night, creating safety concerns. "
                "Several residents have reported feeling unsafe walking home after dark."
            ),
            category="safety",
            location="Mission District",
            zipcode="94110",
        ), 56),
        (CitizenIssueCreate(
            title="Overcrowded elementary school classrooms",
            description=(
                "The local elementary school has class sizes of 35+ students, making it "
                "difficult for teachers to provide individual attention. We need more funding "
                "for additional classrooms and teachers."
            ),
            category="education",
            location="Richmond District",
            zipcode="94102",
        ), 72),
        (CitizenIssueCreate(
            title="Park needs better maintenance and playground equipment",
            description=(
                "Lincoln Park hasn't been properly maintained. The playground equipment is "
                "rusty and potentially dangerous, and the grass areas are overgrown."
            ),
            category="environment",
            location="Lincoln Park",
            zipcode="94103",
        ), 43),
    ]
    for data, votes in pending_issues:
        issue = storage.create_citizen_issue(data)
        storage.update_citizen_issue(issue.id, CitizenIssueUpdate(votes=votes))

    # Vote records
    storage.create_vote_record(VoteRecordCreate(
        official_id=johnson.id,
        activity_id=safety_budget.id,
        vote="yes",
        issue="Public Safety Budget Allocation",
        date=_day(2025, 10, 20),
    ))
    storage.create_vote_record(VoteRecordCreate(
        official_id=chen.id,
        activity_id=safe_streets.id,
        vote="yes",
        issue="Safe Streets Initiative",
        date=_day(2025, 10, 18),
    ))

    # Statistics: (area, type, crime rate, median income, education, housing, population)
    for area, area_type, crime, income, education, housing, population in [
        ("94102", "zipcode", 42, 85000, 78, 950000, 28500),
        ("94103", "zipcode", 38, 72000, 72, 850000, 22300),
        ("94110", "zipcode", 45, 68000, 70, 780000, 31200),
        ("oakland", "city", 52, 73000, 68, 720000, 440000),
        ("berkeley", "city", 35, 95000, 85, 1200000, 124000),
        ("california", "state", 40, 78000, 75, 650000, 39500000),
    ]:
        storage.create_statistic(StatisticCreate(
            area=area,
            area_type=area_type,
            crime_rate=crime,
            median_income=income,
            education_score=education,
            housing_cost=housing,
            population=population,
            year=2024,
        ))

    # Action plans
    storage.create_action_plan(ActionPlanCreate(
        issue_id=intersection.id,
        official_id=johnson.id,
        activity_id=safe_streets.id,
        action_type="call",
        title="Contact Council Member Johnson about Safe Streets Initiative",
        description=(
            "Call Council Member Sarah Johnson to express support for the Safe Streets "
            "Initiative (HB 2847). Mention the dangerous intersection at Main St and 5th Ave "
            "as a specific example of why this legislation is needed."
        ),
        due_date=_day(2025, 11, 10),
        priority="high",
    ))
    storage.create_action_plan(ActionPlanCreate(
        issue_id=grocery.id,
        official_id=chen.id,
        activity_id=health_meeting.id,
        action_type="attend",
        title="Attend Public Health Committee Meeting",
        description=(
            "Attend the City Council Public Health Committee meeting on November 5th to voice "
            "concerns about food access in the Sunset District during the public comment period."
        ),
        due_date=_day(2025, 11, 5),
        priority="high",
    ))
    storage.create_action_plan(ActionPlanCreate(
        issue_id=grocery.id,
        official_id=rodriguez.id,
        activity_id=None,
        action_type="email",
        title="Email Mayor Rodriguez about Food Desert Issues",
        description=(
            "Send an email to Mayor Emily Rodriguez highlighting the lack of grocery stores in "
            "underserved neighborhoods and requesting support for grocery store incentives."
        ),
        due_date=_day(2025, 11, 15),
        priority="medium",
    ))

"""Persistence tests for plan creation and active-plan lookup."""

from datetime import date

import pytest

from summit.core.errors import InvalidArgumentError
from summit.db.models import Plan
from summit.plans.repository import create_plan, get_active_plan, list_plans, plan_phases
from summit.plans.types import Phase

USER_ID = "user-test-1"

PHASES = [Phase(name="Base", week_start=1, week_end=3), Phase(name="Peak", week_start=4, week_end=4)]


def test_create_and_fetch_active_plan(db_session):
    plan = create_plan(db_session, USER_ID, "Ten-pitch day", date(2026, 3, 2), 4, PHASES)

    active = get_active_plan(db_session, USER_ID)

    assert active is not None
    assert active.id == plan.id
    assert plan_phases(active) == PHASES


def test_no_active_plan(db_session):
    assert get_active_plan(db_session, USER_ID) is None


def test_paused_plan_is_not_active(db_session):
    plan = create_plan(db_session, USER_ID, "Ten-pitch day", date(2026, 3, 2), 4, PHASES)
    plan.status = "paused"
    db_session.commit()

    assert get_active_plan(db_session, USER_ID) is None


def test_create_abandons_previous_plan(db_session):
    old = create_plan(db_session, USER_ID, "Old", date(2026, 3, 2), 4, PHASES)
    new = create_plan(db_session, USER_ID, "New", date(2026, 3, 9), 4, PHASES)

    assert get_active_plan(db_session, USER_ID).id == new.id
    assert db_session.get(Plan, old.id).status == "abandoned"


def test_plans_are_per_user(db_session):
    create_plan(db_session, "someone-else", "Theirs", date(2026, 3, 2), 4, PHASES)
    mine = create_plan(db_session, USER_ID, "Mine", date(2026, 3, 2), 4, PHASES)

    assert get_active_plan(db_session, USER_ID).id == mine.id
    assert get_active_plan(db_session, "someone-else").name == "Theirs"


def test_rejects_non_monday_start(db_session):
    with pytest.raises(InvalidArgumentError) as exc_info:
        create_plan(db_session, USER_ID, "Bad", date(2026, 3, 3), 4, PHASES)

    assert exc_info.value.argument == "start_date"
    assert get_active_plan(db_session, USER_ID) is None


def test_rejects_phases_not_covering_plan(db_session):
    with pytest.raises(InvalidArgumentError):
        create_plan(db_session, USER_ID, "Bad", date(2026, 3, 2), 6, PHASES)


def test_list_plans_newest_first_with_status_filter(db_session):
    first = create_plan(db_session, USER_ID, "First", date(2026, 3, 2), 4, PHASES)
    second = create_plan(db_session, USER_ID, "Second", date(2026, 3, 9), 4, PHASES)
    create_plan(db_session, "someone-else", "Theirs", date(2026, 3, 2), 4, PHASES)

    assert [p.id for p in list_plans(db_session, USER_ID)] == [second.id, first.id]
    assert [p.id for p in list_plans(db_session, USER_ID, status="abandoned")] == [first.id]
    assert list_plans(db_session, USER_ID, status="completed") == []

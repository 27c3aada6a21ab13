"""
Read-only statistics: totals, per-exercise breakdown, recent days, join view.
"""
import pytest

from conftest import SQUATS
from workout_tracker.services import AccountService, AnalyticsService, WorkoutService


def _log(user_id, exercise="Squats", sets=4, reps=15, weight=135, duration=20, day="2025-10-21"):
    return WorkoutService.log_workout(user_id, {
        "exercise_name": exercise,
        "sets": sets,
        "reps": reps,
        "weight": weight,
        "duration": duration,
        "workout_date": day,
    })


@pytest.fixture
def user_id(app_ctx):
    return AccountService.register("alice", "alice@x.com", "Secret1!")


@pytest.fixture
def other_user_id(app_ctx):
    return AccountService.register("bob", "bob@x.com", "Hunter22!")


def test_stats_for_single_squat_session(user_id):
    _log(user_id)

    stats = AnalyticsService.get_stats(user_id)

    assert stats["total_workouts"] == 1
    assert stats["total_reps"] == 60
    assert stats["total_weight"] == 135
    assert stats["total_duration"] == 20
    assert stats["avg_duration"] == 20
    assert stats["max_weight"] == 135


def test_stats_with_no_workouts(user_id):
    assert AnalyticsService.get_stats(user_id) == {
        "total_workouts": 0,
        "total_reps": 0,
        "total_weight": 0,
        "total_duration": 0,
        "avg_duration": None,
        "max_weight": None,
    }


def test_stats_aggregate_and_are_idempotent(user_id):
    _log(user_id, sets=3, reps=10, weight=100, duration=30)
    _log(user_id, exercise="Bench Press", sets=5, reps=5, weight=185.5, duration=10)

    first = AnalyticsService.get_stats(user_id)
    second = AnalyticsService.get_stats(user_id)

    assert first == second
    assert first["total_workouts"] == 2
    assert first["total_reps"] == 55
    assert first["total_weight"] == pytest.approx(285.5)
    assert first["total_duration"] == 40
    assert first["avg_duration"] == pytest.approx(20.0)
    assert first["max_weight"] == pytest.approx(185.5)


def test_breakdown_groups_and_orders_by_session_count(user_id):
    for _ in range(3):
        _log(user_id, exercise="Squats", weight=100)
    _log(user_id, exercise="Squats", weight=200)
    _log(user_id, exercise="Push-ups", sets=3, reps=20, weight=0)

    breakdown = AnalyticsService.get_exercise_breakdown(user_id)

    assert [row["exercise_name"] for row in breakdown] == ["Squats", "Push-ups"]
    squats = breakdown[0]
    assert squats["session_count"] == 4
    assert squats["total_reps"] == 240
    assert squats["avg_weight"] == pytest.approx(125.0)
    assert squats["max_weight"] == 200
    assert breakdown[1]["total_reps"] == 60


def test_breakdown_is_limited_to_top_ten(user_id):
    for i in range(12):
        for _ in range(12 - i):
            _log(user_id, exercise=f"Exercise {i:02d}")

    breakdown = AnalyticsService.get_exercise_breakdown(user_id)

    assert len(breakdown) == 10
    assert [row["session_count"] for row in breakdown] == list(range(12, 2, -1))


def test_breakdown_only_includes_owner_entries(user_id, other_user_id):
    _log(user_id, exercise="Squats")
    _log(other_user_id, exercise="Deadlift")
    _log(other_user_id, exercise="Squats")

    mine = AnalyticsService.get_exercise_breakdown(user_id)
    theirs = AnalyticsService.get_exercise_breakdown(other_user_id)

    assert [(r["exercise_name"], r["session_count"]) for r in mine] == [("Squats", 1)]
    assert {r["exercise_name"] for r in theirs} == {"Deadlift", "Squats"}


def test_recent_workouts_cover_five_most_recent_dates(user_id):
    days = ["2025-10-01", "2025-10-02", "2025-10-03", "2025-10-04", "2025-10-05", "2025-10-06"]
    ids = {day: _log(user_id, day=day) for day in days}
    extra_same_day = _log(user_id, exercise="Lunges", day="2025-10-06")

    recent = AnalyticsService.get_recent_workouts(user_id)

    assert [r["workout_id"] for r in recent] == [
        extra_same_day,
        ids["2025-10-06"],
        ids["2025-10-05"],
        ids["2025-10-04"],
        ids["2025-10-03"],
        ids["2025-10-02"],
    ]


def test_recent_workouts_with_few_dates(user_id):
    a = _log(user_id, day="2025-10-01")
    b = _log(user_id, day="2025-10-03")

    assert [r["workout_id"] for r in AnalyticsService.get_recent_workouts(user_id)] == [b, a]


def test_recent_workouts_empty(user_id):
    assert AnalyticsService.get_recent_workouts(user_id) == []


def test_user_with_workouts_join(user_id):
    older = _log(user_id, day="2025-10-01")
    newer = _log(user_id, exercise="Deadlift", day="2025-10-05")

    rows = AnalyticsService.get_user_with_workouts(user_id)

    assert [r["workout_id"] for r in rows] == [newer, older]
    for row in rows:
        assert row["username"] == "alice"
        assert row["email"] == "alice@x.com"
        assert row["total_workouts"] == 2
        assert row["streak"] == 0


def test_user_with_workouts_empty_for_existing_user(user_id):
    assert AnalyticsService.get_user_with_workouts(user_id) == []
    assert AccountService.get_user(user_id)["username"] == "alice"


# ============================================================
# HTTP contract
# ============================================================

def test_stats_scenario_over_http(client, alice):
    user_id, headers = alice
    client.post("/api/workouts", json={"userId": user_id, **SQUATS}, headers=headers)

    stats = client.get(f"/api/stats/{user_id}", headers=headers).get_json()
    assert stats["total_workouts"] == 1
    assert stats["total_reps"] == 60
    assert stats["total_weight"] == 135
    assert stats["total_duration"] == 20
    assert stats["max_weight"] == 135

    breakdown = client.get(f"/api/exercise-breakdown/{user_id}", headers=headers).get_json()
    assert breakdown[0]["exercise_name"] == "Squats"

    recent = client.get(f"/api/recent-workouts/{user_id}", headers=headers).get_json()
    assert len(recent) == 1

    joined = client.get(f"/api/user-workouts/{user_id}", headers=headers).get_json()
    assert joined[0]["username"] == "alice"
    assert joined[0]["exercise_name"] == "Squats"


@pytest.mark.parametrize(
    "path",
    ["/api/stats/{}", "/api/exercise-breakdown/{}", "/api/recent-workouts/{}", "/api/user-workouts/{}"],
)
def test_stats_endpoints_are_private(client, alice, bob, path):
    user_id, _ = alice
    _, bob_headers = bob
    assert client.get(path.format(user_id), headers=bob_headers).status_code == 403

"""
DDL for the precomputed `leaderboard` view over quiz_results.
Shared by the Alembic revision and tests so both build the same view.
"""
from codequest.services.scoring import MIN_TIME_IN_MINUTES

VIEW_NAME = "leaderboard"


def _efficiency_expr(dialect_name: str) -> str:
    # GREATEST is MAX() in SQLite
    floor_fn = "MAX" if dialect_name == "sqlite" else "GREATEST"
    return (
        f"(CAST(xp_points AS FLOAT) / {floor_fn}(CAST(time_in_seconds AS FLOAT) / 60, {MIN_TIME_IN_MINUTES})) * "
        "CASE difficulty "
        "WHEN 'beginner' THEN 1.0 "
        "WHEN 'intermediate' THEN 1.5 "
        "ELSE 2.0 END"
    )


def create_view_sql(dialect_name: str) -> str:
    efficiency = _efficiency_expr(dialect_name)
    if dialect_name == "postgresql":
        # ROUND(double precision, int) does not exist in PostgreSQL
        rounded = f"ROUND(CAST({efficiency} AS NUMERIC), 2)"
    else:
        rounded = f"ROUND({efficiency}, 2)"
    return (
        f"CREATE VIEW {VIEW_NAME} AS "
        "SELECT id, username, topics, difficulty, xp_points, time_in_seconds, "
        "questions_count, correct_answers, created_at, "
        f"{rounded} AS efficiency, "
        f"ROW_NUMBER() OVER (ORDER BY {rounded} DESC, created_at ASC) AS rank "
        "FROM quiz_results"
    )


def drop_view_sql() -> str:
    return f"DROP VIEW IF EXISTS {VIEW_NAME}"

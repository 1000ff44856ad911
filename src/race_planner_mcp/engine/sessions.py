"""Session synthesizer: session types, days, distances and paces per week."""

from dataclasses import dataclass
from datetime import date

from race_planner_mcp.i18n import session_description, session_title, weekday_name
from race_planner_mcp.models.training_plan import (
    RaceType,
    SessionType,
    TrainingSession,
    WeekLoadProfile,
    WeekPhase,
)
from race_planner_mcp.utils.dates import add_days
from race_planner_mcp.utils.formatting import clamp, format_pace, format_pace_range, round_to_half

PEAK_LONG_RUN_KM = {
    RaceType.MARATHON: 32.0,
    RaceType.HALF_MARATHON: 20.0,
    RaceType.TEN_K: 13.0,
    RaceType.FIVE_K: 8.0,
}
MIN_LONG_RUN_KM = 4.0

# Session order per training-days count; long run always last.
SESSION_TYPES = {
    2: (SessionType.EASY, SessionType.LONG),
    3: (SessionType.EASY, SessionType.TEMPO, SessionType.LONG),
    4: (SessionType.EASY, SessionType.INTERVAL, SessionType.TEMPO, SessionType.LONG),
    5: (SessionType.RECOVERY, SessionType.EASY, SessionType.INTERVAL, SessionType.TEMPO, SessionType.LONG),
    6: (
        SessionType.RECOVERY, SessionType.EASY, SessionType.INTERVAL,
        SessionType.EASY, SessionType.TEMPO, SessionType.LONG,
    ),
    7: (
        SessionType.RECOVERY, SessionType.EASY, SessionType.INTERVAL,
        SessionType.EASY, SessionType.TEMPO, SessionType.EASY, SessionType.LONG,
    ),
}

# Day offsets from Monday (0) for each slot above; the long run lands on Sunday.
DAY_PATTERNS = {
    2: (2, 6),
    3: (1, 3, 6),
    4: (1, 2, 4, 6),
    5: (1, 2, 3, 4, 6),
    6: (0, 1, 2, 3, 4, 6),
    7: (0, 1, 2, 3, 4, 5, 6),
}

# (fast delta, slow delta) in min/km relative to target pace
PACE_DELTAS = {
    SessionType.RECOVERY: (0.45, 1.25),
    SessionType.EASY: (0.3, 0.95),
    SessionType.LONG: (0.3, 1.1),
    SessionType.TEMPO: (-0.12, 0.22),
    SessionType.INTERVAL: (-0.7, 0.08),
}

# type -> (share of weekly base, min km, max floor km, min spread km, race-distance share)
_DISTANCE_RULES = {
    SessionType.RECOVERY: (0.35, 4.0, 6.0, 1.0, 0.35),
    SessionType.EASY: (0.5, 5.0, 10.0, 1.5, 0.5),
    SessionType.INTERVAL: (0.55, 5.0, 12.0, 2.0, 0.55),
    SessionType.TEMPO: (0.6, 5.0, 14.0, 2.5, 0.65),
}
_QUALITY_TYPES = (SessionType.INTERVAL, SessionType.TEMPO)


@dataclass(frozen=True)
class PlanContext:
    """Plan-wide values every week's sessions depend on."""

    distance_km: float
    target_pace_min_per_km: float
    race_label: str
    days_per_week: int
    start_date: date
    end_date: date
    locale: str


def peak_long_run_km(race_type: RaceType, distance_km: float) -> float:
    """Longest long run of the plan for a race category."""
    if race_type in PEAK_LONG_RUN_KM:
        return PEAK_LONG_RUN_KM[race_type]
    return clamp(round_to_half(distance_km * 0.75), 6, 34)


def initial_long_run_km(peak_km: float) -> float:
    """First-week long run: about 55% of peak, at least 2 km below it."""
    return clamp(round_to_half(peak_km * 0.55), 5, peak_km - 2)


def long_run_km_for_week(
    week_index: int,
    build_weeks: int,
    peak_km: float,
    profile: WeekLoadProfile,
) -> float:
    """
    Long run for a 0-based week index.

    The build-up is linear from the initial long run to the peak over
    build_weeks; later weeks reuse the final value before the week's
    long-run factor is applied.
    """
    initial_km = initial_long_run_km(peak_km)
    capped_index = min(week_index, build_weeks - 1)
    progression = 1.0 if build_weeks <= 1 else capped_index / (build_weeks - 1)
    build_long_km = initial_km + (peak_km - initial_km) * progression
    return round_to_half(clamp(build_long_km * profile.long_run_factor, MIN_LONG_RUN_KM, peak_km))


def session_types_for(days_per_week: int) -> tuple[SessionType, ...]:
    return SESSION_TYPES[days_per_week]


def session_type_for_phase(session_type: SessionType, phase: WeekPhase, weeks_to_race: int) -> SessionType:
    """Downgrade hard sessions in race week and intervals in the final taper week."""
    if phase == WeekPhase.RACE and session_type in (
        SessionType.LONG,
        SessionType.TEMPO,
        SessionType.INTERVAL,
    ):
        return SessionType.EASY
    if phase == WeekPhase.TAPER and weeks_to_race <= 1 and session_type == SessionType.INTERVAL:
        return SessionType.TEMPO
    return session_type


def session_distance_km(
    session_type: SessionType,
    long_run_km: float,
    distance_km: float,
    profile: WeekLoadProfile,
    phase: WeekPhase,
) -> float:
    """Distance of one session, rounded to the nearest half km."""
    if session_type == SessionType.RACE:
        return round_to_half(distance_km)

    if session_type == SessionType.LONG:
        if phase == WeekPhase.RACE:
            return round_to_half(clamp(long_run_km * 0.55, 4, max(8, distance_km * 0.25)))
        return round_to_half(long_run_km)

    if phase == WeekPhase.RACE:
        min_factor = 0.6
    elif phase == WeekPhase.TAPER:
        min_factor = 0.8
    else:
        min_factor = 1.0

    share, min_km, max_floor_km, spread_km, race_share = _DISTANCE_RULES[session_type]
    base_km = long_run_km * profile.volume_factor * share
    if session_type in _QUALITY_TYPES:
        base_km *= profile.quality_factor

    min_km *= min_factor
    max_km = max(min_km + spread_km, max_floor_km * min_factor, distance_km * race_share)
    return round_to_half(clamp(base_km, min_km, max_km))


def session_pace(session_type: SessionType, target_pace: float) -> str:
    """Pace range for a session; the race itself gets the single target pace."""
    if session_type in PACE_DELTAS:
        fast_delta, slow_delta = PACE_DELTAS[session_type]
        return format_pace_range(target_pace, fast_delta, slow_delta)
    return format_pace(target_pace)


def race_session(ctx: PlanContext, week_number: int) -> TrainingSession:
    """The race-day session, dated on the plan end date."""
    distance = round_to_half(ctx.distance_km)
    return TrainingSession(
        id=f"{week_number}-race",
        date=ctx.end_date,
        weekday=weekday_name(ctx.end_date, ctx.locale),
        title=session_title(SessionType.RACE.value, ctx.locale, race_label=ctx.race_label),
        type=SessionType.RACE,
        distance_km=distance,
        pace=format_pace(ctx.target_pace_min_per_km),
        description=session_description(SessionType.RACE.value, distance, ctx.race_label, ctx.locale),
    )


def build_week_sessions(
    ctx: PlanContext,
    week_number: int,
    week_start: date,
    phase: WeekPhase,
    weeks_to_race: int,
    long_run_km: float,
    profile: WeekLoadProfile,
) -> list[TrainingSession]:
    """
    Synthesize one week's sessions in date order.

    Sessions dated outside [start_date, end_date] are dropped. The race day
    is reserved for the race, which race week appends.
    """
    sessions: list[TrainingSession] = []
    slots = zip(session_types_for(ctx.days_per_week), DAY_PATTERNS[ctx.days_per_week])

    for slot, (planned_type, day_offset) in enumerate(slots):
        session_date = add_days(week_start, day_offset)
        if session_date < ctx.start_date or session_date > ctx.end_date:
            continue

        session_type = session_type_for_phase(planned_type, phase, weeks_to_race)
        distance = session_distance_km(session_type, long_run_km, ctx.distance_km, profile, phase)
        sessions.append(
            TrainingSession(
                id=f"{week_number}-{slot}-{session_type.value}",
                date=session_date,
                weekday=weekday_name(session_date, ctx.locale),
                title=session_title(session_type.value, ctx.locale),
                type=session_type,
                distance_km=distance,
                pace=session_pace(session_type, ctx.target_pace_min_per_km),
                description=session_description(session_type.value, distance, ctx.race_label, ctx.locale),
            )
        )

    sessions = [s for s in sessions if s.date != ctx.end_date]
    if phase == WeekPhase.RACE:
        sessions.append(race_session(ctx, week_number))

    sessions.sort(key=lambda s: s.date)
    return sessions

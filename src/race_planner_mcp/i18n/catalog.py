"""Localized text for generated plans.

Every user-facing string lives in the tables below, keyed by locale and then
by a plain key. The engine only chooses keys and template arguments.
"""

from datetime import date
from typing import Optional

from race_planner_mcp.config import DEFAULT_LOCALE, SUPPORTED_LOCALES, get_default_locale
from race_planner_mcp.utils.dates import is_valid_iso_date
from race_planner_mcp.utils.formatting import format_distance

# Monday first, matching date.weekday()
WEEKDAYS: dict[str, tuple[str, ...]] = {
    "nl": ("Maandag", "Dinsdag", "Woensdag", "Donderdag", "Vrijdag", "Zaterdag", "Zondag"),
    "en": ("Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday", "Sunday"),
    "fr": ("Lundi", "Mardi", "Mercredi", "Jeudi", "Vendredi", "Samedi", "Dimanche"),
}

MONTHS: dict[str, tuple[str, ...]] = {
    "nl": (
        "januari", "februari", "maart", "april", "mei", "juni",
        "juli", "augustus", "september", "oktober", "november", "december",
    ),
    "en": (
        "January", "February", "March", "April", "May", "June",
        "July", "August", "September", "October", "November", "December",
    ),
    "fr": (
        "janvier", "fevrier", "mars", "avril", "mai", "juin",
        "juillet", "aout", "septembre", "octobre", "novembre", "decembre",
    ),
}

RACE_LABELS: dict[str, dict[str, str]] = {
    "nl": {
        "marathon": "Marathon",
        "half-marathon": "Halve Marathon",
        "10k": "10 km",
        "5k": "5 km",
        "custom": "Eigen wedstrijd ({distance} km)",
    },
    "en": {
        "marathon": "Marathon",
        "half-marathon": "Half Marathon",
        "10k": "10 km",
        "5k": "5 km",
        "custom": "Custom race ({distance} km)",
    },
    "fr": {
        "marathon": "Marathon",
        "half-marathon": "Semi-marathon",
        "10k": "10 km",
        "5k": "5 km",
        "custom": "Course personnalisee ({distance} km)",
    },
}

FOCUS: dict[str, dict[str, str]] = {
    "nl": {
        "race": "Raceweek: volume sterk omlaag, benen fris houden en vertrouwen meenemen naar de start.",
        "taper_final": "Laatste taperweek: korte, lichte prikkels en veel herstel zodat je volledig uitgerust start.",
        "taper": "Taperweek: volume duidelijk terugschalen, kwaliteit kort houden en herstel prioriteren.",
        "taper_early": "Vroege taper: trainingsbelasting gecontroleerd afbouwen met behoud van ritme.",
        "recovery": "Herstelweek: minder volume zodat je sterker terugkomt.",
        "peak": "Piekblok: wedstrijdspecifieke trainingen en gecontroleerd hoge belasting.",
        "base": "Basis opbouwen: rustige kilometers, techniek en consistente trainingsroutine.",
        "build": "Opbouw: meer kwaliteit rond tempo en interval met geleidelijke volumestijging.",
    },
    "en": {
        "race": "Race week: sharply reduce volume, keep legs fresh, and arrive at the start with confidence.",
        "taper_final": "Final taper week: short and light stimuli with plenty of recovery so you start fully rested.",
        "taper": "Taper week: clearly cut volume, keep quality short, and prioritize recovery.",
        "taper_early": "Early taper: controlled reduction in training load while keeping rhythm.",
        "recovery": "Recovery week: lower volume so you can come back stronger.",
        "peak": "Peak block: race-specific sessions with controlled high load.",
        "base": "Build the base: easy kilometers, technique, and consistent routine.",
        "build": "Build phase: more quality around tempo and interval with gradual volume increase.",
    },
    "fr": {
        "race": "Semaine de course: reduis fortement le volume, garde des jambes fraiches et arrive confiant au depart.",
        "taper_final": "Derniere semaine d'affutage: stimuli courts et legers avec beaucoup de recuperation pour arriver repose.",
        "taper": "Semaine d'affutage: reduis clairement le volume, garde la qualite courte et priorise la recuperation.",
        "taper_early": "Affutage precoce: baisse controlee de la charge tout en gardant le rythme.",
        "recovery": "Semaine de recuperation: moins de volume pour revenir plus fort.",
        "peak": "Bloc de pic: seances specifiques course avec une charge elevee controlee.",
        "base": "Construction de base: kilometres faciles, technique et regularite.",
        "build": "Phase de progression: plus de qualite tempo et intervalle avec hausse graduelle du volume.",
    },
}

SESSION_TITLES: dict[str, dict[str, str]] = {
    "nl": {
        "easy": "Easy run",
        "recovery": "Herstelrun",
        "tempo": "Tempo run",
        "interval": "Interval training",
        "long": "Lange duurloop",
        "race": "Wedstrijd: {race_label}",
    },
    "en": {
        "easy": "Easy run",
        "recovery": "Recovery run",
        "tempo": "Tempo run",
        "interval": "Interval training",
        "long": "Long run",
        "race": "Race: {race_label}",
    },
    "fr": {
        "easy": "Sortie facile",
        "recovery": "Sortie recuperation",
        "tempo": "Tempo",
        "interval": "Fractionne",
        "long": "Sortie longue",
        "race": "Course: {race_label}",
    },
}

SESSION_DESCRIPTIONS: dict[str, dict[str, str]] = {
    "nl": {
        "easy": "Rustige duurloop van {distance} km. Praattempo aanhouden en focussen op ontspannen loopstijl, cadans en ademhaling.",
        "recovery": "Herstelrun van {distance} km. Heel rustig lopen, lage hartslag houden en actief herstellen van eerdere intensieve trainingen.",
        "tempo": "Tempobloktraining van {distance} km met in- en uitlopen. De kern loop je rond je beoogde wedstrijdtempo voor betere lactaattolerantie.",
        "interval": "Intervalsessie over {distance} km totaal. Start met 10-15 min inlopen, daarna korte snellere herhalingen met rustige herstelpauzes.",
        "long": "Lange duurloop van {distance} km. Eet/drink volgens wedstrijdplan en houd het tempo gecontroleerd zodat je uithouding groeit.",
        "race": "{race_label} wedstrijddag. Rustig starten, pacing strak houden en het laatste deel gecontroleerd versnellen als je nog over hebt.",
    },
    "en": {
        "easy": "Easy run of {distance} km. Keep a conversational pace and focus on relaxed form, cadence, and breathing.",
        "recovery": "Recovery run of {distance} km. Run very easy, keep heart rate low, and actively recover from harder workouts.",
        "tempo": "Tempo workout of {distance} km including warm-up and cool-down. Run the core near target race pace to improve lactate tolerance.",
        "interval": "Interval session totaling {distance} km. Start with 10-15 min warm-up, then short faster repeats with easy recoveries.",
        "long": "Long run of {distance} km. Practice your fueling plan and keep the pace controlled to build endurance.",
        "race": "{race_label} race day. Start controlled, hold steady pacing, and finish stronger if you still have energy left.",
    },
    "fr": {
        "easy": "Sortie facile de {distance} km. Reste en aisance respiratoire et travaille la foulee, la cadence et la respiration.",
        "recovery": "Sortie recuperation de {distance} km. Cours tres doucement, garde une frequence cardiaque basse et recupere activement.",
        "tempo": "Seance tempo de {distance} km avec echauffement et retour au calme. Le bloc principal est proche de l'allure cible course.",
        "interval": "Seance fractionnee de {distance} km au total. Commence par 10-15 min d'echauffement puis des repetitions rapides avec recuperation facile.",
        "long": "Sortie longue de {distance} km. Teste ton plan d'hydratation/alimentation et garde une allure controlee pour l'endurance.",
        "race": "Jour de course {race_label}. Pars prudemment, garde un rythme regulier et accelere a la fin si tu en as encore.",
    },
}

ERRORS: dict[str, dict[str, str]] = {
    "nl": {
        "invalid_goal_time": "Doeltijd is ongeldig. Gebruik formaat uu:mm of uu:mm:ss (bijv. 03:45).",
        "missing_race_date": "Kies een wedstrijddatum of schakel over naar trainingsweken.",
        "invalid_race_date": "Wedstrijddatum is ongeldig. Kies een geldige datum.",
        "race_date_not_future": "Wedstrijddatum moet na vandaag liggen.",
        "unknown_date": "Onbekende datum",
    },
    "en": {
        "invalid_goal_time": "Goal time is invalid. Use format hh:mm or hh:mm:ss (e.g. 03:45).",
        "missing_race_date": "Choose a race date or switch to training weeks.",
        "invalid_race_date": "Race date is invalid. Choose a valid date.",
        "race_date_not_future": "Race date must be after today.",
        "unknown_date": "Unknown date",
    },
    "fr": {
        "invalid_goal_time": "Le temps objectif est invalide. Utilise le format hh:mm ou hh:mm:ss (ex. 03:45).",
        "missing_race_date": "Choisis une date de course ou passe en mode semaines.",
        "invalid_race_date": "La date de course est invalide. Choisis une date valide.",
        "race_date_not_future": "La date de course doit etre apres aujourd'hui.",
        "unknown_date": "Date inconnue",
    },
}


def resolve_locale(locale: Optional[str] = None) -> str:
    """Return a supported locale, using the configured default when unset or unknown."""
    if locale:
        normalized = locale.strip().lower()
        if normalized in SUPPORTED_LOCALES:
            return normalized
    configured = get_default_locale()
    return configured if configured in SUPPORTED_LOCALES else DEFAULT_LOCALE


def weekday_name(date_obj: date, locale: str) -> str:
    return WEEKDAYS[resolve_locale(locale)][date_obj.weekday()]


def race_label(race_type: str, distance_km: float, locale: str) -> str:
    """Display label for a race; custom races include their distance."""
    template = RACE_LABELS[resolve_locale(locale)][race_type]
    return template.format(distance=format_distance(distance_km))


def weekly_focus(focus_key: str, locale: str) -> str:
    return FOCUS[resolve_locale(locale)][focus_key]


def session_title(session_type: str, locale: str, race_label: str = "") -> str:
    return SESSION_TITLES[resolve_locale(locale)][session_type].format(race_label=race_label)


def session_description(session_type: str, distance_km: float, race_label: str, locale: str) -> str:
    template = SESSION_DESCRIPTIONS[resolve_locale(locale)][session_type]
    return template.format(distance=format_distance(distance_km), race_label=race_label)


def error_message(code: str, locale: Optional[str] = None) -> str:
    return ERRORS[resolve_locale(locale)][code]


def format_date_long(date_iso: str, locale: Optional[str] = None) -> str:
    """
    Format an ISO date as a long, locale-aware date (e.g. '05 January 2026').

    Args:
        date_iso: Date string in YYYY-MM-DD format
        locale: Locale code; unknown values use the default locale

    Returns:
        The formatted date, or a localized 'unknown date' text for invalid input
    """
    locale = resolve_locale(locale)
    if not is_valid_iso_date(date_iso):
        return ERRORS[locale]["unknown_date"]
    date_obj = date.fromisoformat(date_iso)
    return f"{date_obj.day:02d} {MONTHS[locale][date_obj.month - 1]} {date_obj.year}"

"""
Built-in achievement catalog.

Each achievement measures progress over the whole history and unlocks
tier by tier.
"""

from typing import Callable, List, NamedTuple, Optional

from ..models import Match, MatchResult, HistoricalRecords, AchievementTier, AchievementProgress, MoraleLevel
from ..utils import sort_matches_by_date
from .records import calculate_historical_records
from .morale import calculate_team_morale

# Matches needed before the resilience achievement can be checked
RESILIENCE_MIN_MATCHES = 5


class AchievementDefinition(NamedTuple):
    id: str
    title: str
    description: str
    progress: Callable[[List[Match], HistoricalRecords], float]
    tiers: List[AchievementTier]
    isSecret: bool = False


def _tiers(*tiers) -> List[AchievementTier]:
    return [AchievementTier(name=name, target=target, icon=icon) for name, target, icon in tiers]


CAREER_TIERS = (
    ('Bronce', 10, '🥉'),
    ('Plata', 50, '🥈'),
    ('Oro', 100, '🥇'),
    ('Platino', 250, '🏆'),
)


def resilience_progress(matches: List[Match], records: HistoricalRecords) -> float:
    """1 if some win ever came right after morale bottomed out, else 0"""
    if len(matches) < RESILIENCE_MIN_MATCHES:
        return 0
    sorted_matches = sort_matches_by_date(matches)
    for i in range(RESILIENCE_MIN_MATCHES - 1, len(sorted_matches)):
        if sorted_matches[i].result != MatchResult.WIN:
            continue
        morale = calculate_team_morale(sorted_matches[:i])
        if morale and morale.level == MoraleLevel.DESCONOCIDO:
            return 1
    return 0


ACHIEVEMENTS: List[AchievementDefinition] = [
    AchievementDefinition(
        id='goleador',
        title='Goleador',
        description='Alcanza diferentes hitos de goles marcados a lo largo de tu carrera.',
        progress=lambda matches, records: sum(m.myGoals for m in matches),
        tiers=_tiers(*CAREER_TIERS),
    ),
    AchievementDefinition(
        id='playmaker',
        title='Playmaker',
        description='Conviértete en un maestro de las asistencias.',
        progress=lambda matches, records: sum(m.myAssists for m in matches),
        tiers=_tiers(*CAREER_TIERS),
    ),
    AchievementDefinition(
        id='victorias',
        title='Ganador Nato',
        description='Acumula victorias y forja una mentalidad ganadora.',
        progress=lambda matches, records: sum(1 for m in matches if m.result == MatchResult.WIN),
        tiers=_tiers(('Bronce', 5, '🥉'), ('Plata', 25, '🥈'), ('Oro', 50, '🥇'), ('Platino', 100, '🏆')),
    ),
    AchievementDefinition(
        id='win_streak',
        title='Imparable',
        description='Consigue una racha de victorias consecutivas.',
        progress=lambda matches, records: records.longestWinStreak.value,
        tiers=_tiers(('Bronce', 3, '🥉'), ('Plata', 5, '🥈'), ('Oro', 10, '🥇')),
    ),
    AchievementDefinition(
        id='undefeated_streak',
        title='Fortaleza',
        description='Mantente invicto durante una racha de partidos.',
        progress=lambda matches, records: records.longestUndefeatedStreak.value,
        tiers=_tiers(('Bronce', 5, '🥉'), ('Plata', 7, '🥈'), ('Oro', 12, '🥇')),
    ),
    AchievementDefinition(
        id='hat_trick',
        title='Hat-Trick Hero',
        description='Marca 3 o más goles en un solo partido.',
        progress=lambda matches, records: records.bestGoalPerformance.value,
        tiers=_tiers(('Hat-Trick', 3, '⚽⚽⚽'),),
    ),
    AchievementDefinition(
        id='assist_masterclass',
        title='Visión de Juego',
        description='Da 3 o más asistencias en un solo partido.',
        progress=lambda matches, records: records.bestAssistPerformance.value,
        tiers=_tiers(('Playmaker', 3, '👟👟👟'),),
    ),
    AchievementDefinition(
        id='resilience',
        title='Resiliencia',
        description='Consigue una victoria justo después de tocar fondo con tu moral.',
        progress=resilience_progress,
        tiers=_tiers(('Desbloqueado', 1, '💪'),),
        isSecret=True,
    ),
]


def current_tier(progress: float, tiers: List[AchievementTier]) -> Optional[AchievementTier]:
    """Highest tier whose target has been reached"""
    reached = [t for t in tiers if progress >= t.target]
    if not reached:
        return None
    return max(reached, key=lambda t: t.target)


def evaluate_achievements(matches: List[Match]) -> List[AchievementProgress]:
    """Progress and unlocked tier of every built-in achievement"""
    records = calculate_historical_records(matches)
    results = []
    for definition in ACHIEVEMENTS:
        progress = definition.progress(matches, records)
        tier = current_tier(progress, definition.tiers)
        results.append(AchievementProgress(
            id=definition.id,
            title=definition.title,
            description=definition.description,
            isSecret=definition.isSecret,
            progress=progress,
            tiers=definition.tiers,
            currentTier=tier,
            unlocked=tier is not None,
        ))
    return results

from datetime import datetime, date
from typing import Optional, List, Literal
from uuid import uuid4
from pydantic import BaseModel, Field, field_validator, model_validator
from enum import Enum


DATE_FORMAT = "%Y-%m-%d"


class MatchResult(str, Enum):
    WIN = "VICTORIA"
    LOSS = "DERROTA"
    DRAW = "EMPATE"


class PlayerPerformance(BaseModel):
    """Per-player line for one side of a match"""
    name: str
    goals: int = Field(default=0, ge=0)
    assists: int = Field(default=0, ge=0)
    minutesPlayed: Optional[int] = Field(default=None, ge=0)
    status: Literal["starter", "substitute", "goalkeeper"] = "starter"
    card: Optional[Literal["yellow", "double_yellow", "red", "blue"]] = None


def parse_match_date(value: str) -> date:
    """Parse a stored match date (ISO format)"""
    return datetime.strptime(value, DATE_FORMAT).date()


def normalize_date(v) -> str:
    """Parse and convert date from various formats to standard format"""
    if isinstance(v, datetime):
        return v.date().strftime(DATE_FORMAT)
    if isinstance(v, date):
        return v.strftime(DATE_FORMAT)
    if not isinstance(v, str) or not v.strip():
        raise ValueError('Date is required')

    v = v.strip()
    # ISO timestamps keep only the calendar part
    if 'T' in v:
        v = v.split('T')[0]

    date_formats = [
        DATE_FORMAT, "%Y/%m/%d",
        "%d/%m/%Y", "%d-%m-%Y", "%d.%m.%Y",
        "%d %b %Y", "%d %B %Y",
    ]
    for fmt in date_formats:
        try:
            return datetime.strptime(v, fmt).strftime(DATE_FORMAT)
        except ValueError:
            continue

    raise ValueError('Date must be in format "YYYY-MM-DD" (e.g., "2025-10-23")')


def _as_int(value) -> Optional[int]:
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float) and value.is_integer():
        return int(value)
    if isinstance(value, str) and value.strip().lstrip('-').isdigit():
        return int(value.strip())
    return None


class Match(BaseModel):
    id: str = Field(default_factory=lambda: uuid4().hex)
    date: str  # Format: "YYYY-MM-DD"
    teamName: str = "Mi Equipo"
    opponentName: str = "Rival"
    teamScore: int = Field(ge=0)
    opponentScore: int = Field(ge=0)
    tournament: Optional[str] = None
    notes: Optional[str] = None
    players: List[PlayerPerformance] = Field(default_factory=list)  # Players of my team
    opponentPlayers: Optional[List[PlayerPerformance]] = None

    # Calculated fields
    result: MatchResult
    myGoals: int = Field(ge=0)
    myAssists: int = Field(ge=0)
    goalDifference: int

    @model_validator(mode='before')
    @classmethod
    def derive_calculated_fields(cls, data):
        """Fill result, goal difference and personal totals from the raw entry.

        Result and goal difference always follow the scores; values supplied
        for them are overwritten.
        """
        if not isinstance(data, dict):
            return data
        data = dict(data)
        team_score = _as_int(data.get('teamScore'))
        opponent_score = _as_int(data.get('opponentScore'))

        if team_score is not None and opponent_score is not None:
            if team_score > opponent_score:
                data['result'] = MatchResult.WIN
            elif team_score < opponent_score:
                data['result'] = MatchResult.LOSS
            else:
                data['result'] = MatchResult.DRAW
            data['goalDifference'] = team_score - opponent_score

        players = data.get('players') or []
        if data.get('myGoals') is None:
            data['myGoals'] = sum(_player_stat(p, 'goals') for p in players)
        if data.get('myAssists') is None:
            data['myAssists'] = sum(_player_stat(p, 'assists') for p in players)

        # Empty names fall back to the defaults
        for key in ('teamName', 'opponentName'):
            if key in data and not data[key]:
                del data[key]
        return data

    @field_validator('date', mode='before')
    @classmethod
    def validate_date(cls, v):
        return normalize_date(v)

    @property
    def match_date(self) -> date:
        return parse_match_date(self.date)


def _player_stat(player, key: str) -> int:
    if isinstance(player, PlayerPerformance):
        return getattr(player, key)
    if isinstance(player, dict):
        return _as_int(player.get(key)) or 0
    return 0


class HistoricalRecord(BaseModel):
    value: int = 0
    count: int = 0


class HistoricalRecords(BaseModel):
    longestWinStreak: HistoricalRecord = Field(default_factory=HistoricalRecord)
    longestUndefeatedStreak: HistoricalRecord = Field(default_factory=HistoricalRecord)
    longestDrawStreak: HistoricalRecord = Field(default_factory=HistoricalRecord)
    longestLossStreak: HistoricalRecord = Field(default_factory=HistoricalRecord)
    longestWinlessStreak: HistoricalRecord = Field(default_factory=HistoricalRecord)
    longestGoalStreak: HistoricalRecord = Field(default_factory=HistoricalRecord)
    longestAssistStreak: HistoricalRecord = Field(default_factory=HistoricalRecord)
    longestGoalDrought: HistoricalRecord = Field(default_factory=HistoricalRecord)
    longestAssistDrought: HistoricalRecord = Field(default_factory=HistoricalRecord)
    longestCleanSheetStreak: HistoricalRecord = Field(default_factory=HistoricalRecord)

    bestGoalPerformance: HistoricalRecord = Field(default_factory=HistoricalRecord)
    bestAssistPerformance: HistoricalRecord = Field(default_factory=HistoricalRecord)
    bestOffensivePerformance: HistoricalRecord = Field(default_factory=HistoricalRecord)  # most goals scored in a match
    bestDefensivePerformance: HistoricalRecord = Field(default_factory=HistoricalRecord)  # fewest goals conceded in a match
    biggestWin: HistoricalRecord = Field(default_factory=HistoricalRecord)  # biggest goal difference in a win


class CurrentStreaks(BaseModel):
    """Streaks still running at the most recent match"""
    winStreak: int = 0
    undefeatedStreak: int = 0
    goalStreak: int = 0
    cleanSheetStreak: int = 0


class MomentumPoint(BaseModel):
    """Trailing consistency score at one match"""
    matchId: str
    date: str  # Format: "YYYY-MM-DD"
    score: float


class YearlyConsistency(BaseModel):
    year: int
    score: float


class MonthlyConsistency(BaseModel):
    month: int = Field(ge=1, le=12)
    score: float


class MoraleLevel(str, Enum):
    MODO_D10S = "MODO D10S"
    ESTELAR = "Estelar"
    INSPIRADO = "Inspirado"
    CONFIADO = "Confiado"
    SOLIDO = "Sólido"
    REGULAR = "Regular"
    DUDOSO = "Dudoso"
    BLOQUEADO = "Bloqueado"
    EN_CAIDA_LIBRE = "En Caída Libre"
    DESCONOCIDO = "Desconocido"


class MoraleTrend(str, Enum):
    UP = "up"
    DOWN = "down"
    SAME = "same"
    NEW = "new"


class RecentMatchesSummary(BaseModel):
    matchesConsidered: int
    record: str  # Format: "3V-1E-2D"
    goals: int
    assists: int


class PlayerMorale(BaseModel):
    level: MoraleLevel
    score: float
    description: str = ""
    trend: MoraleTrend
    recentMatchesSummary: RecentMatchesSummary


class AchievementMetric(str, Enum):
    WIN_STREAK = "winStreak"
    LOSS_STREAK = "lossStreak"
    UNDEFEATED_STREAK = "undefeatedStreak"
    WINLESS_STREAK = "winlessStreak"
    GOAL_STREAK = "goalStreak"
    ASSIST_STREAK = "assistStreak"
    GOAL_DROUGHT = "goalDrought"
    ASSIST_DROUGHT = "assistDrought"
    BREAK_WIN_AFTER_LOSS_STREAK = "breakWinAfterLossStreak"
    BREAK_UNDEFEATED_AFTER_WINLESS_STREAK = "breakUndefeatedAfterWinlessStreak"


class AchievementCondition(BaseModel):
    # Kept as plain strings so that rules saved by newer clients still load;
    # the rule engine treats anything outside the known set as not met.
    metric: str
    operator: str = "greater_than_or_equal_to"
    value: int
    window: int = Field(default=0, ge=0)  # number of recent matches to check


class CustomAchievement(BaseModel):
    id: str = Field(default_factory=lambda: uuid4().hex)
    title: str
    description: str = ""
    icon: str = ""
    condition: AchievementCondition
    unlocked: bool = False


class AchievementTier(BaseModel):
    name: str
    target: int
    icon: str


class AchievementProgress(BaseModel):
    """Evaluated state of a built-in achievement"""
    id: str
    title: str
    description: str
    isSecret: bool = False
    progress: float
    tiers: List[AchievementTier]
    currentTier: Optional[AchievementTier] = None
    unlocked: bool = False


class GoalMetric(str, Enum):
    GOALS = "myGoals"
    ASSISTS = "myAssists"
    WINS = "VICTORIA"
    WIN_RATE = "winRate"
    GOALS_PER_MATCH = "gpm"
    LONGEST_WIN_STREAK = "longestWinStreak"
    LONGEST_UNDEFEATED_STREAK = "longestUndefeatedStreak"


class Goal(BaseModel):
    id: str = Field(default_factory=lambda: uuid4().hex)
    metric: GoalMetric
    target: float = Field(gt=0)
    title: str
    startDate: Optional[str] = None  # Format: "YYYY-MM-DD"
    endDate: Optional[str] = None  # Format: "YYYY-MM-DD"

    @field_validator('startDate', 'endDate', mode='before')
    @classmethod
    def validate_optional_dates(cls, v):
        if v is None or v == '':
            return None
        return normalize_date(v)


class GoalProgress(BaseModel):
    goal: Goal
    progress: float
    completed: bool


class PlayerStats(BaseModel):
    level: int
    xp: int
    xpToNextLevel: int
    progress: float

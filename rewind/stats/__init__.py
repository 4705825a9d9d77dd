"""Pure statistics derived from already-fetched GitHub activity"""

from .calendar import normalize_calendar, calculate_streak
from .languages import aggregate_languages
from .collaboration import aggregate_collaboration
from .completeness import detect_completeness
from .summary import build_year_summary
from .comparison import compare_years
from .models import YearSummary, YearComparison, year_summary_from_dict

"""
Constants for outreach entry reporting.
"""

# =============================================================================
# Reporting Window Configuration
# =============================================================================

# Trailing windows offered by the reporting view (days)
WINDOW_7_DAYS = 7
WINDOW_30_DAYS = 30
WINDOW_90_DAYS = 90
WINDOW_1_YEAR = 365
WINDOW_ALL_TIME = 3650  # "All time" is a ten year window

WINDOW_OPTIONS = (
    WINDOW_7_DAYS,
    WINDOW_30_DAYS,
    WINDOW_90_DAYS,
    WINDOW_1_YEAR,
    WINDOW_ALL_TIME,
)

WINDOW_LABELS = {
    WINDOW_7_DAYS: "Last 7 days",
    WINDOW_30_DAYS: "Last 30 days",
    WINDOW_90_DAYS: "Last 90 days",
    WINDOW_1_YEAR: "Last year",
    WINDOW_ALL_TIME: "All time",
}

DEFAULT_WINDOW_DAYS = WINDOW_30_DAYS

# =============================================================================
# Time-Series Bucketing
# =============================================================================

# Spans longer than this are bucketed by calendar month, otherwise by day.
# Fixed design constant, not exposed through settings.
DAILY_GRANULARITY_MAX_SPAN_DAYS = 60

# English abbreviations, independent of the process locale
MONTH_ABBREVIATIONS = (
    "Jan",
    "Feb",
    "Mar",
    "Apr",
    "May",
    "Jun",
    "Jul",
    "Aug",
    "Sep",
    "Oct",
    "Nov",
    "Dec",
)

# =============================================================================
# Outcome Categories
# =============================================================================

CATEGORY_WON = "won"
CATEGORY_RECOMMITTED = "recommitted"
CATEGORY_ENCOURAGED = "encouraged"
CATEGORY_INVITED = "invited"

# Order matters: breakdowns are emitted in this order
CATEGORIES = (
    CATEGORY_WON,
    CATEGORY_RECOMMITTED,
    CATEGORY_ENCOURAGED,
    CATEGORY_INVITED,
)

CATEGORY_LABELS = {
    CATEGORY_WON: "Won to Christ",
    CATEGORY_RECOMMITTED: "Recommitted",
    CATEGORY_ENCOURAGED: "Encouraged",
    CATEGORY_INVITED: "Invited",
}

# Categories credited to the recorder in the top-recorders ranking
SUCCESS_CATEGORIES = frozenset([CATEGORY_WON, CATEGORY_RECOMMITTED])

# =============================================================================
# Messaging Channel Flag
# =============================================================================

CHANNEL_YES = "yes"
CHANNEL_NO = "no"

CHANNEL_LABELS = {
    CHANNEL_YES: "On WhatsApp",
    CHANNEL_NO: "Not on WhatsApp",
}

# =============================================================================
# Age Bands
# =============================================================================

# (label, inclusive upper bound); None marks the open-ended last band
AGE_BANDS = (
    ("0-12", 12),
    ("13-19", 19),
    ("20-30", 30),
    ("31-40", 40),
    ("41-50", 50),
    ("51+", None),
)

# =============================================================================
# Ranking Limits (defaults, overridable via ReportingSettings)
# =============================================================================

TOP_RECORDERS_LIMIT = 10
TOP_RESIDENCES_LIMIT = 6
TOP_ZONES_LIMIT = 6

# =============================================================================
# Storage
# =============================================================================

TABLE_ENTRIES = "outreach_entries"
DEFAULT_SQLITE_DB_PATH = "data/outreach-entries.db"

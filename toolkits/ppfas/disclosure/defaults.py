"""Fixed vocabularies and fallbacks for PPFAS portfolio disclosure workbooks."""

# fund code -> candidate worksheet names, tried in order
SHEET_MAP: dict[str, tuple[str, ...]] = {
    "flexi": ("PPFCF",),
    "liquid": ("PPFLP",),
    "hybrid": ("PPCHF",),
    "tax": ("PPTSF", "PPETSF"),
}
DEFAULT_FUND_CODE = "tax"
MAX_SHEET_ATTEMPTS = 2

SECTION_HEADERS: dict[str, str] = {
    "Equity & Equity related": "equity_and_equity_related",
    "Arbitrage": "arbitrage",
    "(b) Reits": "b_reits",
    "Equity & Equity related Foreign Investments": "equity_foreign_investments",
    "Certificate of Deposit": "certificate_of_deposit",
    "Commercial Paper": "commercial_paper",
    "Treasury Bill": "treasury_bill",
    "Mutual Fund Units": "mutual_fund_units",
    "Reverse Repo / TREPS": "reverse_repo_treps",
}
SECTION_TERMINATOR = "GRAND TOTAL"

SECTION_DISPLAY_NAMES: dict[str, str] = {
    "equity_and_equity_related": "Equity & Equity Related",
    "arbitrage": "Arbitrage",
    "b_reits": "REITs",
    "equity_foreign_investments": "Foreign Equity Investments",
    "certificate_of_deposit": "Certificate of Deposit",
    "commercial_paper": "Commercial Paper",
    "treasury_bill": "Treasury Bills",
    "mutual_fund_units": "Mutual Fund Units",
    "reverse_repo_treps": "Reverse Repo / TREPS",
}

# Case-insensitive substrings marking rows that are not holdings.
NOISE_TOKENS: tuple[str, ...] = (
    "Total",
    "Sub Total",
    "Last 3 year",
    "Last 1 year",
    "Last 5 year",
    "Since Inception",
    "Clearing Corporation of India Ltd",
    "TOTAL",
    "Equity & Equity related",
    "Listed / awaiting listing",
    "awaiting listing",
    "(MD ",
    "Tbill",
    "Days",
    "#",
    "(a)",
    "(b)",
    "(c)",
    "(d)",
    "(e)",
    "(a) Listed",
    "(b) Listed",
    "Listed",
    "Unlisted",
    "Foreign",
)

LEGAL_SUFFIXES: tuple[str, ...] = (
    " Limited",
    " Ltd",
    " Ltd.",
    " Pvt Ltd",
    " Private Limited",
)

NAME_ALIASES: dict[str, str] = {
    "Central Depository Services (India)": "Central Depository Services (India)",
    "GAIL (India)": "GAIL (India)",
}

# Worksheet geometry
ANCHOR_COLUMN = "B"
CANDIDATE_COLUMNS: tuple[str, ...] = ("B", "C", "D", "E", "F", "G", "H", "I", "J", "K", "L")
LAST_READ_COLUMN = "L"
HEADER_SCAN_ROWS = 20
MAX_SCAN_ROWS = 5000

DEFAULT_NAME_COLUMN = "B"
DEFAULT_QUANTITY_COLUMN = "E"
DEFAULT_MARKET_VALUE_COLUMN = "F"
DEFAULT_PERCENT_COLUMN = "G"

# Market values are reported in lakhs (1 lakh = 100,000 rupees).
LAKH = 100_000
PERCENT_CHANGE_EPSILON = 1e-5

REPORT_URL_TEMPLATE = (
    "https://amc.ppfas.com/downloads/portfolio-disclosure/{year}/"
    "PPFAS_Monthly_Portfolio_Report_{month}_{day}_{year}.{extension}"
)
DEFAULT_TIMEOUT_SECONDS = 30
DEFAULT_CONNECT_TIMEOUT_SECONDS = 10
USER_AGENTS: tuple[str, ...] = (
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 (KHTML, like Gecko) Chrome/58.0.3029.110 Safari/537.36",
    "Mozilla/5.0 (Windows NT 6.1; Win64; x64) AppleWebKit/537.36 (KHTML, like Gecko) Chrome/58.0.3029.110 Safari/537.36",
)

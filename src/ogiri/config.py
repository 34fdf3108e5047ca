"""
Global Configuration and Input Format Constants.

This module centralizes the fixed assumptions about the contest CSV export:
its encoding, the zero-based positions of the mandatory columns, and the
user-facing messages shown when a file cannot be displayed.
"""

# --- Input Encoding ---
# The export is written in the Windows flavour of Shift_JIS.
DEFAULT_ENCODING = "cp932"

# Suffix check is case-sensitive (".CSV" is rejected).
CSV_SUFFIX = ".csv"

# --- Column Layout (zero-based) ---
COL_TOPIC_ID = 1
COL_SUBMITTER = 2
COL_TITLE = 3
COL_RESPONDENT = 5
COL_ANSWER = 6
COL_VOTES = 7

# Voter name / vote value pairs start here and repeat every 2 columns
COL_FIRST_VOTER = 9

# Rows shorter than this cannot carry the mandatory fields
MIN_COLUMNS = 8

COLUMN_SEPARATOR = ","
BREAKDOWN_SEPARATOR = " / "

# --- User Messages ---
MSG_INVALID_EXTENSION = "CSVファイルを選択してください。"
MSG_READ_FAILURE = "ファイルの読み込みに失敗しました。"
MSG_PARSE_FAILURE = "CSVファイルの形式が正しくありません。"
MSG_EMPTY_RESULT = "CSVデータにお題が見つかりませんでした。"
MSG_BUSY = "別のファイルを読み込み中です。"

# --- Watcher ---
# Seconds between two reloads triggered by file system events
WATCH_COOLDOWN_SEC = 0.5

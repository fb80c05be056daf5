"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

DEFAULT_SESSION_DAYS = 7
PHONE_SUFFIX_LENGTH = 4

# Spreadsheet serial day number of 1970-01-01.
EXCEL_UNIX_EPOCH_SERIAL = 25569

ATTENDANCE_ERROR_CAP = 5
MEMBER_ERROR_CAP = 10

ALLOWED_UPLOAD_EXTENSIONS = ("xlsx", "xls")

ATTENDANCE_HEADERS = ("날짜", "이름")
ATTENDANCE_SHEET_NAME = "출석이력"
ATTENDANCE_TEMPLATE_FILENAME = "출석이력_일괄업로드_양식.xlsx"

MEMBER_HEADERS = ("이름", "전화번호", "생년월일", "새가족", "비고")
MEMBER_SHEET_NAME = "청년명단"
MEMBER_TEMPLATE_FILENAME = "청년명단_일괄등록_양식.xlsx"

# Values of the 새가족 column that mean "not a new member" (compared upper-cased).
NOT_NEW_MEMBER_TOKENS = frozenset({"N", "0", "FALSE", "아니오"})

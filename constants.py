import os

DATE_FORMAT = "%Y-%m-%d"
DISPLAY_DATE_FORMAT = "%B %d"

REQUIRED_MEMBER_COLUMNS = ["name", "email", "phone", "birthday", "anniversary"]

UPCOMING_EVENTS_LIMIT = 5

# Attendance report export
CHECK_MARK = "✔"
REPORT_FILENAME = os.getenv("IMPACTERS_REPORT_FILENAME", "Impacters_Attendance_Report.xlsx")
REPORT_SHEET_NAME = "Attendance Report"
REPORT_MIME_TYPE = "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet"

REPORT_COLUMN_WIDTHS = {
	"identity": 25,  # name, email, phone
	"event": 20,
	"summary": 15,
}

# Seed the web shell with the sample roster on startup
LOAD_SAMPLE_DATA = os.getenv("IMPACTERS_LOAD_SAMPLE", "true").strip().lower() in {"1", "true", "yes", "y"}

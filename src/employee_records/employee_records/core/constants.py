"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

EMPLOYEE_HEADERS = (
    "Employee ID",
    "First Name",
    "Last Name",
    "Phone",
    "Email",
    "Position",
    "Note",
    "Photo ID",
)
NUM_COLUMNS = len(EMPLOYEE_HEADERS)

HEADER_ROW = 1
DATA_START_ROW = 2

HEADER_BACKGROUND = "#d9ead3"

DEFAULT_SHEET_TABLE = "employee_sheet"
DEFAULT_SHEET_NAME = "Employees"
DEFAULT_PHOTO_FOLDER_NAME = "Employee Photos"
DEFAULT_PHOTO_EXTENSION = "png"
DEFAULT_PHOTO_BASENAME = "employee"

DRIVE_VIEW_URL = "https://drive.google.com/uc?export=view&id={file_id}"

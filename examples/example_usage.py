"""Example: run the swipe pipeline without any outer surface.

Rows look like the access-control export (ID, Name, Date, Time, Status).
"""

from src.swipe_attendance.swipe_attendance.main import create_container

ROWS = [
    {"ID": "1001", "Name": "Capone", "Date": "01/01/2024", "Time": "05:58:10", "Status": "Success"},
    {"ID": "1001", "Name": "Capone", "Date": "01/01/2024", "Time": "05:59:02", "Status": "Success"},
    {"ID": "1001", "Name": "Capone", "Date": "01/01/2024", "Time": "10:01:00", "Status": "Success"},
    {"ID": "1001", "Name": "Capone", "Date": "01/01/2024", "Time": "10:33:00", "Status": "Success"},
    {"ID": "1001", "Name": "Capone", "Date": "01/01/2024", "Time": "14:02:00", "Status": "Success"},
    {"ID": "1002", "Name": "Minh", "Date": "01/01/2024", "Time": "22:07:00", "Status": "Success"},
    {"ID": "1002", "Name": "Minh", "Date": "02/01/2024", "Time": "02:01:00", "Status": "Success"},
    {"ID": "1002", "Name": "Minh", "Date": "02/01/2024", "Time": "02:46:00", "Status": "Success"},
    {"ID": "1002", "Name": "Minh", "Date": "02/01/2024", "Time": "06:01:00", "Status": "Success"},
]


def main():
    container = create_container()
    result = container.processing_service.process_rows(ROWS)
    print(result.message)

    report = container.report_service.build_from_result(result)
    print(report.rows.to_string(index=False))
    print(report.summary.to_string(index=False))


if __name__ == "__main__":
    main()

"""Example: refresh the dashboard once through the service layer (no Flask).

Controllers are a thin layer; the recap logic lives in the services.
"""

from config import load_settings

from src.school_attendance.school_attendance.container import build_container
from src.school_attendance.school_attendance.dashboard.service import filter_and_sort


def main():
    container = build_container(load_settings())
    snapshot = container.loader.refresh()
    for item in filter_and_sort(snapshot.daily):
        print(f"{item.nip:>20}  {item.name:<30} {item.status.value:<8} {item.time_in or '-'}")
    print(f"Average attendance this month: {snapshot.stats.avg_percentage}%")


if __name__ == "__main__":
    main()

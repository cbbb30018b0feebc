"""
Reset Flow stats by clearing the stored study history.
The work-type catalog and the dark-mode preference are kept unless asked.
"""

import sqlite3

from BackEnd.core.paths import db_path
from BackEnd.repos import state_repo


def reset_all_stats(dbfile=None, ask=input):
    """Clear studyHistory (and optionally workTypes) after confirmation."""
    dbfile = dbfile or db_path()

    if not dbfile.exists():
        print("No database found. Stats are already at 0.")
        return False

    print(f"Found database at: {dbfile}")
    history = state_repo.load_history(dbfile)
    confirm = ask(f"Delete all {len(history)} recorded session(s)? This cannot be undone. (yes/no): ")
    if confirm.lower() not in ['yes', 'y']:
        print("Reset cancelled.")
        return False

    try:
        state_repo.delete_value(state_repo.HISTORY_KEY, dbfile)
    except sqlite3.Error as e:
        print(f"✗ Error clearing history: {e}")
        return False
    print("✓ Study history cleared. All stats have been reset to 0")

    if state_repo.load_work_types(dbfile):
        confirm_types = ask("\nAlso delete your work types? (yes/no): ")
        if confirm_types.lower() in ['yes', 'y']:
            try:
                state_repo.delete_value(state_repo.WORK_TYPES_KEY, dbfile)
                print("✓ Work types deleted.")
            except sqlite3.Error as e:
                print(f"✗ Error deleting work types: {e}")
    return True

if __name__ == "__main__":
    print("=" * 50)
    print("Flow - Reset All Stats")
    print("=" * 50)
    reset_all_stats()
    print("\nPress Enter to exit...")
    input()

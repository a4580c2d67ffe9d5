"""
Reset all Tempo stats from the command line.
Clears session counters and the weekly history; optionally restores default settings.
"""

from BackEnd.core import config
from BackEnd.core.paths import db_path
from BackEnd.repos import stats_repo
from BackEnd.repos.kv_store import SqliteStore

def reset_all_stats(store=None, ask=input):
    """Clear counters and weekly history in the store, after confirmation."""
    db_file = db_path() if store is None else None
    if db_file is not None and not db_file.exists():
        print("No database found. Stats are already at 0.")
        return False
    store = store or SqliteStore(db_file)

    confirm = ask("Are you sure you want to reset all stats? This cannot be undone. (yes/no): ")
    if confirm.lower() not in ['yes', 'y']:
        print("Reset cancelled.")
        return False
    try:
        stats_repo.reset_all(store)
    except Exception as e:
        print(f"✗ Error resetting stats: {e}")
        return False
    print("✓ All stats have been reset to 0")

    confirm_settings = ask("\nAlso restore default durations and toggles? (yes/no): ")
    if confirm_settings.lower() in ['yes', 'y']:
        config.reset_settings(store)
        print("✓ Settings restored to defaults")
    return True

if __name__ == "__main__":
    print("=" * 50)
    print("Tempo - Reset All Stats")
    print("=" * 50)
    reset_all_stats()
    print("\nPress Enter to exit...")
    input()

"""
Seed MongoDB with two months of synthetic PZEM readings, or clear them
"""
import sys
from datetime import datetime
from typing import Callable, Optional

import pandas as pd

from pzem_seeder import config
from pzem_seeder.exceptions import InputError, StorageError
from pzem_seeder.prompts import StorageAction, ask_action, ask_energy_mode
from pzem_seeder.series_generator import default_date_range, generate, records_to_dataframe
from pzem_seeder.telemetry_store import PzemDataStore

PREVIEW_ROWS = 3
PREVIEW_COLUMNS = ['date', 'time', 'voltage', 'current', 'power', 'energy']


def run(input_func: Callable[[str], str] = input,
        store_factory: Callable[[], PzemDataStore] = PzemDataStore,
        now: Optional[datetime] = None) -> int:
    """
    Prompt for mode and action, then insert or delete

    Returns:
        Exit code (0 on success or invalid input, 1 on storage failure)
    """
    print("="*60)
    print("⚡ PZEM DATA SEEDER")
    print("="*60)

    try:
        mode = ask_energy_mode(input_func)
    except InputError as e:
        print(f"\n❌ {e}")
        print("   Please choose 1 for normal or 2 for greater energy values.")
        return 0

    start, end = default_date_range(now, months=config.HISTORY_MONTHS)
    print(f"\n📅 Generating data from {start.date()} to {end.date()} ({mode.name.lower()} energy)")
    records = generate(start, end, mode, verbose=config.VERBOSE)
    print(f"✅ Prepared {len(records)} records "
          f"(energy {records[0].energy:.3f} → {records[-1].energy:.3f})")

    preview = records_to_dataframe(records)[PREVIEW_COLUMNS]
    print(f"\n📄 Preview (first and last {PREVIEW_ROWS} days):")
    print(pd.concat([preview.head(PREVIEW_ROWS), preview.tail(PREVIEW_ROWS)])
          .drop_duplicates().to_string(index=False))

    try:
        with store_factory() as store:
            if not store.collection_exists():
                print(f"ℹ️  Collection {store.collection_name} does not exist. "
                      "It will be created upon insertion.")

            try:
                action = ask_action(input_func)
            except InputError as e:
                print(f"\n❌ Invalid action: {e}")
                print("   Please choose 1 for insert or 2 for delete.")
                return 0

            if action is StorageAction.INSERT:
                store.insert_many(records)
            else:
                store.delete_all()
    except StorageError as e:
        print(f"\n❌ Error connecting to MongoDB or performing action: {e}")
        if e.__cause__ is not None:
            print(f"   Cause: {e.__cause__!r}")
        return 1

    print("\n" + "="*60)
    print("DONE")
    print("="*60)
    return 0


if __name__ == "__main__":
    sys.exit(run())

"""
Check what the PZEM collection holds after seeding
"""
import sys

from pzem_seeder.exceptions import StorageError
from pzem_seeder.telemetry_store import PzemDataStore


def main(store_factory=PzemDataStore, limit: int = 5) -> int:
    try:
        with store_factory() as store:
            print("="*60)
            print("📊 PZEM DATA SUMMARY")
            print("="*60)

            stats = store.get_stats()
            print(f"\n✅ Records: {stats['record_count']} documents")

            if stats['record_count'] > 0:
                print(f"   First date:  {stats.get('first_date')}")
                print(f"   Latest date: {stats.get('latest_date')}")
                print(f"   Latest energy: {stats.get('latest_energy')} kWh")

                latest = store.get_records(limit=limit)
                print(f"\n📄 Latest {len(latest)} readings:")
                print(latest[['date', 'time', 'voltage', 'current', 'power', 'energy']].to_string(index=False))
    except StorageError as e:
        print(f"❌ MongoDB error: {e}")
        return 1

    print("\n" + "="*60)
    print("✅ Verification complete!")
    print("="*60)
    return 0


if __name__ == "__main__":
    sys.exit(main())

#!/usr/bin/env python3
"""
Basic Usage Example - Contact Directory

This script drives a directory directly, without the interactive menu.
It shows how to:
- Create a directory with a capacity
- Add entries and read the reason an add was rejected
- List, find, update and remove entries

Run: python examples/basic_usage.py
"""

from contacts_app.directory import AddResult, Entry, create_directory
from contacts_app.logging.config import configure_logging


def main() -> None:
    configure_logging(level="WARNING")

    directory = create_directory(3)
    print(f"📇 Created directory with capacity {directory.capacity}")

    for entry in [
        Entry("beto", "Alvarez", "555-0101"),
        Entry("Ana", "Zeta", "555-0102"),
        Entry("ANA", "zeta", "555-0199"),
        Entry("  ", "Nobody", ""),
        Entry("Carla", "Moreno", "555-0103"),
        Entry("Dario", "Vega", "555-0104"),
    ]:
        result = directory.try_add(entry)
        marker = "✅" if result is AddResult.ADDED else "❌"
        print(f"{marker} {entry.render()!r}: {result.value}")

    print("\n📋 Contacts:")
    for position, entry in enumerate(directory.list_entries(), start=1):
        print(f"  {position}. {entry.render()}")

    directory.update_phone("carla", "moreno", "555-0300")
    print(f"\n🔎 {directory.find_by_name('Carla', 'Moreno')}")

    directory.remove(Entry("Beto", "ALVAREZ", ""))
    stats = directory.stats()
    print(f"\n📊 {stats.size}/{stats.capacity} used, {stats.free_slots} free")


if __name__ == "__main__":
    main()

"""Seed script for development data.

Run with:  python -m holiday_planner.seed
Inside Docker:  docker compose exec api python -m holiday_planner.seed

Holidays are placed relative to today so they always clear the booking
lead time when the script runs.
"""

from __future__ import annotations

import asyncio
import sys
from datetime import UTC, datetime, timedelta

import httpx

BASE_URL = "http://localhost:8000"
HEADERS = {"Content-Type": "application/json"}

EMPLOYEES = [
    {"id": "klm012345", "name": "Anna de Vries"},
    {"id": "klm054321", "name": "Pieter Jansen"},
    {"id": "klm100200", "name": "Sanne Bakker"},
]


def _instant(days_from_today: int) -> str:
    midnight = datetime.now(UTC).replace(hour=0, minute=0, second=0, microsecond=0)
    return (midnight + timedelta(days=days_from_today)).isoformat().replace("+00:00", "Z")


# Overlap is checked across all employees, so the ranges below never touch.
HOLIDAYS = [
    ("klm012345", "Summer trip", 14, 21, "SCHEDULED"),
    ("klm012345", "Long weekend", 30, 33, "DRAFT"),
    ("klm054321", "Family visit", 40, 47, "REQUESTED"),
    ("klm100200", "Ski week", 60, 67, "DRAFT"),
]


def _ok(resp: httpx.Response, label: str) -> dict | None:
    if resp.status_code in (200, 201):
        print(f"  [OK] {label}")
        return resp.json()
    print(f"  [FAIL] {label}: {resp.status_code} {resp.text}")
    return None


async def seed_employees(client: httpx.AsyncClient) -> None:
    print("\nSeeding employees...")
    for emp in EMPLOYEES:
        resp = await client.put(f"{BASE_URL}/employees/{emp['id']}", json={"name": emp["name"]}, headers=HEADERS)
        _ok(resp, f"Employee: {emp['name']} ({emp['id']})")


async def seed_holidays(client: httpx.AsyncClient) -> None:
    print("\nSeeding holidays...")
    for employee_id, label, start_day, end_day, status in HOLIDAYS:
        payload = {
            "holidayLabel": label,
            "employeeId": employee_id,
            "startOfHoliday": _instant(start_day),
            "endOfHoliday": _instant(end_day),
            "status": status,
        }
        resp = await client.post(f"{BASE_URL}/holidays", json=payload, headers=HEADERS)
        _ok(resp, f"Holiday: {employee_id} {label}")


async def main() -> None:
    print("=" * 60)
    print("  Holiday Planner - Development Seed Script")
    print("=" * 60)

    async with httpx.AsyncClient(timeout=30.0) as client:
        try:
            resp = await client.get(f"{BASE_URL}/health")
            if resp.status_code != 200:
                print(f"API health check failed: {resp.status_code}")
                sys.exit(1)
            print("\n[OK] API is healthy")
        except httpx.ConnectError:
            print("ERROR: Cannot connect to API at", BASE_URL)
            print("Make sure the API is running")
            sys.exit(1)

        await seed_employees(client)
        await seed_holidays(client)

    print("\n" + "=" * 60)
    print("  Seeding complete!")
    print("=" * 60)


if __name__ == "__main__":
    asyncio.run(main())

#!/usr/bin/env python3
"""
Seed script: registers users via the API (no direct DB) and checks that they can log in.
Run: API must be running and migrations applied (roles are seeded by the initial migration).
  python scripts/seed_data.py
  python scripts/seed_data.py --users 100 --mentor-every 5
"""

import argparse
import random

import httpx

API_BASE = "http://localhost:8000/v1"

FIRST_NAMES = [
    "John", "Jane", "Amy", "Bob", "Carla", "Dmitri", "Eve", "Farid", "Grace", "Hiro",
    "Ines", "Jonas", "Kofi", "Lena", "Marco", "Nadia", "Omar", "Priya", "Quinn", "Rosa",
]

LAST_NAMES = [
    "Doe", "Smith", "Jones", "Garcia", "Ivanov", "Okafor", "Tanaka", "Rossi", "Novak", "Silva",
]


def random_birthdate() -> str:
    return f"{random.randint(1960, 2005)}-{random.randint(1, 12):02d}-{random.randint(1, 28):02d}"


def main():
    ap = argparse.ArgumentParser(description="Seed users via API")
    ap.add_argument("--users", type=int, default=30, help="Number of users to create")
    ap.add_argument("--mentor-every", type=int, default=4, help="Every Nth user registers as mentor")
    ap.add_argument("--base-url", default=API_BASE, help="API base URL")
    args = ap.parse_args()

    created = 0
    errors = []

    with httpx.Client(base_url=args.base_url, timeout=30.0) as client:
        print(f"Registering {args.users} users...")
        for i in range(args.users):
            first, last = random.choice(FIRST_NAMES), random.choice(LAST_NAMES)
            email = f"user{i+1}@example.com"
            body = {
                "first_name": first,
                "last_name": last,
                "email": email,
                "birthdate": random_birthdate(),
                "username": f"{first.lower()}{i+1}",
                "password": "password123",
                "role": "mentor" if args.mentor_every and (i + 1) % args.mentor_every == 0 else "mentee",
            }
            try:
                r = client.post("/users", json=body)
                if r.status_code == 201:
                    created += 1
                else:
                    errors.append(f"Register {email}: {r.status_code} {r.text[:80]}")
            except httpx.HTTPError as e:
                errors.append(f"Register {email}: {e}")
            if (i + 1) % 10 == 0:
                print(f"  ... {i+1} users")

        # Log in as the first user and list one page to confirm search works end to end
        r = client.post("/login", json={"email": "user1@example.com", "password": "password123"})
        if r.status_code == 200:
            headers = {"Authorization": f"Bearer {r.json()['access_token']}"}
            page = client.get("/users", params={"limit": 5}, headers=headers).json()
            print(f"First page: {len(page['users'])} users, total {page['total']}")
            client.delete("/logout", headers=headers)
        else:
            errors.append(f"Login user1@example.com: {r.status_code}")

    print(f"\nDone. Users registered: {created}")
    if errors:
        print(f"Errors ({len(errors)}):")
        for e in errors[:15]:
            print("  ", e)
        if len(errors) > 15:
            print("  ... and", len(errors) - 15, "more")


if __name__ == "__main__":
    main()

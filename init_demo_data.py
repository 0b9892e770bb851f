#!/usr/bin/env python3
"""
Populate empty collections with the demo users, patients and appointments.
Run with: python3 init_demo_data.py
"""
import os

# Seed explicitly below rather than during app startup
os.environ["SEED_DEMO_DATA"] = "false"

from hospital_dashboard import create_app
from hospital_dashboard.seeds import seed_demo_data, DEMO_USERS
from hospital_dashboard.services.store import get_store


def init_demo_data():
    """Seed every empty collection"""
    app = create_app()

    with app.app_context():
        print("=" * 60)
        print("Initializing Demo Data")
        print("=" * 60)
        print()

        seeded = seed_demo_data(get_store())
        if seeded:
            for key in seeded:
                print(f"  ✓ Seeded: {key}")
        else:
            print("  - All collections already populated (skipping)")

        print()
        print("=" * 60)
        print("Demo logins:")
        for user in DEMO_USERS:
            print(f"  - {user['username']} ({user['role']}) - Password: {user['password']}")
        print("=" * 60)


if __name__ == '__main__':
    init_demo_data()

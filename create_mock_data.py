"""
Mock Data Generator for the Wedding Planner API
Run this script to populate your development database with realistic test data.

Usage:
    python create_mock_data.py

Requirements:
    pip install faker
"""

import random
import uuid
from datetime import datetime, timedelta, timezone
from faker import Faker
from sqlalchemy.orm import Session

from app.database import SessionLocal, init_db
from app.models import User, Wedding, GuestCategory, Guest, CommunicationLog
from app.models.enums import RSVPStatus, WeddingStatus
from app.schemas.wedding import WeddingCreate
from app.services.wedding_service import WeddingService
from app.services.guest_service import GuestService

# Initialize Faker
fake = Faker()


class MockDataGenerator:
    def __init__(self, db: Session):
        self.db = db
        self.users = []
        self.weddings = []

    def clear_existing_data(self):
        """Clear existing data (use with caution!)"""
        print("🗑️  Clearing existing data...")

        # Delete in reverse dependency order
        self.db.query(CommunicationLog).delete()
        self.db.query(Guest).delete()
        self.db.query(GuestCategory).delete()
        self.db.query(Wedding).delete()
        self.db.query(User).delete()

        self.db.commit()
        print("✅ Existing data cleared")

    def create_users(self, count=3):
        """Create mock users (not linked to real Supabase accounts)"""
        print(f"👥 Creating {count} users...")

        for _ in range(count):
            user = User(
                supabase_id=str(uuid.uuid4()),
                email=fake.unique.email(),
                first_name=fake.first_name(),
                last_name=fake.last_name(),
            )
            self.db.add(user)
            self.users.append(user)

        self.db.commit()
        print(f"✅ Created {len(self.users)} users")

    def create_weddings(self):
        """One wedding per user, with the default categories"""
        print("💍 Creating weddings...")
        wedding_service = WeddingService(self.db)

        for user in self.users:
            wedding_data = WeddingCreate(
                bride_name=fake.first_name_female(),
                groom_name=fake.first_name_male(),
                wedding_date=datetime.now(timezone.utc)
                + timedelta(days=random.randint(30, 400)),
                venue=f"{fake.last_name()} {random.choice(['Estate', 'Gardens', 'Hall', 'Vineyard'])}",
                venue_address=fake.address(),
                description=fake.sentence(nb_words=10),
                status=random.choice(
                    [WeddingStatus.ACTIVE.value, WeddingStatus.DRAFT.value]
                ),
            )
            wedding = wedding_service.create_wedding(wedding_data, user_id=user.id)
            self.weddings.append(wedding)
            print(f"✅ {wedding.bride_name} & {wedding.groom_name}: /rsvp/{wedding.rsvp_code}")

    def create_guests(self, count_per_wedding=40):
        """Create guests with a mix of RSVP answers"""
        print(f"💌 Creating guests ({count_per_wedding} per wedding)...")
        guest_service = GuestService(self.db)
        statuses = [
            RSVPStatus.PENDING.value,
            RSVPStatus.PENDING.value,
            RSVPStatus.CONFIRMED.value,
            RSVPStatus.CONFIRMED.value,
            RSVPStatus.DECLINED.value,
        ]

        total = 0
        for wedding in self.weddings:
            rows = []
            for _ in range(count_per_wedding):
                rsvp_status = random.choice(statuses)
                answered = rsvp_status != RSVPStatus.PENDING.value
                rows.append(
                    {
                        "wedding_id": wedding.id,
                        "category_id": random.choice(wedding.categories).id,
                        "first_name": fake.first_name(),
                        "last_name": fake.last_name(),
                        "phone": fake.numerify("555#######"),
                        "email": fake.email() if random.random() < 0.8 else "",
                        "address": fake.address() if random.random() < 0.5 else "",
                        "notes": "",
                        "rsvp_status": rsvp_status,
                        "guest_count": random.randint(1, 3) if answered else 1,
                        "dietary_restrictions": (
                            random.choice(["Vegetarian", "Vegan", "Gluten-free"])
                            if answered and random.random() < 0.2
                            else None
                        ),
                        "invitation_sent": True,
                        "invitation_sent_at": datetime.now(timezone.utc)
                        - timedelta(days=random.randint(10, 60)),
                        "rsvp_submitted_at": (
                            datetime.now(timezone.utc)
                            - timedelta(days=random.randint(0, 9))
                            if answered
                            else None
                        ),
                    }
                )
            total += len(guest_service.create_many_guests(rows))

        print(f"✅ Created {total} guests")

    def generate_all_data(self, clear_existing=False):
        """Generate all mock data"""
        if clear_existing:
            self.clear_existing_data()

        # Create data in dependency order
        self.create_users(count=3)
        self.create_weddings()
        self.create_guests(count_per_wedding=40)

        print("🎉 Mock data generation completed!")
        print(f"📊 Summary:")
        print(f"   - Users: {len(self.users)}")
        print(f"   - Weddings: {len(self.weddings)}")


def main():
    """Main function to run the mock data generator"""
    print("💍 Wedding Planner Mock Data Generator")
    print("=" * 40)

    # Initialize database
    init_db()

    # Create database session
    db = SessionLocal()

    try:
        generator = MockDataGenerator(db)

        # Ask user if they want to clear existing data
        clear_existing = input("Clear existing data? (y/N): ").lower().startswith("y")

        generator.generate_all_data(clear_existing=clear_existing)

        print("\n✅ Mock data generation successful!")

    except Exception as e:
        print(f"\n❌ Error generating mock data: {e}")
        db.rollback()
        raise
    finally:
        db.close()


if __name__ == "__main__":
    main()

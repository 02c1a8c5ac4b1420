#!/usr/bin/env python
"""
Seed a development database with an owner account, a business, a monthly
plan and, optionally, a batch of demo members with memberships and payments.

Usage:
    python scripts/seed_data.py [--members 50]
"""
import argparse
import random
from datetime import timedelta

from faker import Faker

from memberdesk import create_app, db
from memberdesk.models import Business, PaymentMethod, User
from memberdesk.services import (AuthService, MemberService, MembershipService,
                                 PaymentService, PlanService)
from memberdesk.utils.clock import utcnow

ADMIN_EMAIL = "admin@example.com"
ADMIN_PASSWORD = "Admin123!"

fake = Faker()


def seed_account():
    """Create the admin owner and its business unless any user exists."""
    if db.session.query(User).first() is not None:
        print("Users already exist, skipping account seed")
        user = db.session.query(User).filter_by(email=ADMIN_EMAIL).first()
        if user is None:
            return None
        return db.session.query(Business).filter_by(user_id=user.id).first()

    tokens = AuthService().register(
        email=ADMIN_EMAIL,
        password=ADMIN_PASSWORD,
        first_name="Admin",
        last_name="User",
        business_name="Sample Business",
    )
    print(f"Created admin user {ADMIN_EMAIL} with business ID: {tokens['business_id']}")

    plan = PlanService().create_plan(
        tokens['business_id'],
        name="Monthly Plan",
        description="Monthly subscription plan",
        price="29.99",
        duration_days=30,
    )
    print(f"Created plan '{plan.name}' with ID: {plan.id}")
    return db.session.get(Business, tokens['business_id'])


def seed_members(business, count):
    """Create demo members, each on the first plan with a random payment."""
    plans = PlanService().list_plans(business.id, active_only=True)
    if not plans:
        print("Error: no active plan found, run without --members first.")
        return

    members = MemberService()
    memberships = MembershipService()
    payments = PaymentService()
    now = utcnow()

    for i in range(count):
        member = members.create_member(
            business.id,
            first_name=fake.first_name(),
            last_name=fake.last_name(),
            email=fake.unique.email(),
            phone=fake.phone_number()[:50],
        )
        plan = random.choice(plans)
        # Spread start dates so some memberships are already lapsed
        start = now - timedelta(days=random.randint(0, plan.duration_days * 2))
        membership = memberships.create_membership(
            business.id, member.id, plan.id, start_date=start
        )
        if random.random() < 0.7:
            payments.record_payment(
                business.id,
                membership.id,
                amount=membership.total_amount if random.random() < 0.6
                else round(float(membership.total_amount) / 2, 2),
                method=random.choice(list(PaymentMethod)),
            )
        if (i + 1) % 10 == 0:
            print(f"Created {i + 1} members")

    print(f"Created {count} demo members for business {business.id}")


def main():
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument('--members', type=int, default=0, help='Number of demo members')
    args = parser.parse_args()

    app = create_app()
    with app.app_context():
        business = seed_account()
        if business is not None and args.members > 0:
            seed_members(business, args.members)


if __name__ == "__main__":
    main()

#!/usr/bin/env python3
"""
Seed sample data for trying the API locally.

Creates a few projects, each with SWOT validations and leads. Everything goes
through the record workflows, so the stored scores are real.

Usage:
    python scripts/seed_test_data.py          # seed all samples
    python scripts/seed_test_data.py --clear  # wipe the seed user's data first

Requires: DATABASE_URL set (or defaults to sqlite:///local.db).
"""
import sys
import os
import argparse
import logging

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from app.database import engine, Base
from app.logging_config import configure_logging
from app.services import records
from app.services.context import RequestContext

import app.models.project  # noqa: F401
import app.models.idea_validation  # noqa: F401
import app.models.lead  # noqa: F401

logger = logging.getLogger('scripts.seed')

# All seeded rows belong to this user so --clear can find them
SEED_USER = 'seed@example.com'


PROJECTS = [
    {
        'name': 'Harbor Coffee Roasters',
        'description': 'Small-batch roastery with a subscription box',
        'industry': 'Food & Beverage',
        'stage': 'startup',
        'target_market': 'Urban professionals 25-40',
        'validations': [
            {
                'strengths': ['Direct trade sourcing', 'Award-winning roaster', 'Loyal local following'],
                'weaknesses': ['Single location'],
                'opportunities': ['Office subscriptions', 'Wholesale to cafes'],
                'threats': ['Green coffee price swings'],
                'recommendations': ['Pilot three office accounts before hiring'],
            },
        ],
        'leads': [
            {'name': 'Dana Whitfield', 'company': 'Northpoint Labs', 'role': 'Office Manager',
             'email': 'dana@northpoint.example', 'phone': '+1 555 0101',
             'linkedin_url': 'https://linkedin.com/in/danaw', 'source': 'Referral',
             'tags': 'office, subscription'},
            {'name': 'Marco Bellini', 'company': 'Cafe Aurora', 'email': 'marco@aurora.example',
             'source': 'Trade show'},
            {'name': 'Walk-in enquiry'},
        ],
    },
    {
        'name': 'Tidewater Analytics',
        'description': 'Reporting dashboards for independent retailers',
        'industry': 'SaaS',
        'stage': 'idea',
        'validations': [
            {
                'strengths': ['Founder ran retail ops for 8 years'],
                'weaknesses': ['No engineering co-founder', 'No funding', 'Long sales cycle'],
                'opportunities': ['POS vendors lack reporting'],
                'threats': ['Incumbent POS vendors', 'Free spreadsheet templates', 'Low willingness to pay'],
            },
        ],
        'leads': [
            {'name': 'Priya Natarajan', 'company': 'Loom & Thread', 'role': 'Owner',
             'linkedin_url': 'https://linkedin.com/in/priyan'},
        ],
    },
]


def clear(ctx):
    for project in records.list_projects(ctx):
        records.delete_project(ctx, project['id'])
    logger.info("Cleared seed data for %s", ctx.user_id)


def seed(ctx):
    for sample in PROJECTS:
        payload = {k: v for k, v in sample.items() if k not in ('validations', 'leads')}
        project = records.create_project(ctx, payload)

        for validation in sample.get('validations', []):
            created = records.create_validation(ctx, {'project_id': project['id'], **validation})
            logger.info("  validation %s → success_score=%d", created['id'], created['success_score'])

        for lead in sample.get('leads', []):
            created = records.create_lead(ctx, {'project_id': project['id'], **lead})
            logger.info("  lead %s → lead_score=%d", created['name'], created['lead_score'])

        logger.info("Seeded project %s (%s)", project['id'], project['name'])


def main():
    parser = argparse.ArgumentParser(description='Seed sample projects, validations and leads.')
    parser.add_argument('--clear', action='store_true', help='Delete existing seed data first')
    args = parser.parse_args()

    configure_logging()
    Base.metadata.create_all(engine)

    ctx = RequestContext(user_id=SEED_USER)
    if args.clear:
        clear(ctx)
    seed(ctx)


if __name__ == '__main__':
    main()

"""
Management command to populate the database with demo staff records.
"""
import random
from datetime import date, timedelta

from django.core.management.base import BaseCommand
from django.db import transaction

from records.models import Contract, Posting, Promotion, StaffRecord

DEPARTMENTS = ['General Medicine', 'Surgery', 'Paediatrics', 'Orthopaedics', 'Emergency Medicine']
APPOINTMENTS = ['Associate Consultant', 'Consultant', 'Senior Consultant']
SCHOOLS = ['NUS', 'NTU', 'Duke-NUS']
FIRST_NAMES = ['Wei Ming', 'Siti', 'Rajesh', 'Mei Ling', 'Daniel', 'Aisha', 'Kumar', 'Hui Min']
LAST_NAMES = ['Tan', 'Lim', 'Ng', 'Wong', 'Lee', 'Chua', 'Goh', 'Pillai']


class Command(BaseCommand):
    help = 'Populate database with demo staff, contracts, promotions and postings'

    def add_arguments(self, parser):
        parser.add_argument('--count', type=int, default=20)
        parser.add_argument('--seed', type=int, default=None)

    @transaction.atomic
    def handle(self, *args, **options):
        rng = random.Random(options['seed'])
        created = 0
        for i in range(1, options['count'] + 1):
            mcr_number = f'M{i:05d}Z'
            start = date(2020, 1, 1) + timedelta(days=rng.randint(0, 1200))
            staff, was_created = StaffRecord.objects.get_or_create(
                mcr_number=mcr_number,
                defaults={
                    'first_name': rng.choice(FIRST_NAMES),
                    'last_name': rng.choice(LAST_NAMES),
                    'department': rng.choice(DEPARTMENTS),
                    'appointment': rng.choice(APPOINTMENTS),
                    'email': f'{mcr_number.lower()}@example.com',
                    'teaching_training_hours': rng.randint(0, 40),
                    'start_date': start,
                    'end_date': start + timedelta(days=3 * 365),
                    'created_by': 'populate_data',
                },
            )
            if not was_created:
                continue
            created += 1
            self.create_contracts(rng, staff)
            self.create_promotions(rng, staff)
            self.create_postings(rng, staff)
        self.stdout.write(self.style.SUCCESS(f'Created {created} staff records.'))

    def create_contracts(self, rng, staff):
        for school in rng.sample(SCHOOLS, rng.randint(1, 2)):
            Contract.objects.create(
                staff=staff,
                school_name=school,
                start_date=staff.start_date,
                end_date=staff.end_date,
                status=rng.choice(['active', 'inactive']),
                training_hours_2022=rng.randint(0, 20),
                training_hours_2023=rng.randint(0, 20),
                training_hours_2024=rng.randint(0, 20),
            )

    def create_promotions(self, rng, staff):
        if rng.random() < 0.5:
            Promotion.objects.create(
                staff=staff,
                previous_title=APPOINTMENTS[0],
                new_title=staff.appointment,
                promotion_date=staff.start_date + timedelta(days=365),
            )

    def create_postings(self, rng, staff):
        for number in range(1, rng.randint(1, 3) + 1):
            Posting.objects.create(
                staff=staff,
                academic_year='2023/2024',
                school_name=rng.choice(SCHOOLS),
                posting_number=number,
                total_training_hour=rng.randint(2, 12),
                rating=round(rng.uniform(3, 5), 1),
            )

"""
Management command to create sample data for trying out the API.

Usage:
    python manage.py create_sample_data

This creates:
- 2 users (admin, breeder)
- 2 aviaries
- A small flock of canaries and zebra finches with parent links
- A breeding couple with a hatched nest and an active nest
- Health records
"""

from django.core.management.base import BaseCommand
from django.db import transaction
from datetime import date

from apps.accounts.models import User
from apps.aviaries.services import create_aviary
from apps.birds.services import create_bird, create_health_record
from apps.breeding.services import create_couple, create_nest, create_egg, hatch_nest


SAMPLE_EMAIL = 'breeder@example.com'


class Command(BaseCommand):
    help = 'Create a demo breeder account with a small flock'

    def add_arguments(self, parser):
        parser.add_argument(
            '--clear',
            action='store_true',
            help='Delete the demo accounts (and all their records) first',
        )

    @transaction.atomic
    def handle(self, *args, **options):
        if options['clear']:
            self.stdout.write('Clearing existing demo data...')
            User.objects.filter(email__in=[SAMPLE_EMAIL, 'admin@example.com']).delete()

        if User.objects.filter(email=SAMPLE_EMAIL).exists():
            self.stdout.write(
                self.style.WARNING(f'{SAMPLE_EMAIL} already exists. Use --clear to recreate.')
            )
            return

        self.stdout.write('Creating sample data...')

        breeder = self.create_users()
        aviaries = self.create_aviaries(breeder)
        birds = self.create_birds(breeder, aviaries)
        self.create_health_records(breeder, birds)
        self.create_breeding(breeder, birds, aviaries)

        self.stdout.write(self.style.SUCCESS('Sample data created successfully!'))
        self.stdout.write('')
        self.stdout.write('Test accounts:')
        self.stdout.write('  admin@example.com / admin123 (superuser)')
        self.stdout.write(f'  {SAMPLE_EMAIL} / password123')

    def create_users(self):
        self.stdout.write('  Creating users...')

        admin, _ = User.objects.get_or_create(
            email='admin@example.com',
            defaults={
                'name': 'Admin',
                'is_staff': True,
                'is_superuser': True,
            }
        )
        admin.set_password('admin123')
        admin.save()

        return User.objects.create_user(
            email=SAMPLE_EMAIL,
            password='password123',
            name='Demo Breeder',
        )

    def create_aviaries(self, owner):
        self.stdout.write('  Creating aviaries...')
        return {
            'flight': create_aviary(
                owner=owner,
                name='Outdoor flight',
                location='Garden',
                capacity=12,
                description='Planted flight with night shelter',
            ),
            'breeding': create_aviary(
                owner=owner,
                name='Breeding room',
                location='Shed',
                capacity=6,
            ),
        }

    def create_birds(self, owner, aviaries):
        """Create two generations of canaries plus a pair of zebra finches."""
        self.stdout.write('  Creating birds...')

        flight = aviaries['flight'].id
        breeding = aviaries['breeding'].id

        birds = {}
        birds['grandfather'] = create_bird(
            owner=owner, ring_number='NL-2021-001', species='Canary',
            gender='male', birth_date=date(2021, 4, 2), origin='purchased',
            color_mutation='Yellow', aviary_id=flight, name='Sunny',
        )
        birds['grandmother'] = create_bird(
            owner=owner, ring_number='NL-2021-014', species='Canary',
            gender='female', birth_date=date(2021, 5, 9), origin='purchased',
            aviary_id=flight,
        )
        birds['male'] = create_bird(
            owner=owner, ring_number='NL-2023-007', species='Canary',
            gender='male', birth_date=date(2023, 4, 20), origin='bred',
            father_id=birds['grandfather'].id, mother_id=birds['grandmother'].id,
            aviary_id=breeding, name='Pip',
        )
        birds['female'] = create_bird(
            owner=owner, ring_number='NL-2023-011', species='Canary',
            gender='female', birth_date=date(2023, 5, 1), origin='rescue',
            aviary_id=breeding,
        )
        birds['finch_male'] = create_bird(
            owner=owner, ring_number='ZF-2024-002', species='Zebra finch',
            gender='male', birth_date=date(2024, 2, 14), origin='purchased',
            aviary_id=flight,
        )
        birds['finch_female'] = create_bird(
            owner=owner, ring_number='ZF-2024-003', species='Zebra finch',
            gender='female', birth_date=date(2024, 2, 14), origin='purchased',
            status='sold', notes='Sold at the spring show',
        )
        return birds

    def create_health_records(self, owner, birds):
        self.stdout.write('  Creating health records...')

        create_health_record(
            owner=owner, bird_id=birds['male'].id, date=date(2024, 1, 10),
            type='checkup', description='Yearly checkup, all fine',
        )
        create_health_record(
            owner=owner, bird_id=birds['female'].id, date=date(2024, 3, 2),
            type='medication', description='Treated for mites',
            notes='Repeat after two weeks',
        )

    def create_breeding(self, owner, birds, aviaries):
        """One hatched nest from last season and one active nest."""
        self.stdout.write('  Creating couples, nests and eggs...')

        couple = create_couple(
            owner=owner,
            male_id=birds['male'].id,
            female_id=birds['female'].id,
            season='2024',
        )

        hatched = create_nest(
            owner=owner,
            couple_id=couple.id,
            aviary_id=aviaries['breeding'].id,
            start_date=date(2024, 4, 1),
            egg_count=4,
            expected_hatch_date=date(2024, 4, 18),
        )
        for day in (3, 4, 5, 6):
            create_egg(owner=owner, nest_id=hatched.id, lay_date=date(2024, 4, day))
        hatch_nest(owner=owner, nest_id=hatched.id, hatched_count=3, hatch_date=date(2024, 4, 19))

        active = create_nest(
            owner=owner,
            couple_id=couple.id,
            aviary_id=aviaries['breeding'].id,
            start_date=date(2024, 6, 10),
            expected_hatch_date=date(2024, 6, 28),
        )
        create_egg(owner=owner, nest_id=active.id, lay_date=date(2024, 6, 12), status='fertile')
        create_egg(owner=owner, nest_id=active.id, lay_date=date(2024, 6, 13))

"""
Management command to populate the database with demo data.
"""
from datetime import timedelta
from decimal import Decimal
import random

from django.core.management.base import BaseCommand
from django.db import transaction
from django.utils import timezone

from clinic.models import MedicalRecord, Pet, Scheduling, Service, User
from clinic.services.medical_records import generate_access_code


class Command(BaseCommand):
    help = 'Populate database with demo users, pets, services, schedulings and medical records'

    def add_arguments(self, parser):
        parser.add_argument('--users', type=int, default=5)
        parser.add_argument('--pets', type=int, default=15)
        parser.add_argument('--seed', type=int, default=None, help='Random seed for repeatable data')

    @transaction.atomic
    def handle(self, *args, **options):
        rng = random.Random(options['seed'])
        self.stdout.write('Creating demo data...')

        users = self.create_users(options['users'])
        pets = self.create_pets(rng, users, options['pets'])
        services = self.create_services()
        self.create_schedulings(rng, pets, services)
        self.create_medical_records(rng, pets)

        self.stdout.write(self.style.SUCCESS('Demo data created.'))

    def create_users(self, count):
        users = []
        for i in range(1, count + 1):
            user, created = User.objects.get_or_create(
                email=f'client{i}@example.com',
                defaults={
                    'first_name': f'Client{i}',
                    'last_name': 'Example',
                    'phone': 5511900000000 + i,
                },
            )
            if created:
                user.set_password('password123')
                user.save(update_fields=['password'])
            users.append(user)
            self.stdout.write(f'user: {user.email}')
        return users

    def create_pets(self, rng, users, count):
        species = [('Dog', ['Beagle', 'Poodle', 'Labrador']), ('Cat', ['Siamese', 'Persian', 'Sphynx'])]
        pets = []
        for i in range(1, count + 1):
            kind, breeds = rng.choice(species)
            pet = Pet.objects.create(
                user=rng.choice(users),
                name=f'Pet {i:02d}',
                species=kind,
                breed=rng.choice(breeds),
                weight=Decimal(str(round(rng.uniform(1, 50), 1))),
                age=rng.randint(1, 15),
                gender=rng.choice(['M', 'F']),
                agressive=rng.random() < 0.2,
            )
            pets.append(pet)
            self.stdout.write(f'pet: {pet}')
        return pets

    def create_services(self):
        catalogue = [
            ('Consultation', Decimal('150.00')),
            ('Vaccination', Decimal('90.00')),
            ('Bath and grooming', Decimal('80.00')),
            ('Dental cleaning', Decimal('300.00')),
            ('Surgery', Decimal('1500.00')),
        ]
        services = []
        for name, price in catalogue:
            service, _ = Service.all_objects.get_or_create(name=name, defaults={'price': price})
            services.append(service)
            self.stdout.write(f'service: {service}')
        return services

    def create_schedulings(self, rng, pets, services, count=5):
        now = timezone.now().replace(microsecond=0)
        for _ in range(count):
            pet = rng.choice(pets)
            scheduling = Scheduling.objects.create(
                user=pet.user,
                pet=pet,
                service=rng.choice(services),
                date=now + timedelta(days=rng.randint(-15, 15), hours=rng.randint(0, 8)),
                finished=rng.random() < 0.5,
            )
            self.stdout.write(f'scheduling: {scheduling}')

    def create_medical_records(self, rng, pets, count=5):
        for _ in range(count):
            pet = rng.choice(pets)
            record = MedicalRecord.objects.create(
                access_code=generate_access_code(),
                user=pet.user,
                pet=pet,
                observation=f'Routine check of {pet.name}: healthy, weight {pet.weight} kg.',
            )
            self.stdout.write(f'medical record: {record}')

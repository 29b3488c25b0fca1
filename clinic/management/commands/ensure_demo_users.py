# clinic/management/commands/ensure_demo_users.py
from django.core.management.base import BaseCommand
from clinic.models import User

DEMO_PASSWORD = "password123"

DEMO_SET = [
    # email, first name, is_staff, is_superuser
    ("admin@clinic.local", "Admin", True, True),
    ("staff@clinic.local", "Staff", True, False),
    ("client@clinic.local", "Client", False, False),
]


class Command(BaseCommand):
    help = f"Ensure demo users exist with password={DEMO_PASSWORD} (idempotent)."

    def handle(self, *args, **opts):
        for email, name, staff, superuser in DEMO_SET:
            u, created = User.objects.get_or_create(
                email=email,
                defaults={"first_name": name, "last_name": "Demo", "is_staff": staff, "is_superuser": superuser},
            )
            # Reset password, flags and activation on every run
            u.set_password(DEMO_PASSWORD)
            u.is_staff = staff
            u.is_superuser = superuser
            u.is_active = True
            u.save(update_fields=["password", "is_staff", "is_superuser", "is_active"])
            self.stdout.write(self.style.SUCCESS(f"{'created' if created else 'ok'}: {email} ({u.role_label})"))
        self.stdout.write(self.style.SUCCESS("All demo users ensured."))

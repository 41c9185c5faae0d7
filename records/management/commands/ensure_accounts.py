# records/management/commands/ensure_accounts.py
from django.core.management.base import BaseCommand

from records.models import UserAccount

TEST_SET = [
    ("M00001A", "management"),
    ("H00001A", "hr"),
    ("D00001A", "doctor"),
]


class Command(BaseCommand):
    help = "Ensure one login per role exists with the given password (idempotent)."

    def add_arguments(self, parser):
        parser.add_argument("--password", default="123456")

    def handle(self, *args, **opts):
        for mcr_number, role in TEST_SET:
            account, created = UserAccount.objects.get_or_create(
                mcr_number=mcr_number,
                defaults={"role": role, "email": f"{mcr_number.lower()}@example.com"},
            )
            account.role = role
            account.set_password(opts["password"])
            account.save(update_fields=["role", "user_password"])
            self.stdout.write(self.style.SUCCESS(f"{'created' if created else 'reset'}: {mcr_number} ({role})"))
        self.stdout.write(self.style.SUCCESS("All accounts ensured."))

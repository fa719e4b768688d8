"""
Management command to print or save an account's export.

Usage:
    python manage.py export_flock breeder@example.com
    python manage.py export_flock breeder@example.com --format json --output flock.json
"""

from django.core.management.base import BaseCommand, CommandError
from apps.accounts.models import User
from apps.backups.services import export_account_data, EXPORT_FORMATS


class Command(BaseCommand):
    help = "Export all birds, couples, nests, eggs and aviaries of an account"

    def add_arguments(self, parser):
        parser.add_argument('email', help='Email address of the account')
        parser.add_argument(
            '--format',
            dest='fmt',
            choices=EXPORT_FORMATS,
            default='text',
            help='text report (default) or json',
        )
        parser.add_argument(
            '--output',
            help='Write to this file instead of stdout',
        )

    def handle(self, *args, **options):
        email = User.objects.normalize_email(options['email'])

        try:
            user = User.objects.get(email=email)
        except User.DoesNotExist:
            raise CommandError(f'No account found for {email}')

        content = export_account_data(user=user, fmt=options['fmt'])

        if options['output']:
            with open(options['output'], 'w', encoding='utf-8') as fh:
                fh.write(content)
            self.stdout.write(
                self.style.SUCCESS(f"Export of {email} written to {options['output']}")
            )
        else:
            self.stdout.write(content)

"""
Management command to audit the stock ledger.

Usage:
    python manage.py verify_ledger
    python manage.py verify_ledger --team 7c1e... --component 42
"""

import uuid

from django.core.management.base import BaseCommand, CommandError

from stockledger.exceptions import StockError
from stockledger.services.audit import verify, verify_all


class Command(BaseCommand):
    """Verify ledger consistency command."""

    help = 'Checks that component balances agree with their transaction ledger'

    def add_arguments(self, parser):
        parser.add_argument(
            '--team',
            help='Only audit components of this team (UUID)'
        )
        parser.add_argument(
            '--component',
            help='Only audit this component (requires --team)'
        )

    def handle(self, *args, **options):
        if options['team']:
            try:
                uuid.UUID(options['team'])
            except ValueError:
                raise CommandError('--team must be a UUID') from None

        if options['component']:
            if not options['team']:
                raise CommandError('--component requires --team')
            try:
                checks = [verify(options['component'], options['team'])]
            except StockError as e:
                raise CommandError(e.message) from e
        else:
            checks = verify_all(team_id=options['team'])

        total = 0
        drifted = 0
        for check in checks:
            total += 1
            if check.is_consistent:
                continue
            drifted += 1
            self.stdout.write(self.style.WARNING(
                f'Component {check.component_id}: balance {check.quantity}, '
                f'ledger {check.ledger_quantity}'
            ))
            for problem in check.problems:
                self.stdout.write(f'  {problem}')

        if drifted:
            raise CommandError(f'{drifted} of {total} component(s) out of balance')

        self.stdout.write(
            self.style.SUCCESS(f'{total} component(s) verified')
        )

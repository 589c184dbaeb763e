"""
notifications/management/commands/resolve_audience.py

Print the audience for an activity group, a category subtree,
or a group's participation in an event.

Examples:
    manage.py resolve_audience --group <id>
    manage.py resolve_audience --category <id> --parallel
    manage.py resolve_audience --event <id> --group <id> --json
"""

import json

from django.core.management.base import BaseCommand, CommandError

from notifications.services.audience import (
    ByCategorySubtree,
    ByEventParticipation,
    BySingleEntity,
    resolve_audience,
)


class Command(BaseCommand):
    help = "Resolve the notification audience for a group, category or event"

    def add_arguments(self, parser):
        parser.add_argument("--group", help="Activity group id")
        parser.add_argument("--category", help="Category id")
        parser.add_argument("--event", help="Event id (requires --group)")
        parser.add_argument(
            "--parallel",
            action="store_true",
            default=None,
            help="Fan out sub category collection across threads",
        )
        parser.add_argument(
            "--timeout",
            type=float,
            default=None,
            help="Give up after this many seconds",
        )
        parser.add_argument(
            "--json",
            action="store_true",
            help="Print recipients as JSON",
        )

    def handle(self, *args, **options):
        request = self._build_request(options)

        result = resolve_audience(
            request,
            parallel=options["parallel"],
            timeout=options["timeout"],
        )
        if not result.succeeded:
            raise CommandError(f"[{result.error.code}] {result.error}")

        audience = result.audience

        if options["json"]:
            self.stdout.write(json.dumps(audience.as_list(), indent=2))
            return

        for person in audience:
            channels = []
            if person.receive_notifications:
                channels.append("in-app")
            if person.receive_emails:
                channels.append("email")

            self.stdout.write(
                f"{person.id}  {person.first_name} {person.last_name}  "
                f"[{', '.join(channels) or 'none'}]  "
                f"{', '.join(person.email_addresses)}"
            )

        self.stdout.write(
            self.style.SUCCESS(f"{len(audience)} recipients")
        )

    def _build_request(self, options):
        group = options["group"]
        category = options["category"]
        event = options["event"]

        if event:
            if not group:
                raise CommandError("--event requires --group.")
            return ByEventParticipation(event, group)

        if category and group:
            raise CommandError("Pass either --group or --category, not both.")
        if category:
            return ByCategorySubtree(category)
        if group:
            return BySingleEntity(group)

        raise CommandError("Pass --group, --category or --event with --group.")

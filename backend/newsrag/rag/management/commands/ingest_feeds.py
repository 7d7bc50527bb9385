# backend/newsrag/rag/management/commands/ingest_feeds.py

"""
Django management command to ingest RSS articles into the vector index
"""
from django.core.management.base import BaseCommand, CommandError

from newsrag.domain.models import DomainException
from newsrag.infrastructure.container import get_services


class Command(BaseCommand):
    help = "Fetch RSS articles, embed them and upsert them into the vector index"

    def add_arguments(self, parser):
        parser.add_argument(
            "--limit",
            type=int,
            default=None,
            help="Maximum number of articles to fetch (default from config)",
        )
        parser.add_argument(
            "--keep-collection",
            action="store_true",
            help="Upsert into the existing collection instead of recreating it",
        )

    def handle(self, *args, **options):
        services = get_services()
        limit = options["limit"] or services.config["ingest"]["limit"]
        recreate = not options["keep_collection"]

        self.stdout.write(f"Ingesting up to {limit} articles")

        try:
            count = services.ingest_service.ingest(limit=limit, recreate=recreate)
        except KeyboardInterrupt:
            self.stdout.write(self.style.WARNING("\nOperation cancelled by user"))
            return
        except DomainException as e:
            raise CommandError(f"Error ingesting feeds: {e}")

        self.stdout.write(self.style.SUCCESS(f"  ✓ Indexed {count} articles"))

"""Management command to fetch a summary using the same stack as the API."""
from __future__ import annotations

import json
from typing import Any

from django.core.management.base import BaseCommand, CommandError

from backend.api.views import get_summary_handler
from backend.app.api import RequestContext


class Command(BaseCommand):
    help = "Fetch the weather and location summary for the provided coordinates"

    def add_arguments(self, parser) -> None:  # noqa: D401
        parser.add_argument("--lat", type=str, required=True, help="Latitude")
        parser.add_argument("--lon", type=str, required=True, help="Longitude")

    def handle(self, *args: Any, **options: Any) -> None:  # noqa: D401
        context = RequestContext(query={"lat": options["lat"], "lon": options["lon"]})
        result = get_summary_handler().handle(context)
        if result.status_code != 200:
            raise CommandError(result.payload["error"])
        self.stdout.write(json.dumps(result.payload))

"""JSON output formatter."""

import json

from devvault.core.models import Snippet


def format_snippets_json(snippets: list[Snippet], pretty: bool = True) -> str:
    """Format snippets as a JSON array of four-field records."""
    return json.dumps(
        [snippet.to_dict() for snippet in snippets],
        indent=2 if pretty else None,
        ensure_ascii=False,
    )

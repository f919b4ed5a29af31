"""Index settings — The settings template pushed to the base index and replicas.

The base index gets the full template plus the list of virtual replicas.
Each replica then gets its own ``customRanking`` so that the three sort
orders share storage but rank differently.
"""

from __future__ import annotations

import json
from typing import Any

from answer_plugins.plugin.exceptions import ConfigurationError
from answer_plugins.search_algolia.indices import (
    ACTIVE_INDEX,
    NEWEST_INDEX,
    SCORE_INDEX,
    replica_index_names,
)

DEFAULT_INDEX_SETTINGS = """
{
  "searchableAttributes": ["title", "content"],
  "attributesForFaceting": [
    "filterOnly(type)",
    "filterOnly(tags)",
    "filterOnly(userID)",
    "filterOnly(questionID)",
    "filterOnly(hasAccepted)"
  ],
  "numericAttributesForFiltering": ["status", "votes", "views", "answers"],
  "attributesToRetrieve": ["objectID", "type"],
  "ranking": ["typo", "geo", "words", "filters", "proximity", "attribute", "exact", "custom"],
  "customRanking": ["desc(score)", "desc(active)"],
  "ignorePlurals": true,
  "removeStopWords": true,
  "highlightPreTag": "<em>",
  "highlightPostTag": "</em>",
  "hitsPerPage": 20
}
"""

# Tie-break on content, then title, after the order's own attribute.
REPLICA_CUSTOM_RANKING: dict[str, list[str]] = {
    NEWEST_INDEX: ["desc(created)", "desc(content)", "desc(title)"],
    ACTIVE_INDEX: ["desc(active)", "desc(content)", "desc(title)"],
    SCORE_INDEX: ["desc(score)", "desc(content)", "desc(title)"],
}


def build_index_settings(base: str, template: str = DEFAULT_INDEX_SETTINGS) -> dict[str, Any]:
    """Parse the settings template and point its replicas at ``base``'s sort orders.

    Raises:
        ConfigurationError: If the template is not a JSON object.
    """
    try:
        settings = json.loads(template)
    except json.JSONDecodeError as e:
        raise ConfigurationError(f"Invalid Algolia index settings template: {e}") from e
    if not isinstance(settings, dict):
        raise ConfigurationError("Algolia index settings template must be a JSON object.")

    settings["replicas"] = [f"virtual({name})" for name in replica_index_names(base)]
    return settings

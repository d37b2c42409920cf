"""Registry index parsing."""

import json
import logging

from ui_scaffold.models.registry import ComponentEntry, RegistryIndex

logger = logging.getLogger(__name__)


def parse_registry_index(text: str) -> RegistryIndex:
    """Parse registry.json content into a RegistryIndex.

    The object key is the component name. An entry without a "name" field
    takes the key; an entry whose "name" disagrees with its key is indexed
    under the key.

    Raises:
        ValueError: If the content is not a JSON object of objects, or an
            entry fails validation (pydantic's ValidationError is a ValueError)
    """
    data = json.loads(text)
    if not isinstance(data, dict):
        msg = f"Registry index must be a JSON object, got {type(data).__name__}"
        raise ValueError(msg)

    entries: dict[str, ComponentEntry] = {}
    for key, raw in data.items():
        if not isinstance(raw, dict):
            msg = f"Registry entry '{key}' must be a JSON object"
            raise ValueError(msg)
        declared = raw.get("name")
        if declared is not None and declared != key:
            logger.warning("Registry entry '%s' declares name '%s'; using key", key, declared)
        entries[key] = ComponentEntry.model_validate({**raw, "name": key})

    return RegistryIndex(entries)

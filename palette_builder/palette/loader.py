import json
import logging

from .. import config
from ..color import InvalidColor, create_color_value

logger = logging.getLogger(__name__)


def load_palette_from_json(json_path):
    """Load a palette from JSON written by ``export_json``.

    A plain list of hex strings is accepted too. Entries that are not valid
    colors are skipped with a warning.

    Args:
        json_path: Path to palette JSON file

    Returns:
        tuple: (list of ColorValue, palette name)

    Raises:
        ValueError: if the file does not hold a list or a palette object
    """
    with open(json_path) as f:
        data = json.load(f)

    if isinstance(data, list):
        entries, name = data, config.DEFAULT_PALETTE_NAME
    elif isinstance(data, dict):
        entries = data.get("colors", [])
        name = data.get("name") or config.DEFAULT_PALETTE_NAME
    else:
        raise ValueError(f"Not a palette file: {json_path}")

    if not isinstance(entries, list):
        raise ValueError(f"Palette colors must be a list in {json_path}")

    palette = []
    seen_ids = set()
    for entry in entries:
        if isinstance(entry, str):
            entry = {"hex": entry}
        if not isinstance(entry, dict):
            logger.warning("Skipping palette entry %r in %s", entry, json_path)
            continue

        color_id = entry.get("id")
        if color_id in seen_ids:
            color_id = None
        try:
            color = create_color_value(
                entry.get("hex"), name=entry.get("name"), color_id=color_id
            )
        except InvalidColor as e:
            logger.warning("Skipping entry in %s: %s", json_path, e)
            continue

        seen_ids.add(color.id)
        palette.append(color)

    logger.info("Loaded %d colors from %s", len(palette), json_path)
    return palette, name

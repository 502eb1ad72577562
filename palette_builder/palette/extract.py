import logging

import numpy as np
from PIL import Image
from sklearn.cluster import KMeans

from .. import config
from ..color import create_color_value, new_color_id
from ..convert import rgb_to_hex

logger = logging.getLogger(__name__)


def extract_palette(image_path, count=config.DEFAULT_ACCESSIBLE_COUNT, id_factory=None):
    """Extract dominant colors using k-means clustering.

    Near-black and near-white pixels are ignored unless too few others remain.
    Colors are ordered by how many pixels fall in their cluster.

    Args:
        image_path: Path to the source image
        count: Maximum number of colors to return
        id_factory: Optional callable returning a fresh color id

    Returns:
        list of ColorValue named "Extracted 1", "Extracted 2", ...
    """
    if count < 1:
        raise ValueError(f"count must be at least 1, got {count}")
    id_factory = id_factory or new_color_id

    img = Image.open(image_path).convert("RGB")
    img.thumbnail(config.EXTRACT_THUMBNAIL)
    pixels = np.array(img).reshape(-1, 3)

    # Remove extreme pixels
    sums = pixels.sum(axis=1)
    mask = (sums > config.EXTRACT_MIN_SUM) & (sums < config.EXTRACT_MAX_SUM)
    filtered_pixels = pixels[mask]

    if len(filtered_pixels) < count:
        filtered_pixels = pixels

    n_clusters = min(count, len(np.unique(filtered_pixels, axis=0)))
    kmeans = KMeans(n_clusters=n_clusters, random_state=42, n_init=10)
    kmeans.fit(filtered_pixels)

    sizes = np.bincount(kmeans.labels_, minlength=n_clusters)
    order = np.argsort(-sizes, kind="stable")

    colors = []
    for rank, cluster in enumerate(order, start=1):
        r, g, b = kmeans.cluster_centers_[cluster]
        colors.append(
            create_color_value(
                rgb_to_hex(r, g, b), name=f"Extracted {rank}", color_id=id_factory()
            )
        )

    logger.info("Extracted %d colors from %s", len(colors), image_path)
    return colors

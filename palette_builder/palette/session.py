"""Palette editing session: the command interface a front end drives.

Every palette edit is committed to a HistoryManager as an immutable tuple of
ColorValue, so undo/redo just move the history cursor. Invalid colors are
rejected here with a logged warning and leave the palette untouched.
"""

import logging

from .. import config
from ..accessibility import accessibility_score, generate_accessible_palette
from ..color import (
    ColorValue,
    InvalidColor,
    create_color_value,
    new_color_id,
    parse_hex,
)
from ..convert import convert_color, random_color
from ..history import HistoryManager

logger = logging.getLogger(__name__)


def default_palette():
    return tuple(ColorValue(*entry) for entry in config.DEFAULT_PALETTE)


class PaletteSession:
    def __init__(
        self,
        palette=None,
        name=config.DEFAULT_PALETTE_NAME,
        capacity=config.HISTORY_CAPACITY,
        recent_colors=None,
        id_factory=None,
    ):
        """
        Args:
            palette: Initial colors, the starter palette if None
            name: Palette display name
            capacity: Maximum number of history snapshots
            recent_colors: Optional RecentColors updated when colors are added
            id_factory: Callable returning fresh color ids
        """
        self.id_factory = id_factory or new_color_id
        initial = default_palette() if palette is None else self._validated(palette)
        self.history = HistoryManager(initial, capacity=capacity)
        self.name = name
        self.card_size = config.DEFAULT_CARD_SIZE
        self.recent_colors = recent_colors

    @property
    def palette(self):
        return self.history.current()

    @property
    def can_undo(self):
        return self.history.can_undo()

    @property
    def can_redo(self):
        return self.history.can_redo()

    def __len__(self):
        return len(self.palette)

    def get(self, color_id):
        for color in self.palette:
            if color.id == color_id:
                return color
        return None

    def _validated(self, colors, taken=()):
        """Rebuild incoming colors with canonical hex and ids unique in the palette.

        Entries with an invalid hex are dropped with a warning.
        """
        seen = set(taken)
        result = []
        for c in colors:
            color_id = c.id if c.id is not None and c.id not in seen else None
            try:
                color = create_color_value(
                    c.hex, name=c.name, color_id=color_id or self.id_factory()
                )
            except InvalidColor as e:
                logger.warning("Skipping color %r: %s", c.id, e)
                continue
            seen.add(color.id)
            result.append(color)
        return tuple(result)

    def _commit(self, palette, action):
        self.history.commit(tuple(palette))
        logger.debug(
            "%s: %d colors, history %d/%d",
            action,
            len(palette),
            self.history.cursor + 1,
            len(self.history),
        )

    def add_color(self, hex_color, name=None):
        """Append a color. Returns the new ColorValue, or None if hex is invalid."""
        try:
            color = create_color_value(
                hex_color,
                name=name or f"Color {len(self.palette) + 1}",
                color_id=self.id_factory(),
            )
        except InvalidColor as e:
            logger.warning("Not adding color: %s", e)
            return None

        self._commit(self.palette + (color,), "add")
        if self.recent_colors is not None:
            self.recent_colors.push(color.hex)
        return color

    def add_random_color(self, rng=None):
        return self.add_color(random_color(rng))

    def add_colors(self, colors):
        """Append several colors as a single undoable edit.

        Invalid colors are skipped and clashing ids replaced with fresh ones.
        Returns the colors actually added.
        """
        colors = self._validated(colors, taken=(c.id for c in self.palette))
        if not colors:
            return []
        self._commit(self.palette + colors, "add_colors")
        return list(colors)

    def update_color(self, color_id, hex=None, name=None):
        """Change the hex and/or name of a color.

        Returns the updated ColorValue, or None when the id is unknown or the
        new hex is invalid.
        """
        current = self.get(color_id)
        if current is None:
            logger.warning("Not updating unknown color id %r", color_id)
            return None

        changes = {}
        if hex is not None:
            try:
                changes["hex"] = parse_hex(hex)
            except InvalidColor as e:
                logger.warning("Not updating color %r: %s", color_id, e)
                return None
        if name is not None:
            changes["name"] = name

        updated = current._replace(**changes)
        self._commit(
            tuple(updated if c.id == color_id else c for c in self.palette), "update"
        )
        return updated

    def remove_color(self, color_id):
        if self.get(color_id) is None:
            return False
        self._commit(tuple(c for c in self.palette if c.id != color_id), "remove")
        return True

    def clear(self):
        self._commit((), "clear")

    def undo(self):
        return self.history.undo()

    def redo(self):
        return self.history.redo()

    def reset_history(self):
        """Start a fresh session from the current palette"""
        self.history.reset()

    def generate_accessible(self, base_hex=None, count=config.DEFAULT_ACCESSIBLE_COUNT):
        """Append an accessible lightness ramp of ``base_hex``.

        The base defaults to the first palette color. With no base available, or
        an invalid one, nothing is added and an empty list is returned.
        """
        if base_hex is None:
            if not self.palette:
                return []
            base_hex = self.palette[0].hex
        try:
            colors = generate_accessible_palette(
                base_hex, count, id_factory=self.id_factory
            )
        except InvalidColor as e:
            logger.warning("Not generating accessible palette: %s", e)
            return []
        return self.add_colors(colors)

    def set_card_size(self, size):
        if size not in config.CARD_SIZES:
            raise ValueError(
                f"Unknown card size: {size}. Available: {', '.join(config.CARD_SIZES)}"
            )
        self.card_size = size

    def formats(self, color_id):
        color = self.get(color_id)
        return None if color is None else convert_color(color.hex)

    def score(self):
        return accessibility_score(self.palette)

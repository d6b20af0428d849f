from .qoi import QOI


def pixel_hash(pixel) -> int:
    """Calculates the index position for the color array."""
    r, g, b, a = pixel
    return (r * 3 + g * 5 + b * 7 + a * 11) % 64


class PixelCache:
    """
    The 64 entry array of previously seen pixels.

    One instance belongs to a single decode or encode pass. Slots start out
    as (0, 0, 0, 0) and are overwritten without any collision handling.
    """

    SIZE = 64

    __slots__ = ("_slots",)

    def __init__(self):
        self._slots = [QOI.QOI_ZERO_PIXEL] * self.SIZE

    def __getitem__(self, index: int):
        return self._slots[index]

    def __len__(self) -> int:
        return self.SIZE

    def store(self, pixel) -> int:
        """Put ``pixel`` in its slot and return the slot index."""
        index_pos = pixel_hash(pixel)
        self._slots[index_pos] = pixel
        return index_pos

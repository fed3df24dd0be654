from typing import List, Optional, Tuple

from .bmhd import CAMG_EHB

Color = Tuple[int, int, int]


def build_palette(cmap: Optional[bytes], camg: int, planes: int) -> List[Color]:
    """Build the palette from a CMAP payload.

    The palette always holds exactly ``2 ** min(planes, 8)`` entries, padded
    with black. In Extra-Half-Brite mode (six planes) entries 32-63 are the
    first 32 entries at half brightness, whatever the CMAP says about them.
    """
    palette = []
    if cmap is not None:
        for i in range(len(cmap) // 3):
            palette.append(tuple(cmap[i * 3:i * 3 + 3]))

    expected = 1 << min(planes, 8)
    del palette[expected:]
    while len(palette) < expected:
        palette.append((0, 0, 0))

    if camg & CAMG_EHB and planes == 6:
        palette[32:64] = [(r >> 1, g >> 1, b >> 1) for r, g, b in palette[:32]]

    return palette

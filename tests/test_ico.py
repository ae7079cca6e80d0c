from __future__ import annotations

import io
import struct

import pytest
from PIL import Image

from conftest import striped
from faviconkit.compositor import build_composite
from faviconkit.errors import IcoEncodeError
from faviconkit.exporter import export_sizes
from faviconkit.ico import ICO_SIZES, build_ico, ico_sizes
from faviconkit.options import Options


def directory_sizes(ico: bytes) -> list[int]:
    """Entry widths in on-disk directory order."""
    _, kind, count = struct.unpack_from("<HHH", ico, 0)
    assert kind == 1
    return [ico[6 + 16 * i] or 256 for i in range(count)]


@pytest.fixture(scope="module")
def pngs() -> dict[int, bytes]:
    composite = build_composite(striped(), Options(padding_pct=0.1, background="#336699"))
    return export_sizes(composite)


def test_ico_holds_three_entries_in_order(pngs) -> None:
    ico = build_ico(pngs)
    assert directory_sizes(ico) == [16, 32, 48]
    assert ico_sizes(ico) == [16, 32, 48]


def test_each_entry_is_its_exported_raster(pngs) -> None:
    with Image.open(io.BytesIO(build_ico(pngs))) as im:
        assert im.format == "ICO"
        assert set(im.info["sizes"]) == {(16, 16), (32, 32), (48, 48)}
        for size in ICO_SIZES:
            entry = im.ico.getimage((size, size)).convert("RGBA")
            with Image.open(io.BytesIO(pngs[size])) as png:
                assert entry.size == (size, size)
                assert entry.tobytes() == png.convert("RGBA").tobytes()


def test_extra_sizes_ignored(pngs) -> None:
    assert len(pngs) == 6
    assert directory_sizes(build_ico(pngs)) == list(ICO_SIZES)


def test_ico_is_deterministic(pngs) -> None:
    assert build_ico(pngs) == build_ico(pngs)


def test_missing_size_is_contract_violation(pngs) -> None:
    partial = {k: v for k, v in pngs.items() if k != 32}
    with pytest.raises(IcoEncodeError) as exc:
        build_ico(partial)
    assert str(exc.value) == "missing ico sizes: [32]"


def test_ico_sizes_rejects_non_icons(pngs) -> None:
    with pytest.raises(ValueError):
        ico_sizes(pngs[16])

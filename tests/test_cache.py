from qoicodec import PixelCache, pixel_hash


def test_hash_includes_alpha():
    assert pixel_hash((0, 0, 0, 0)) == 0
    assert pixel_hash((0, 0, 0, 255)) == (255 * 11) % 64
    assert pixel_hash((1, 2, 3, 4)) == (3 + 10 + 21 + 44) % 64


def test_new_cache_is_zeroed():
    cache = PixelCache()

    assert len(cache) == 64
    assert all(cache[i] == (0, 0, 0, 0) for i in range(64))


def test_store_overwrites_colliding_slot():
    cache = PixelCache()
    a = (1, 0, 0, 255)
    b = (0, 39, 0, 255)
    assert pixel_hash(a) == pixel_hash(b)

    slot = cache.store(a)
    assert cache[slot] == a

    assert cache.store(b) == slot
    assert cache[slot] == b


def test_caches_do_not_share_state():
    first = PixelCache()
    second = PixelCache()

    slot = first.store((10, 20, 30, 40))

    assert second[slot] == (0, 0, 0, 0)

import pytest

from wiringcore.ring_buffer import SERIAL_BUFFER_SIZE, RingBuffer


def test_default_size_holds_one_less():
    buf = RingBuffer()
    assert buf.available_for_store() == SERIAL_BUFFER_SIZE - 1


def test_fifo_order():
    buf = RingBuffer(8)
    for value in (1, 2, 3):
        assert buf.store(value) is True
    assert [buf.read(), buf.read(), buf.read()] == [1, 2, 3]
    assert buf.read() is None


def test_peek_does_not_consume():
    buf = RingBuffer(4)
    buf.store(9)
    assert buf.peek() == 9
    assert buf.available() == 1
    assert buf.read() == 9
    assert buf.peek() is None


def test_full_buffer_drops_new_bytes():
    buf = RingBuffer(4)
    stored = [buf.store(v) for v in (10, 20, 30, 40)]
    assert stored == [True, True, True, False]
    assert buf.is_full()
    assert [buf.read() for _ in range(3)] == [10, 20, 30]


def test_counts_invariant_through_wraparound():
    buf = RingBuffer(5)
    for round_ in range(12):
        buf.store(round_)
        buf.store(round_ + 100)
        buf.read()
        assert buf.available() + buf.available_for_store() == buf.size - 1
        assert len(buf) == buf.available()


def test_clear_empties():
    buf = RingBuffer(6)
    buf.store(1)
    buf.store(2)
    buf.clear()
    assert len(buf) == 0
    assert buf.read() is None
    assert not buf.is_full()


def test_size_one_never_stores():
    buf = RingBuffer(1)
    assert buf.is_full()
    assert buf.store(5) is False
    assert buf.read() is None


@pytest.mark.parametrize("value", [-1, 256])
def test_store_rejects_non_byte(value):
    with pytest.raises(ValueError):
        RingBuffer(4).store(value)


def test_invalid_size():
    with pytest.raises(ValueError):
        RingBuffer(0)
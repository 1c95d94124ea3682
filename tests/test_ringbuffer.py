import pytest

from sketchcore.ringbuffer import SERIAL_BUFFER_SIZE, RingBuffer


def test_default_size():
    rb = RingBuffer()
    assert rb.available_for_store() == SERIAL_BUFFER_SIZE == 64


def test_empty_reads():
    rb = RingBuffer(4)
    assert rb.read_char() == -1
    assert rb.peek() == -1
    assert len(rb) == 0


def test_fifo_order():
    rb = RingBuffer(4)
    for c in b"abc":
        assert rb.store_char(c)
    assert rb.peek() == ord("a")
    assert [rb.read_char() for _ in range(3)] == list(b"abc")
    assert rb.read_char() == -1


def test_full_buffer_drops():
    rb = RingBuffer(3)
    for c in (1, 2, 3):
        rb.store_char(c)
    assert rb.is_full()
    assert rb.store_char(4) is False
    assert rb.available() == 3
    assert [rb.read_char() for _ in range(3)] == [1, 2, 3]


def test_wraparound():
    rb = RingBuffer(3)
    out = []
    for c in range(10):
        rb.store_char(c)
        if rb.available() == 2:
            out.append(rb.read_char())
    while rb.available():
        out.append(rb.read_char())
    assert out == list(range(10))


def test_values_are_bytes():
    rb = RingBuffer(2)
    rb.store_char(0x1FF)
    assert rb.read_char() == 0xFF


def test_clear_and_counts():
    rb = RingBuffer(5)
    rb.store_char(1)
    rb.store_char(2)
    assert rb.available() + rb.available_for_store() == 5
    rb.clear()
    assert len(rb) == 0
    assert rb.available_for_store() == 5


def test_invalid_size():
    with pytest.raises(ValueError):
        RingBuffer(0)
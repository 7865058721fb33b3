# tcpseqno

TCP carries sequence and acknowledgment numbers as 32-bit values. These values start at an arbitrary initial sequence number (ISN) and wrap around. A byte stream is indexed from zero with a 64-bit counter instead. `tcpseqno` converts between the two.

## Installation

```
pip install tcpseqno
```

## Usage

```python
from tcpseqno.wrapping import WrappingInt32, wrap, unwrap

isn = WrappingInt32(2**32 - 2)

# absolute 64-bit sequence number -> 32-bit wire value
seqno = wrap(3, isn)
print(seqno)                                 # 1

# 32-bit wire value -> absolute sequence number closest to a checkpoint
print(unwrap(seqno, isn, checkpoint=0))      # 3

# arithmetic wraps modulo 2**32
print(WrappingInt32(2**32 - 1) + 1)          # 0
print(WrappingInt32(5) - WrappingInt32(10))  # -5 (signed 32-bit distance)
print(WrappingInt32(0) - 1)                  # 4294967295
```

### `WrappingInt32`

`WrappingInt32` is a frozen dataclass that holds one value, `raw_value`. When the object is built, the value is reduced modulo 2**32. A value that is not an integer raises `TypeError`.

The class supports these operations:

- `a + n`, `n + a` and `a - n` with an integer `n` step forward or back. The result wraps modulo 2**32.
- `a - b` with another `WrappingInt32` gives the signed 32-bit offset from `b` to `a`. It is negative when going back from `b` to `a` takes no more steps than going forward.
- `==` compares two values, and the objects can be hashed.
- `int(a)` and `str(a)` give the raw value.

### `wrap(n, isn)`

`wrap` turns an absolute sequence number `n` into the 32-bit value relative to `isn`.

### `unwrap(n, isn, checkpoint)`

`unwrap` returns the absolute sequence number that wraps to `n` and is closest to `checkpoint`:

- When two candidates are equally close, it returns the smaller one.
- The result is always in the unsigned 64-bit range.

Each direction of a TCP connection has its own ISN. Use the ISN that belongs to the stream being decoded.

### Errors

`wrap` checks its `n` argument, and `unwrap` checks its `checkpoint` argument:

- A value that is not an integer raises `TypeError`.
- A value outside the unsigned 64-bit range raises `ValueError`.

## Scope

The package handles only the sequence-number arithmetic. It has no TCP sender, receiver or connection, it does not reassemble streams, and it does not parse or build segments.

## Running the tests

```
pip install -e ".[test]"
pytest
```
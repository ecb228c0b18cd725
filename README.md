# netsystem

Small building blocks for working with UTF-16 code units and raw values.
There are no third-party dependencies.

## Modules

- `netsystem.char`: the frozen, ordered `Char` value type. It holds one
  UTF-16 code unit from 0 to 0xFFFF and has `compare_to`, `str()`, `int()`
  and a hash. The module also has these classification functions:
  `is_digit`, `is_letter`, `is_white_space`, `is_upper`, `is_lower`,
  `is_punctuation`, `is_symbol`, `is_separator`, `is_control`, `is_number`
  and `is_letter_or_digit`. For surrogates it has `is_surrogate`,
  `is_high_surrogate`, `is_low_surrogate`, `is_surrogate_pair` and
  `convert_to_utf32`. It also has `parse`, `try_parse`,
  `get_unicode_category` and `get_numeric_value`. Every function takes
  either a one-character string or an integer code unit.
- `netsystem.unicode_category`: the `UnicodeCategory` integer enumeration,
  numbered 0 to 29.
- `netsystem.char_unicode_info`: `get_unicode_category` and
  `get_numeric_value`. They take a one-character string, a code point, or a
  string together with an index. At a string index, a surrogate pair is joined
  into one code point before the lookup. `get_numeric_value` returns `-1.0`
  for characters that have no numeric value.
- `netsystem.latin1`: a fixed category table for U+0000 to U+00FF, with
  `latin1_category`, `is_latin1`, `is_ascii` and `code_unit`.
- `netsystem.char_enumerator`: `CharEnumerator`, a cursor over a string. It
  has `move_next()`, a `current` property and `reset()`, and it can also be
  iterated with `for`.
- `netsystem.fixed_array`: `Array`, a fixed-length, bounds-checked sequence.
  It rejects negative indices. An optional `factory` supplies the value of
  new and cleared slots; without one, that value is `None`. The module also
  has the range helpers `copy` and `clear`.
- `netsystem.byte`: the frozen, ordered `Byte` value type, holding 0 to 255.
  It has `compare_to`.
- `netsystem.number_styles`: the `NumberStyles` flag set.
- `netsystem.binary_primitives`: `reverse_endianness` for 8, 16, 32 and
  64-bit integers, signed or unsigned, and `int64_bits_to_double`.
- `netsystem.hashing`: `get_hash_code` (signed 32-bit hash codes),
  `pointer_to_hash_code`, `to_string` (`None` gives `"null"`, booleans give
  `"True"` / `"False"`), `utf16_length` and `utf32_length`. The two length
  functions count units up to the first zero.

## Installation

```
pip install netsystem
```

## Examples

```python
from netsystem import char

char.is_letter(ord("a"))                         # True
char.get_unicode_category(ord("$"))              # UnicodeCategory.CurrencySymbol
char.convert_to_utf32(0xD83D, 0xDE00)            # 0x1F600
char.parse("x")                                  # "x"
char.try_parse("xy")                             # None
```

```python
from netsystem.fixed_array import Array, copy, clear

source = Array.from_items([1, 2, 3, 4])
target = Array(4, factory=int)
copy(source, 1, target, 0, 3)
list(target)                                     # [2, 3, 4, 0]
clear(target, 0, 2)
list(target)                                     # [0, 0, 4, 0]
```

```python
from netsystem.binary_primitives import reverse_endianness

reverse_endianness(0x1234, 16, False)            # 0x3412
```

```python
from netsystem.char_enumerator import CharEnumerator

cursor = CharEnumerator("ab")
cursor.move_next()                               # True
cursor.current                                   # "a"
```

Invalid arguments raise standard Python exceptions:

- `IndexError` for an index outside an array or string.
- `ValueError` for bad lengths, ranges and surrogate pairs.
- `TypeError` for values of the wrong kind.
- `RuntimeError` when you read `CharEnumerator.current` before the first
  character or after the last one.

## What it does not do

- `NumberStyles` is only a set of flags. The package has no function that
  parses numbers from strings.
- The package does no case conversion of characters.
- `Byte` has no string form or parsing beyond the ordinary dataclass
  representation.

## Running the tests

```
pip install "netsystem[test]"
pytest
```
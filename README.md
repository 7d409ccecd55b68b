# lamina

The built-in function library of the Lamina language, written in pure Python
with no third-party dependencies.

## Modules

- `lamina.irrational`: `Irrational` and `IrrationalType`. An `Irrational`
  holds `a·√n` (square factors are taken out of `n`), `a·π`, `a·e`, or a sum
  of such terms with a constant. It supports `+`, `-`, `*`, `/`, unary `-`,
  `abs()`, integer `**`, comparisons (based on the float value), `float()`
  and `str()`.
- `lamina.cas`: expression trees (`Number`, `Variable`, `Add`, `Multiply`,
  `Power`, all subclasses of `Expr`), each with `simplify()`,
  `differentiate(var)` and `evaluate(variables)`. `Parser` and
  `parse_expression(text)` read `+`, `*`, `^` (right-associative), parentheses,
  numbers and names.
- `lamina.cas_functions`: `cas_parse`, `cas_simplify`, `cas_differentiate`,
  `cas_evaluate` (extra arguments such as `"x=3"` bind variables),
  `cas_evaluate_at`, `cas_solve_linear`, `cas_numerical_derivative`,
  `to_expression`, `from_expression`, and `ExpressionStore` for named
  expressions. Failures raise `CasError`.
- `lamina.lstruct`: `LStruct`, a string-keyed hash table using 64-bit FNV-1a
  (`hash_string`), with `insert`, `find`, `to_list`, `len()` and iteration
  over keys; plus `get_attr` (raises `AttributeError` when missing),
  `set_attr` and `update`.
- `lamina.arrays`: `make_range`, `visit` (a chain of indices into nested
  lists) and `visit_by_str` (lookup in a flat key/value list).
- `lamina.strings`: `concat`, `char_at` (returns the character code),
  `length`, `find`, `sub_string`, `replace_by_index`.
- `lamina.randomness`: `rand`, `randint` (inclusive bounds) and `randstr`
  (letters and digits).
- `lamina.dates`: `get_time` (Unix seconds), `get_date` (`YYYY-MM-DD`) and
  `format_date`, which takes only the characters `Y`, `m`, `d` and `-`, and
  drops the dashes from the result.
- `lamina.mathfuncs`: `pi`, `e`, `absolute`, `sin`, `cos`, `tan`, `log`,
  `round_int`, `floor_int`, `ceil_int`, `size`, `idiv`, `decimal`, `power`,
  `gcd`, `lcm`. Conversions that may lose precision issue a `UserWarning`.
- `lamina.stdio`: `format_value`, `read_input`, `print_values`,
  `file_put_content` (the file must already exist), `file_get_content`,
  `execute` (runs a shell command and raises `RuntimeError` on a non-zero
  exit), `exist`, `touch_file`, and `check` (raises `AssertionError`).
- `lamina.netsockets`: `SocketRegistry` manages `LaminaSocket` objects by
  integer id. `create` starts an IPv4 TCP server, `connect` opens a TCP client,
  `udp_create` and `udp_send` handle UDP. `poll(timeout)` and `run()` accept
  connections and queue received data, which `recv` returns and any callback
  given to `register_receive_callback` receives as `(socket_id, data)`.
  `SocketKind` and `SocketState` are the enums it uses.

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Examples

```python
from lamina.irrational import Irrational

root = Irrational.sqrt(8)          # simplified to 2√2
print(root)                        # 2√2
print(float(root * root))          # 8.0
print(Irrational.pi(2) + Irrational.e())

from lamina.cas_functions import cas_differentiate, cas_solve_linear

print(cas_differentiate("x^3 + 2*x", "x"))
print(cas_solve_linear("2*x + 4", "x"))   # -2.0

from lamina.lstruct import LStruct, get_attr, set_attr

point = LStruct([("x", 1), ("y", 2)])
set_attr(point, "z", 3)
print(get_attr(point, "z"))        # 3

from lamina.strings import replace_by_index
print(replace_by_index("hello", 1, "EL"))  # hELlo
```

Invalid arguments raise Python exceptions. They are not printed and skipped.

## What this package does not do

It is a library of the functions that Lamina programs call. It has no
lexer, parser or evaluator for the Lamina language itself, no interactive
prompt, no command-line program, and no loader for native extension modules.
Network support covers IPv4 only; `SocketRegistry.create` accepts only
protocol `4` with kind `0` (TCP).